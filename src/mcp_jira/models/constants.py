"""
Constants and default values for ADF conversions.

This module centralizes the wire discriminators and fallbacks used when
converting between ADF dictionaries and the node models.
"""

EMPTY_STRING = ""

#
# Document defaults
#
ADF_DOC_TYPE = "doc"
ADF_VERSION = 1

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

#
# Marks, in the order delimiters are applied from innermost to outermost
#
MARK_STRONG = "strong"
MARK_EM = "em"
MARK_STRIKE = "strike"
MARK_CODE = "code"
MARK_LINK = "link"
MARK_ORDER = (MARK_STRONG, MARK_EM, MARK_STRIKE, MARK_CODE, MARK_LINK)

#
# Read path defaults
#
DEFAULT_MEDIA_PLACEHOLDER = "[media]"
MEDIA_NODE_TYPES = ("mediaSingle", "mediaGroup")
