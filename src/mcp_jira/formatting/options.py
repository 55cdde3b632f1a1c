"""Per-call options for Markdown/ADF conversion."""

from collections.abc import Iterable
from dataclasses import dataclass

from ..models.constants import DEFAULT_MEDIA_PLACEHOLDER


@dataclass(frozen=True)
class ConversionOptions:
    """Options passed explicitly to every conversion call.

    Attributes:
        code_languages: Lower-case fence languages to keep on code blocks.
            None accepts any language tag.
        media_placeholder: Text rendered in place of media nodes.
    """

    code_languages: frozenset[str] | None = None
    media_placeholder: str = DEFAULT_MEDIA_PLACEHOLDER

    @classmethod
    def with_languages(cls, languages: Iterable[str], **kwargs: str) -> "ConversionOptions":
        """Build options restricting code fences to `languages`."""
        return cls(
            code_languages=frozenset(lang.strip().lower() for lang in languages if lang.strip()),
            **kwargs,
        )

    def accepts_language(self, language: str) -> bool:
        if self.code_languages is None:
            return True
        return language.lower() in self.code_languages


DEFAULT_OPTIONS = ConversionOptions()
