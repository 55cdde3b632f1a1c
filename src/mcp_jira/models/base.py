"""
Base model and helpers for the ADF node models.

Every node is a frozen pydantic model: once built it can be shared and
hashed but never changed.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

# Type variable for the return type of from_adf
T = TypeVar("T", bound="AdfModel")


class AdfModel(BaseModel):
    """
    Base model for all ADF nodes with common conversion methods.

    Subclasses convert from a wire dictionary (`from_adf`) and back
    (`to_adf`).
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_adf(cls: type[T], data: dict[str, Any]) -> T | None:
        """
        Convert a wire dictionary to a node instance.

        Args:
            data: The ADF node as received from the backend

        Returns:
            An instance of the model, or None if the node carries nothing usable

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_adf")

    def to_adf(self) -> dict[str, Any]:
        """
        Convert the node to its wire dictionary.

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement to_adf")


def node_attrs(data: dict[str, Any]) -> dict[str, Any]:
    """Return the `attrs` map of a wire node, or an empty dict if malformed."""
    attrs = data.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def node_content(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the dict children of a wire node's `content`, ignoring anything else."""
    content = data.get("content")
    if not isinstance(content, list):
        return []
    return [child for child in content if isinstance(child, dict)]


def node_type(data: Any) -> str | None:
    """Return the `type` discriminator of a wire node, or None."""
    if not isinstance(data, dict):
        return None
    value = data.get("type")
    return value if isinstance(value, str) else None
