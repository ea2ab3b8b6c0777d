"""Base model for all copybench Pydantic models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CopyBenchBaseModel(BaseModel):
    """Base model class for all copybench Pydantic models.

    Serialization is JSON-compatible so configs can be logged or dumped
    without further conversion.
    """

    model_config = ConfigDict(
        extra="forbid",
        # Whitespace is significant: line terminators are plain strings
        str_strip_whitespace=False,
        use_enum_values=False,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary using JSON-compatible serialization."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones)."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
