"""Block model shared by theming, review and generation."""

from __future__ import annotations

import copy
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Block(BaseModel):
    """A landing page block: a type tag and a loosely-typed content record.

    Extra top-level keys (ids, generation reasons) are preserved as-is.

    Example:
        >>> block = Block.model_validate({"blockType": "top-hero-1", "content": {}})
        >>> block.block_type
        'top-hero-1'
    """

    block_type: str = Field(alias="blockType", description="Block type tag, e.g. 'top-hero-1'")
    content: dict[str, Any] = Field(default_factory=dict, description="Block content fields")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    @field_validator("content", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def with_content(self, content: dict[str, Any]) -> Block:
        """Return a copy of this block carrying new content."""
        return self.model_copy(update={"content": content})

    def content_copy(self) -> dict[str, Any]:
        """Deep copy of the content, safe to modify."""
        return copy.deepcopy(self.content)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the wire field names (``blockType``)."""
        return self.model_dump(by_alias=True)


__all__ = [
    "Block",
]
