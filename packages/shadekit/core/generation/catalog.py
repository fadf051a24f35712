"""Block template catalog interface and a small built-in catalog.

The full template catalog lives with the page builder. Generation only needs
a name and default content per block type, so it depends on the
:class:`TemplateCatalog` protocol; :data:`BUILTIN_CATALOG` covers the default
generation sequence.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class BlockTemplate(BaseModel):
    """A block type with its display name and default content."""

    block_type: str = Field(description="Block type tag")
    name: str = Field(description="Human-readable template name")
    default_content: dict[str, Any] = Field(default_factory=dict, description="Default content")

    model_config = ConfigDict(frozen=True)


class TemplateCatalog(Protocol):
    """Lookup of block templates by type."""

    def get(self, block_type: str) -> BlockTemplate | None:
        """Return the template for ``block_type``, or None if unknown."""
        ...


class InMemoryTemplateCatalog:
    """Catalog backed by a dict of templates.

    Example:
        >>> catalog = InMemoryTemplateCatalog([BlockTemplate(block_type="x", name="X")])
        >>> catalog.get("x").name
        'X'
    """

    def __init__(self, templates: list[BlockTemplate] | None = None) -> None:
        self._templates: dict[str, BlockTemplate] = {}
        for template in templates or []:
            self.add(template)

    def add(self, template: BlockTemplate) -> None:
        self._templates[template.block_type] = template

    def get(self, block_type: str) -> BlockTemplate | None:
        return self._templates.get(block_type)

    def __contains__(self, block_type: object) -> bool:
        return block_type in self._templates

    def __len__(self) -> int:
        return len(self._templates)


BUILTIN_CATALOG = InMemoryTemplateCatalog(
    [
        BlockTemplate(
            block_type="hero-aurora",
            name="Aurora Hero",
            default_content={
                "title": "あなたの商品名で、理想の成果を最短で実現",
                "subtitle": "商品の魅力をひと言で伝えるサブコピーを入力してください。",
                "highlightText": "期間限定オファー",
                "buttonText": "今すぐ申し込む",
                "backgroundColor": "#111827",
                "textColor": "#FFFFFF",
                "buttonColor": "#DC2626",
                "accentColor": "#F59E0B",
                "padding": "96px 24px",
            },
        ),
        BlockTemplate(
            block_type="features-aurora",
            name="Aurora Features",
            default_content={
                "title": "選ばれる3つの理由",
                "features": [
                    {"title": "理由1", "description": "特徴の説明を入力してください。", "iconColor": "#F59E0B"},
                    {"title": "理由2", "description": "特徴の説明を入力してください。", "iconColor": "#F59E0B"},
                    {"title": "理由3", "description": "特徴の説明を入力してください。", "iconColor": "#F59E0B"},
                ],
                "backgroundColor": "#111827",
                "textColor": "#FFFFFF",
                "titleColor": "#FFFFFF",
                "accentColor": "#F59E0B",
                "padding": "80px 24px",
            },
        ),
        BlockTemplate(
            block_type="problem-1",
            name="Problem List",
            default_content={
                "title": "こんなお悩みはありませんか？",
                "problems": ["悩み1", "悩み2", "悩み3"],
                "backgroundColor": "#1F2937",
                "textColor": "#FFFFFF",
                "titleColor": "#FFFFFF",
                "accentColor": "#EF4444",
                "padding": "80px 24px",
            },
        ),
        BlockTemplate(
            block_type="bonus-list-1",
            name="Bonus List",
            default_content={
                "title": "今だけの特典",
                "bonuses": [
                    {"title": "特典1", "description": "特典の内容を入力してください。"},
                    {"title": "特典2", "description": "特典の内容を入力してください。"},
                ],
                "backgroundColor": "#111827",
                "textColor": "#FFFFFF",
                "titleColor": "#FFFFFF",
                "accentColor": "#F59E0B",
                "padding": "80px 24px",
            },
        ),
        BlockTemplate(
            block_type="guarantee-1",
            name="Guarantee",
            default_content={
                "title": "全額返金保証",
                "description": "ご満足いただけなければ全額返金いたします。",
                "badgeText": "安心保証",
                "backgroundColor": "#1F2937",
                "textColor": "#FFFFFF",
                "titleColor": "#FFFFFF",
                "badgeColor": "#F59E0B",
                "padding": "64px 24px",
            },
        ),
        BlockTemplate(
            block_type="sticky-cta-1",
            name="Sticky CTA",
            default_content={
                "buttonText": "今すぐ申し込む",
                "subText": "残りわずか",
                "backgroundColor": "#111827",
                "textColor": "#FFFFFF",
                "buttonColor": "#DC2626",
            },
        ),
    ]
)


__all__ = [
    "BUILTIN_CATALOG",
    "BlockTemplate",
    "InMemoryTemplateCatalog",
    "TemplateCatalog",
]
