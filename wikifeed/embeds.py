"""
Discord webhook value objects.

Setters return the object itself so an embed can be assembled in one chained
expression. ``serialize()`` produces the JSON-ready mapping; each class lists
exactly which keys it drops and when:

- EmbedField: ``name``/``value`` when empty, ``inline`` when False.
- Embed: every part that was never set. ``color`` 0 is kept.
- Payload: ``embeds`` when empty. ``content`` is always present, even as null.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

MAX_COLOR = 0xFFFFFF


@dataclass
class EmbedField:
    name: Optional[str] = None
    value: Optional[str] = None
    inline: bool = False

    def set_name(self, name: str) -> "EmbedField":
        self.name = name
        return self

    def set_value(self, value: str) -> "EmbedField":
        self.value = value
        return self

    def set_inline(self, inline: bool) -> "EmbedField":
        self.inline = inline
        return self

    def is_complete(self) -> bool:
        return bool(self.name) and bool(self.value)

    def serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        if self.value:
            data["value"] = self.value
        if self.inline:
            data["inline"] = True
        return data


@dataclass
class Embed:
    """A single rich message block: author line, colored bar, text, fields, footer."""
    author: Optional[str] = None
    author_url: Optional[str] = None
    author_icon_url: Optional[str] = None
    color: Optional[int] = None
    description: Optional[str] = None
    footer_text: Optional[str] = None
    fields: list[EmbedField] = field(default_factory=list)

    def set_author(self, name: str) -> "Embed":
        self.author = name
        return self

    def set_author_url(self, url: str) -> "Embed":
        self.author_url = url
        return self

    def set_author_icon_url(self, url: str) -> "Embed":
        self.author_icon_url = url
        return self

    def set_color(self, color: int) -> "Embed":
        if not 0 <= color <= MAX_COLOR:
            raise ValueError(f"Embed color must be between 0 and {MAX_COLOR:#08x}, got {color}")
        self.color = color
        return self

    def set_description(self, description: str) -> "Embed":
        self.description = description
        return self

    def set_footer_text(self, text: str) -> "Embed":
        self.footer_text = text
        return self

    def add_field(self, embed_field: EmbedField) -> "Embed":
        self.fields.append(embed_field)
        return self

    def serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {}

        author = {}
        if self.author:
            author["name"] = self.author
        if self.author_url:
            author["url"] = self.author_url
        if self.author_icon_url:
            author["icon_url"] = self.author_icon_url
        if author:
            data["author"] = author

        if self.color is not None:
            data["color"] = self.color
        if self.description:
            data["description"] = self.description
        if self.footer_text:
            data["footer"] = {"text": self.footer_text}

        # Discord rejects fields without both a name and a value
        fields = [f.serialize() for f in self.fields if f.is_complete()]
        if fields:
            data["fields"] = fields

        return data


@dataclass
class Payload:
    """Top-level webhook body."""
    content: Optional[str] = None
    embeds: list[Embed] = field(default_factory=list)

    def set_content(self, content: Optional[str]) -> "Payload":
        self.content = content
        return self

    def add_embed(self, embed: Embed) -> "Payload":
        self.embeds.append(embed)
        return self

    def serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {"content": self.content}
        if self.embeds:
            data["embeds"] = [embed.serialize() for embed in self.embeds]
        return data

    def to_json(self) -> str:
        return json.dumps(self.serialize(), ensure_ascii=False)
