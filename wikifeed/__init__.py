"""Recent-change notifications for Discord webhooks."""

from wikifeed.builder import build
from wikifeed.config import Settings, StyleKey, settings
from wikifeed.embeds import Embed, EmbedField, Payload
from wikifeed.schemas.change import ChangeEvent, ChangeKind

__all__ = [
    "build",
    "ChangeEvent",
    "ChangeKind",
    "Embed",
    "EmbedField",
    "Payload",
    "Settings",
    "StyleKey",
    "settings",
]
