"""Pydantic schema for a single recent-change record."""

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ChangeKind(str, Enum):
    LOG = "log"
    EDIT = "edit"
    NEW = "new"
    OTHER = "other"


# Numeric rc_type values used by the wiki's recentchanges table
_RC_TYPES = {0: ChangeKind.EDIT, 1: ChangeKind.NEW, 3: ChangeKind.LOG}

_WIKI_TIMESTAMP = re.compile(r"^\d{14}$")


class ChangeEvent(BaseModel):
    kind: ChangeKind = Field(ChangeKind.OTHER, description="log, edit, new or other")
    title: str = Field("", description="Prefixed page title, e.g. 'Talk:Main Page'")
    namespace: int = 0
    page_url: Optional[str] = Field(None, description="Full page URL; derived from the site when omitted")
    user: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    comment: Optional[str] = None
    action_comment: Optional[str] = Field(
        None, description="Summary generated by the action itself, used when comment is empty"
    )

    # Edits and page creations
    revision_id: Optional[int] = None
    old_revision_id: Optional[int] = None
    old_length: Optional[int] = None
    new_length: Optional[int] = None

    # Log entries
    log_id: Optional[int] = None
    log_type: Optional[str] = None
    log_action: Optional[str] = None
    log_params: Any = None

    model_config = {"frozen": True}

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> ChangeKind:
        if isinstance(value, ChangeKind):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return _RC_TYPES.get(value, ChangeKind.OTHER)
        try:
            return ChangeKind(str(value).lower())
        except ValueError:
            return ChangeKind.OTHER

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_wiki_timestamp(cls, value: Any) -> Any:
        # 20240102030405 -> 2024-01-02T03:04:05Z
        if isinstance(value, str) and _WIKI_TIMESTAMP.match(value):
            return datetime.strptime(value, "%Y%m%d%H%M%S").replace(tzinfo=timezone.utc)
        return value

    @field_validator("old_revision_id")
    @classmethod
    def _zero_means_none(cls, value: Optional[int]) -> Optional[int]:
        # A page creation is recorded with previous revision 0
        return value or None

    @property
    def summary(self) -> str:
        """The edit summary, falling back to the action's own comment."""
        return self.comment or self.action_comment or ""

    @property
    def is_creation(self) -> bool:
        return self.old_revision_id is None
