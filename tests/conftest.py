"""Shared fixtures: isolated settings and change event factories."""

from datetime import datetime, timezone

import pytest

from wikifeed.config import Settings
from wikifeed.schemas.change import ChangeEvent

WHEN = datetime(2024, 1, 15, 15, 4, tzinfo=timezone.utc)


@pytest.fixture
def feed_settings() -> Settings:
    return Settings(
        _env_file=None,
        log_color=0x0000FF,
        log_icon="https://icons.example.org/log.png",
        edit_add_color=0x00FF00,
        edit_add_icon="https://icons.example.org/add.png",
        edit_remove_color=0xFF0000,
        edit_remove_icon="https://icons.example.org/remove.png",
        edit_neutral_color=0x000000,
        edit_neutral_icon="https://icons.example.org/neutral.png",
        show_log_parameters=True,
        site={"server": "https://wiki.example.org", "article_path": "/wiki/$1"},
    )


@pytest.fixture
def make_edit():
    def factory(**overrides) -> ChangeEvent:
        data = {
            "kind": "edit",
            "title": "Main Page",
            "user": "Alice",
            "timestamp": WHEN,
            "comment": "fix typo",
            "revision_id": 12,
            "old_revision_id": 11,
            "old_length": 100,
            "new_length": 120,
        }
        data.update(overrides)
        return ChangeEvent(**data)

    return factory


@pytest.fixture
def make_log():
    def factory(**overrides) -> ChangeEvent:
        data = {
            "kind": "log",
            "title": "Some Page",
            "user": "Alice",
            "timestamp": WHEN,
            "comment": None,
            "log_id": 42,
            "log_type": "delete",
            "log_action": "delete",
            "log_params": {},
        }
        data.update(overrides)
        return ChangeEvent(**data)

    return factory
