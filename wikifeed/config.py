"""Feed settings: embed styles, log parameter toggle and wiki site context."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from wikifeed.channels.validate import validate_discord_webhook_url


class StyleKey(str, Enum):
    """Which branch of the payload builder an embed style belongs to."""
    LOG_ENTRY = "log_entry"
    EDIT_ADD = "edit_add"
    EDIT_REMOVE = "edit_remove"
    EDIT_NEUTRAL = "edit_neutral"


@dataclass(frozen=True)
class EmbedStyle:
    """Color and author icon applied to an embed."""
    color: int
    icon: str


class Site(BaseModel):
    """Where the wiki lives; used to turn page titles into URLs."""

    server: str = "https://wiki.example.org"
    article_path: str = Field("/wiki/$1", description="Path template, $1 is the page title")

    @field_validator("server")
    @classmethod
    def _check_server(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("server must use http or https protocol")
        return value.rstrip("/")

    @field_validator("article_path")
    @classmethod
    def _check_article_path(cls, value: str) -> str:
        if "$1" not in value:
            raise ValueError("article_path must contain $1")
        return value

    def page_url(self, title: str) -> str:
        """Full URL of a page, e.g. ``Special:Diff/1/2`` or ``User:Foo Bar``."""
        fragment = ""
        if "#" in title:
            title, fragment = title.split("#", 1)
            fragment = "#" + quote(fragment.strip().replace(" ", "_"), safe=":/")
        path = quote(title.strip().replace(" ", "_"), safe=";@$!*(),/:")
        return self.server + self.article_path.replace("$1", path) + fragment


class Settings(BaseSettings):
    # Embed styles, one pair per builder branch
    log_color: int = 0x1E90FF
    log_icon: str = "https://upload.wikimedia.org/wikipedia/commons/thumb/3/3b/OOjs_UI_icon_info-progressive.svg/240px-OOjs_UI_icon_info-progressive.svg.png"
    edit_add_color: int = 0x2ECC71
    edit_add_icon: str = "https://upload.wikimedia.org/wikipedia/commons/thumb/1/16/OOjs_UI_icon_add-constructive.svg/240px-OOjs_UI_icon_add-constructive.svg.png"
    edit_remove_color: int = 0xE74C3C
    edit_remove_icon: str = "https://upload.wikimedia.org/wikipedia/commons/thumb/0/07/OOjs_UI_icon_subtract-destructive.svg/240px-OOjs_UI_icon_subtract-destructive.svg.png"
    edit_neutral_color: int = 0x95A5A6
    edit_neutral_icon: str = "https://upload.wikimedia.org/wikipedia/commons/thumb/8/8c/OOjs_UI_icon_edit-ltr.svg/240px-OOjs_UI_icon_edit-ltr.svg.png"

    # Render log parameters as embed fields
    show_log_parameters: bool = True

    site: Site = Field(default_factory=Site)

    # Discord webhook the external sender posts to (may be left empty)
    webhook_url: str = ""

    model_config = {
        "env_file": ".env",
        "env_prefix": "WIKIFEED_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    @field_validator("log_color", "edit_add_color", "edit_remove_color", "edit_neutral_color")
    @classmethod
    def _check_color(cls, value: int) -> int:
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError("color must be a 24-bit integer")
        return value

    @field_validator("webhook_url")
    @classmethod
    def _check_webhook_url(cls, value: str) -> str:
        if value:
            err = validate_discord_webhook_url(value)
            if err:
                raise ValueError(err)
        return value

    def style_for(self, key: StyleKey) -> EmbedStyle:
        """Resolve the color/icon pair for a builder branch."""
        styles = {
            StyleKey.LOG_ENTRY: EmbedStyle(self.log_color, self.log_icon),
            StyleKey.EDIT_ADD: EmbedStyle(self.edit_add_color, self.edit_add_icon),
            StyleKey.EDIT_REMOVE: EmbedStyle(self.edit_remove_color, self.edit_remove_icon),
            StyleKey.EDIT_NEUTRAL: EmbedStyle(self.edit_neutral_color, self.edit_neutral_icon),
        }
        return styles[key]


settings = Settings()
