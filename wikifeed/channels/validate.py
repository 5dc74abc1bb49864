"""Config validation for the Discord webhook target."""

from typing import Optional
from urllib.parse import urlparse

DISCORD_HOSTS = ("discord.com", "discordapp.com", "canary.discord.com", "ptb.discord.com")


def validate_discord_webhook_url(url) -> Optional[str]:
    """
    Check a Discord webhook URL.
    Returns None if valid, or an error message string if invalid.
    """
    err = _validate_url(url, "webhook_url")
    if err:
        return err
    parsed = urlparse(url)
    if parsed.hostname not in DISCORD_HOSTS or not parsed.path.startswith("/api/webhooks/"):
        return "webhook_url must be a discord.com webhook URL"
    return None


def _validate_url(value, field_name: str) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            return f"{field_name} must use http or https protocol"
        if not parsed.netloc:
            return f"{field_name} is not a valid URL"
    except ValueError:
        return f"{field_name} is not a valid URL"
    return None
