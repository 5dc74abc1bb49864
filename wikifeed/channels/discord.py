"""Discord channel adapter."""

from typing import Optional

from wikifeed.channels import ChannelPayload
from wikifeed.channels.validate import validate_discord_webhook_url
from wikifeed.config import settings
from wikifeed.embeds import Payload


def format_discord(payload: Payload, webhook_url: Optional[str] = None) -> ChannelPayload:
    """
    Wrap a built payload into the request for a Discord webhook.

    ``webhook_url`` defaults to the configured ``WIKIFEED_WEBHOOK_URL``.
    Raises ValueError if the URL is not a Discord webhook.
    """
    if webhook_url is None:
        webhook_url = settings.webhook_url

    err = validate_discord_webhook_url(webhook_url)
    if err:
        raise ValueError(err)

    return ChannelPayload(
        method="POST",
        url=webhook_url,
        headers={
            "Content-Type": "application/json",
            "User-Agent": "wikifeed",
        },
        body=payload.to_json(),
    )
