"""Turn a change event into a Discord webhook payload."""

import json
import logging
from typing import Optional

from wikifeed.config import Settings, Site, StyleKey, settings
from wikifeed.embeds import Embed, EmbedField, Payload
from wikifeed.log_params import ListParams, MappingParams, ScalarParams, normalize_log_params
from wikifeed.markup import code_block, format_timestamp, to_markdown, user_link
from wikifeed.schemas.change import ChangeEvent, ChangeKind

logger = logging.getLogger(__name__)

# Byte deltas above this size are shown in bold
LARGE_EDIT_BYTES = 500

NO_SUMMARY = "No summary."


def build(event: ChangeEvent, config: Optional[Settings] = None) -> Payload:
    """
    Build the webhook payload for one change.

    Always returns a payload with a single embed and ``content`` set to None.
    Events of an unrecognized kind get an empty embed.
    """
    if config is None:
        config = settings

    embed = Embed()

    if event.kind == ChangeKind.LOG:
        _build_log_entry(embed, event, config)
    elif event.kind in (ChangeKind.EDIT, ChangeKind.NEW):
        _build_edit(embed, event, config)
    else:
        logger.warning("No embed layout for change kind %s on %r", event.kind.value, event.title)

    return Payload().add_embed(embed).set_content(None)


def _page_url(event: ChangeEvent, site: Site) -> str:
    if event.page_url:
        return event.page_url
    return site.page_url(event.title) if event.title else ""


def _build_log_entry(embed: Embed, event: ChangeEvent, config: Settings) -> None:
    site = config.site
    style = config.style_for(StyleKey.LOG_ENTRY)
    log_url = site.page_url(f"Special:Redirect/logid/{event.log_id if event.log_id is not None else ''}")
    log_type = event.log_type or ""
    log_action = event.log_action or ""

    action_text = log_type if log_type == log_action else f"{log_type} . . {log_action}"
    description = f"([log]({log_url})) . . ({action_text}) . . {user_link(event.user, site)}"
    comment = event.summary
    if comment:
        description += f" . . (*{to_markdown(comment, site, event.title)}*)"

    (
        embed.set_color(style.color)
        .set_author_icon_url(style.icon)
        .set_author(event.title)
        .set_author_url(_page_url(event, site))
        .set_description(description)
        .set_footer_text(format_timestamp(event.timestamp))
    )

    if config.show_log_parameters:
        for embed_field in log_parameter_fields(log_type, event.log_params):
            embed.add_field(embed_field)

    logger.debug("Built log embed for %s/%s on %r", log_type, log_action, event.title)


def log_parameter_fields(log_type: str, raw_params) -> list[EmbedField]:
    """Inline fields describing a log entry's parameters."""
    params = normalize_log_params(raw_params)

    if log_type == "move":
        entries = params.entries if isinstance(params, MappingParams) else {}
        noredir = entries.get("noredir", "")
        redirect = "Yes" if noredir in ("", "0") else "No"
        return [
            EmbedField("Target", code_block(entries.get("target", "")), True),
            EmbedField("Redirect?", code_block(redirect), True),
        ]

    if isinstance(params, ListParams):
        if not params.values:
            return []
        return [EmbedField("Parameters", code_block("\n".join(params.values)), True)]

    if isinstance(params, MappingParams):
        if not params.entries:
            return []
        pretty = json.dumps(params.entries, indent=4, ensure_ascii=False)
        return [EmbedField("Parameters", code_block(pretty), True)]

    if isinstance(params, ScalarParams):
        return [EmbedField("Parameters", code_block(params.value), True)]

    return []


def _build_edit(embed: Embed, event: ChangeEvent, config: Settings) -> None:
    site = config.site
    new_id = "" if event.revision_id is None else event.revision_id
    if event.is_creation:
        diff_url = site.page_url(f"Special:Diff/{new_id}")
    else:
        diff_url = site.page_url(f"Special:Diff/{event.old_revision_id}/{new_id}")
    hist_url = site.page_url(f"Special:PageHistory/{event.title}")

    byte_diff = (event.new_length or 0) - (event.old_length or 0)
    style = config.style_for(edit_style_key(byte_diff))
    diff_label = "**new**" if event.is_creation else "diff"

    description = (
        f"([{diff_label}]({diff_url}) | [hist]({hist_url})) . . "
        f"({format_byte_diff(byte_diff)}) . . {user_link(event.user, site)}"
    )
    comment = event.summary
    if comment:
        summary = to_markdown(comment, site, event.title)
        description += f" . . (*{summary or NO_SUMMARY}*)"

    (
        embed.set_color(style.color)
        .set_author_icon_url(style.icon)
        .set_author(event.title)
        .set_author_url(_page_url(event, site))
        .set_description(description)
        .set_footer_text(format_timestamp(event.timestamp))
    )

    logger.debug("Built %s embed for %r (%+d bytes)", event.kind.value, event.title, byte_diff)


def edit_style_key(byte_diff: int) -> StyleKey:
    if byte_diff > 0:
        return StyleKey.EDIT_ADD
    if byte_diff < 0:
        return StyleKey.EDIT_REMOVE
    return StyleKey.EDIT_NEUTRAL


def format_byte_diff(byte_diff: int) -> str:
    """``+20``, ``0``, ``-7``; bold past 500 bytes either way."""
    text = f"+{byte_diff}" if byte_diff > 0 else str(byte_diff)
    if abs(byte_diff) > LARGE_EDIT_BYTES:
        return f"**{text}**"
    return text
