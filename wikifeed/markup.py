"""
Text helpers: wikitext summaries to Discord markdown, user links, code blocks
and footer dates.

Summaries come straight from users, so ``to_markdown`` is best effort: markup
it does not understand is passed through untouched, and it never raises.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from wikifeed.config import Site

logger = logging.getLogger(__name__)

# /* Section heading */
_SECTION = re.compile(r"/\*\s*(.*?)\s*\*/")
# [[Target]] and [[Target|label]]
_INTERNAL_LINK = re.compile(r"\[\[([^\[\]|]+)(?:\|([^\[\]]*))?\]\]")
# [https://example.org] and [https://example.org label]
_EXTERNAL_LINK = re.compile(r"\[((?:https?:)?//[^\s\[\]]+)(?:\s+([^\[\]]+))?\]")
_BOLD_ITALIC = re.compile(r"'''''(.+?)'''''")
_BOLD = re.compile(r"'''(.+?)'''")
_ITALIC = re.compile(r"''(.+?)''")

_MARKDOWN_SPECIAL = re.compile(r"([\\*_~`|>\[\]])")

_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def user_link(user: Optional[str], site: Site) -> str:
    """Markdown link to a user's page, e.g. ``[Alice](https://wiki/wiki/User:Alice)``."""
    if not user:
        return ""
    return f"[{escape_markdown(user)}]({site.page_url('User:' + user)})"


def code_block(text: str) -> str:
    """Fence text so Discord shows it verbatim."""
    # A zero-width space keeps a literal ``` from closing the fence
    return "```\n" + text.replace("```", "`\u200b``") + "\n```"


def to_markdown(comment: Optional[str], site: Site, title: str = "") -> str:
    """
    Convert an edit summary from wikitext to Discord markdown.

    Args:
        comment: Raw summary; None and "" give "".
        site: Wiki the summary belongs to, used to resolve internal links.
        title: Page the summary was left on, used for section links.
    """
    if not comment:
        return ""
    try:
        return _convert(comment, site, title).strip()
    except (TypeError, ValueError):
        logger.warning("Could not convert summary to markdown: %r", comment, exc_info=True)
        return str(comment)


def _convert(text: str, site: Site, title: str) -> str:
    def section(match: re.Match) -> str:
        heading = match.group(1)
        if not heading:
            return ""
        if not title:
            return f"→{heading}"
        return f"[→{heading}]({site.page_url(title + '#' + heading)})"

    def internal(match: re.Match) -> str:
        target = match.group(1).strip()
        label = match.group(2)
        if not label:
            label = target.lstrip(":")
        return f"[{label}]({site.page_url(target.lstrip(':'))})"

    def external(match: re.Match) -> str:
        url = match.group(1)
        if url.startswith("//"):
            url = "https:" + url
        return f"[{match.group(2) or url}]({url})"

    text = _SECTION.sub(section, text)
    # External first: a converted internal link may carry a URL as its label
    text = _EXTERNAL_LINK.sub(external, text)
    text = _INTERNAL_LINK.sub(internal, text)
    text = _BOLD_ITALIC.sub(r"**_\1_**", text)
    text = _BOLD.sub(r"**\1**", text)
    text = _ITALIC.sub(r"_\1_", text)
    return text


def format_timestamp(moment: datetime) -> str:
    """
    Long English date in UTC, whatever the process locale:
    ``Monday, January 15, 2024 3:04 PM``.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{_DAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} {moment.day}, "
        f"{moment.year} {hour}:{moment.minute:02d} {meridiem}"
    )
