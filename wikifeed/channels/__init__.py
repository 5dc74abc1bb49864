"""Hand-off types between the payload builder and whatever sends the request."""

from dataclasses import dataclass


@dataclass
class ChannelPayload:
    """Represents the HTTP request an external sender should make."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string
