"""Invocation options for a single emit."""

from dataclasses import dataclass
from typing import Optional

from gateway_emit.config import DEFAULT_GATEWAY_URL


@dataclass(frozen=True)
class EmitOptions:
    """
    Caller-supplied parameters for one emit.

    Attributes:
        name: Event type identifier sent with the emission.
        path: File holding the event data (JSON or YAML).
        data: Inline event data.
        url: Event Gateway address. Falls back to the configured default.
        datatype: Content type of the data. When absent the data is
            treated as JSON; when present it is passed through as text.
    """
    name: Optional[str] = None
    path: Optional[str] = None
    data: Optional[str] = None
    url: Optional[str] = None
    datatype: Optional[str] = None

    def endpoint(self, default: str = DEFAULT_GATEWAY_URL) -> str:
        return self.url or default
