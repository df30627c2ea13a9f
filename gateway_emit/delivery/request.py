"""Emit request sent to the Event Gateway."""

from dataclasses import dataclass
from typing import Any, Optional

from gateway_emit.encoding import to_compact_json
from gateway_emit.resolution.payload import DEFAULT_DATATYPE, Payload


@dataclass(frozen=True)
class EmitRequest:
    """One event to emit. Built fresh for every attempt, never stored."""
    event: str
    data: Any
    data_type: Optional[str] = None

    @classmethod
    def from_payload(cls, event: str, payload: Payload, data_type: Optional[str] = None) -> "EmitRequest":
        return cls(event=event, data=payload.value, data_type=data_type or None)

    @property
    def content_type(self) -> str:
        return self.data_type or DEFAULT_DATATYPE

    def body(self) -> str:
        """Wire body: raw text for string data under a declared type, JSON otherwise."""
        if self.data_type is not None and isinstance(self.data, str):
            return self.data
        return to_compact_json(self.data)
