# ==============================================
# Payload (Data Classes)
# ==============================================
#
# PURPOSE:
#   The resolved event data, as one of two variants:
#
#   - StructuredPayload → value decoded from JSON / YAML text.
#   - OpaquePayload     → raw text kept verbatim because the caller
#                         declared a datatype.
#
#   The variant is decided once, when the payload is built, by whether
#   a datatype hint was present (files are always structured). Nothing
#   downstream inspects the value to guess which one it is.
#
#   The datatype tag sent with the event is the caller's option, not a
#   property of the payload: a file read with a datatype stays
#   structured but is still tagged.
#
# METHODS (both variants):
# ------------------------
#   - to_display() -> str       → compact JSON used in status lines
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Union

from gateway_emit.encoding import to_compact_json


DEFAULT_DATATYPE = "application/json"


@dataclass(frozen=True)
class StructuredPayload:
    """Event data decoded into Python objects."""
    value: Any

    def to_display(self) -> str:
        return to_compact_json(self.value)


@dataclass(frozen=True)
class OpaquePayload:
    """Event data passed through untouched with its declared datatype."""
    value: str
    declared_type: str

    def to_display(self) -> str:
        # Opaque text is shown as a quoted JSON string literal
        return to_compact_json(self.value)


Payload = Union[StructuredPayload, OpaquePayload]
