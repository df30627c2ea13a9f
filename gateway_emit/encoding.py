"""
JSON helpers shared by resolution and delivery.

Parsing rejects the NaN / Infinity literals the json module accepts by
default. Serialization is compact and renders YAML-born dates, sets and
binary values instead of failing on them.
"""

import base64
import json
from datetime import date, datetime, time
from typing import Any


_COMPACT = (",", ":")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str) -> Any:
    """
    Decode JSON text strictly.

    Raises:
        ValueError: On malformed text or a NaN / Infinity literal.
    """
    return json.loads(text, parse_constant=_reject_constant)


def _encode_default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_compact_json(value: Any) -> str:
    return json.dumps(
        value,
        separators=_COMPACT,
        ensure_ascii=False,
        default=_encode_default,
    )
