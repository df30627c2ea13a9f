"""
Usage tracking sinks.

The emitter records one event per emit attempt. Sinks are best-effort:
callers ignore any error they raise.
"""

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Union


class Telemetry:
    """Interface and no-op default."""

    def record(self, event_key: str) -> None:
        return None


class NullTelemetry(Telemetry):
    pass


class JsonlTelemetry(Telemetry):
    """Appends one JSON line per recorded event to a local file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def record(self, event_key: str) -> None:
        entry = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "event": event_key,
        }
        line = json.dumps(entry, ensure_ascii=True)
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
