"""Standard input reader.

One blocking read: it either returns the whole input as text or raises
StdinUnavailableError. Input that is present but not valid text raises
DataFormatError. An interactive terminal counts as unavailable so the
command never sits waiting for keyboard input.
"""

import sys
from typing import Optional, TextIO

from gateway_emit.errors import DataFormatError, StdinUnavailableError


class StdinReader:
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> Optional[TextIO]:
        # resolved per call so a replaced sys.stdin is picked up
        return self._stream if self._stream is not None else sys.stdin

    def read_all(self) -> str:
        stream = self.stream
        if stream is None or getattr(stream, "closed", False):
            raise StdinUnavailableError("no input stream is attached")

        try:
            if stream.isatty():
                raise StdinUnavailableError("stdin is an interactive terminal")
            return stream.read()
        except UnicodeDecodeError as e:
            raise DataFormatError(f"Couldn't decode the provided input: {e}") from e
        except (OSError, ValueError) as e:
            raise StdinUnavailableError(str(e)) from e
