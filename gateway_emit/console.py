"""Console output for status lines."""

import sys
from typing import Optional, TextIO


class Console:
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write_line(self, text: str) -> None:
        print(text, file=self._stream or sys.stdout, flush=True)
