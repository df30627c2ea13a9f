"""Data source selection.

Precedence is fixed: inline data, then a file path, then stdin. The first
source present is the only one consulted.
"""

from enum import Enum

from gateway_emit.options import EmitOptions


class SourceKind(Enum):
    """Where the event data is read from."""
    INLINE = "inline"
    FILE = "file"
    STDIN = "stdin"


def select_source(options: EmitOptions) -> SourceKind:
    if options.data:
        return SourceKind.INLINE
    if options.path:
        return SourceKind.FILE
    return SourceKind.STDIN
