# ==============================================
# STAGE 1: RESOLUTION
# ==============================================
#
# This package turns the caller's options into exactly one
# resolved payload BEFORE anything is sent to the gateway.
#
# Modules:
# --------
# - payload.py       → StructuredPayload / OpaquePayload variants
# - strategy.py      → SourceKind strategy and precedence rules
# - data_resolver.py → Reads the chosen source and builds the payload
#
# ==============================================

from .payload import Payload, StructuredPayload, OpaquePayload, DEFAULT_DATATYPE
from .strategy import SourceKind, select_source
from .data_resolver import DataResolver

__all__ = [
    "Payload",
    "StructuredPayload",
    "OpaquePayload",
    "DEFAULT_DATATYPE",
    "SourceKind",
    "select_source",
    "DataResolver",
]
