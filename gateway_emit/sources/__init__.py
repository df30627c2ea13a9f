# ==============================================
# SOURCES
# ==============================================
#
# Readers the resolver delegates to.
#
# Modules:
# --------
# - file_service.py  → Existence check + JSON/YAML file parsing
# - stdin_reader.py  → Consume piped standard input
#
# ==============================================

from .file_service import FileService
from .stdin_reader import StdinReader

__all__ = ["FileService", "StdinReader"]
