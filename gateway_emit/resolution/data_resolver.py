# ==============================================
# DataResolver
# ==============================================
#
# PURPOSE:
#   Produce exactly one resolved payload from the caller's options,
#   or raise a descriptive EmitError.
#
# HOW A SOURCE IS PICKED:
#   select_source() chooses once (see strategy.py), then one reader
#   method runs. There is no fallback to a later source.
#
#   INLINE → datatype given:  OpaquePayload(data)
#            no datatype:     parse_json(data)       → DataFormatError
#   FILE   → absolute path (relative joined to service_path)
#            missing file:    DataFileNotFoundError
#            otherwise:       FileService.read_structured (JSON or YAML)
#   STDIN  → StdinReader.read_all()                → MissingDataError
#            then the same rule as INLINE
#
#   The datatype hint never changes how a file is read.
#
# ==============================================

import logging
import os
from typing import Optional

from gateway_emit.encoding import parse_json
from gateway_emit.errors import DataFileNotFoundError, DataFormatError, MissingDataError, StdinUnavailableError
from gateway_emit.options import EmitOptions
from gateway_emit.resolution.payload import OpaquePayload, Payload, StructuredPayload
from gateway_emit.resolution.strategy import SourceKind, select_source
from gateway_emit.sources.file_service import FileService
from gateway_emit.sources.stdin_reader import StdinReader

logger = logging.getLogger(__name__)


class DataResolver:
    """Reads the event data from the selected source."""

    def __init__(
        self,
        service_path: Optional[str] = None,
        file_service: Optional[FileService] = None,
        stdin_reader: Optional[StdinReader] = None,
    ):
        """
        Args:
            service_path: Directory relative data paths are resolved against.
                Defaults to the current working directory.
            file_service: Reader for data files.
            stdin_reader: Reader for piped input.
        """
        self.service_path = service_path or os.getcwd()
        self._file_service = file_service or FileService()
        self._stdin_reader = stdin_reader or StdinReader()

    def resolve(self, options: EmitOptions) -> Payload:
        source = select_source(options)
        logger.debug("Resolving event data from %s", source.value)

        if source is SourceKind.INLINE:
            return self._from_text(options.data, options.datatype)
        if source is SourceKind.FILE:
            return self._from_file(options.path)
        if source is SourceKind.STDIN:
            return self._from_stdin(options.datatype)
        raise ValueError(f"Unknown data source: {source}")

    def absolute_path(self, path: str) -> str:
        if os.path.isabs(path):
            return path
        return os.path.join(self.service_path, path)

    def _from_text(self, text: str, datatype: Optional[str]) -> Payload:
        if datatype:
            return OpaquePayload(value=text, declared_type=datatype)
        try:
            return StructuredPayload(value=parse_json(text))
        except ValueError as e:
            logger.debug("JSON decode failed: %s", e)
            raise DataFormatError() from e

    def _from_file(self, path: str) -> Payload:
        absolute_path = self.absolute_path(path)
        if not self._file_service.exists(absolute_path):
            raise DataFileNotFoundError(absolute_path)
        return StructuredPayload(value=self._file_service.read_structured(absolute_path))

    def _from_stdin(self, datatype: Optional[str]) -> Payload:
        try:
            text = self._stdin_reader.read_all()
        except StdinUnavailableError as e:
            logger.debug("Could not read stdin: %s", e)
            raise MissingDataError() from e
        return self._from_text(text, datatype)
