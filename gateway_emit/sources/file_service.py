# ==============================================
# FileService
# ==============================================
#
# PURPOSE:
#   Read a data file into Python objects, choosing JSON or YAML
#   from the file itself.
#
# DETECTION:
# ----------
#   .json         → strict JSON (no NaN / Infinity)
#   .yml / .yaml  → yaml.safe_load
#   anything else → JSON first, then YAML. If YAML only sees a bare
#                   scalar the raw text is returned unchanged.
#
# ==============================================

import logging
import os
from typing import Any

import yaml

from gateway_emit.encoding import parse_json
from gateway_emit.errors import DataFormatError

logger = logging.getLogger(__name__)

JSON_EXTENSIONS = {".json"}
YAML_EXTENSIONS = {".yml", ".yaml"}


class FileService:
    """Filesystem access for data files."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_text(self, path: str) -> str:
        try:
            with open(path, "r", encoding=self.encoding) as handle:
                return handle.read()
        except UnicodeDecodeError as e:
            raise DataFormatError(f"Couldn't decode the file {path} as {self.encoding}: {e}") from e
        except OSError as e:
            raise DataFormatError(f"Couldn't read the file {path}: {e}") from e

    def read_structured(self, path: str) -> Any:
        """
        Parse a JSON or YAML file.

        Args:
            path: Absolute path of an existing file.

        Returns:
            The decoded value. Empty YAML files decode to None.

        Raises:
            DataFormatError: If the content is not valid for its format.
        """
        contents = self.read_text(path)
        extension = os.path.splitext(path)[1].lower()

        if extension in JSON_EXTENSIONS:
            return self._parse_json(contents, path)
        if extension in YAML_EXTENSIONS:
            return self._parse_yaml(contents, path)
        return self._parse_unknown(contents, path)

    def _parse_json(self, contents: str, path: str) -> Any:
        try:
            return parse_json(contents)
        except ValueError as e:
            raise DataFormatError(f"Couldn't parse the file {path} as JSON: {e}") from e

    def _parse_yaml(self, contents: str, path: str) -> Any:
        try:
            return yaml.safe_load(contents)
        except yaml.YAMLError as e:
            raise DataFormatError(f"Couldn't parse the file {path} as YAML: {e}") from e

    def _parse_unknown(self, contents: str, path: str) -> Any:
        try:
            return parse_json(contents)
        except ValueError:
            logger.debug("%s is not JSON, trying YAML", path)

        try:
            value = yaml.safe_load(contents)
        except yaml.YAMLError:
            logger.debug("%s is not YAML either, using raw text", path)
            return contents

        if isinstance(value, (dict, list)):
            return value
        return contents
