"""
Errors raised while resolving and emitting an event.

Every error terminates the current invocation; nothing here is retried.
"""

from typing import Optional


DATA_FORMAT_MESSAGE = "Couldn't parse the provided data to a JSON structure."
FILE_NOT_FOUND_MESSAGE = "The file you provided does not exist."
MISSING_DATA_MESSAGE = (
    "Event data is missing. Please provide it either via stdin or the args: data or path."
)


class EmitError(Exception):
    """Base class for every failure the emit command reports to the user."""


class DataFormatError(EmitError):
    """Text that had to be structured could not be parsed."""

    def __init__(self, message: str = DATA_FORMAT_MESSAGE):
        super().__init__(message)


class DataFileNotFoundError(EmitError, FileNotFoundError):
    """The resolved data file does not exist."""

    def __init__(self, path: Optional[str] = None):
        super().__init__(FILE_NOT_FOUND_MESSAGE)
        self.path = path


class MissingDataError(EmitError):
    """No data source could be read at all."""

    def __init__(self, message: str = MISSING_DATA_MESSAGE):
        super().__init__(message)


class EmissionError(EmitError):
    """The Event Gateway did not accept the event."""

    def __init__(self, event_name: str):
        super().__init__(f"Failed to emit the event {event_name}")
        self.event_name = event_name


class TransportError(Exception):
    """Raised by the gateway client when a request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StdinUnavailableError(Exception):
    """Raised by the stdin reader when there is no stream to consume."""
