# ==============================================
# EventEmitter
# ==============================================
#
# PURPOSE:
#   Send a resolved payload to the Event Gateway and report the
#   outcome through exactly one status line.
#
# STEPS:
# ------
#   1. telemetry.record("service_emitted")   (errors ignored)
#   2. EmitRequest.from_payload(name, payload, options.datatype)
#   3. client_factory(endpoint).emit(request)
#   4. success → "Successfully emitted the event ..." line
#      failure → "Failed to emit the event ..." line, then
#                EmissionError("Failed to emit the event <name>")
#
# ==============================================

import logging
from typing import Callable, Optional

from gateway_emit.config import DEFAULT_GATEWAY_URL
from gateway_emit.console import Console
from gateway_emit.delivery.gateway_client import EventGatewayClient
from gateway_emit.delivery.request import EmitRequest
from gateway_emit.errors import EmissionError, TransportError
from gateway_emit.options import EmitOptions
from gateway_emit.resolution.payload import DEFAULT_DATATYPE, Payload
from gateway_emit.telemetry import NullTelemetry, Telemetry

logger = logging.getLogger(__name__)

TELEMETRY_EVENT = "service_emitted"

ClientFactory = Callable[[str], EventGatewayClient]


def format_status_line(verb: str, name: str, payload: Payload, datatype: Optional[str] = None) -> str:
    """
    Build the status line shown after an emit attempt.

    Args:
        verb: "Successfully emitted" or "Failed to emit".
        name: Event name.
        payload: The resolved payload.
        datatype: The caller's datatype option, if any.
    """
    return f"{verb} the event {name} as datatype {datatype or DEFAULT_DATATYPE} with:\n{payload.to_display()}"


class EventEmitter:
    def __init__(
        self,
        client_factory: Optional[ClientFactory] = None,
        console: Optional[Console] = None,
        telemetry: Optional[Telemetry] = None,
        default_url: str = DEFAULT_GATEWAY_URL,
    ):
        self._client_factory = client_factory or EventGatewayClient
        self._console = console or Console()
        self._telemetry = telemetry or NullTelemetry()
        self.default_url = default_url

    def emit(self, options: EmitOptions, payload: Payload) -> None:
        self._track()

        name = options.name
        request = EmitRequest.from_payload(name, payload, options.datatype)
        client = self._client_factory(options.endpoint(self.default_url))

        try:
            client.emit(request)
        except TransportError as e:
            logger.debug("Emit of %s failed: %s", name, e)
            self._console.write_line(format_status_line("Failed to emit", name, payload, request.data_type))
            raise EmissionError(name) from e

        self._console.write_line(format_status_line("Successfully emitted", name, payload, request.data_type))

    def _track(self) -> None:
        try:
            self._telemetry.record(TELEMETRY_EVENT)
        except Exception as e:
            logger.debug("Telemetry failed: %s", e)
