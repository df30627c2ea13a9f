# ==============================================
# EmitCommand — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties the two stages together. Users (and the CLI) interact
#   with this class only.
#
#   EmitOptions
#       │
#       ▼
#   ┌──────────────────────────────┐
#   │ STAGE 1: RESOLUTION          │
#   │  DataResolver.resolve()      │
#   └──────────────┬───────────────┘
#                  │ Payload (exactly one)
#                  ▼
#   ┌──────────────────────────────┐
#   │ STAGE 2: DELIVERY            │
#   │  EventEmitter.emit()         │
#   └──────────────────────────────┘
#
#   A resolution error stops the run; nothing is emitted.
#
# ==============================================

import logging
from functools import partial
from typing import Optional

from gateway_emit.config import AppConfig, get_config
from gateway_emit.console import Console
from gateway_emit.delivery.event_emitter import EventEmitter
from gateway_emit.delivery.gateway_client import EventGatewayClient
from gateway_emit.options import EmitOptions
from gateway_emit.resolution.data_resolver import DataResolver
from gateway_emit.resolution.payload import Payload
from gateway_emit.sources.file_service import FileService
from gateway_emit.sources.stdin_reader import StdinReader
from gateway_emit.telemetry import JsonlTelemetry, NullTelemetry, Telemetry

logger = logging.getLogger(__name__)


def build_telemetry(config: AppConfig) -> Telemetry:
    if config.telemetry.enabled:
        return JsonlTelemetry(config.telemetry.events_file)
    return NullTelemetry()


class EmitCommand:
    """Resolve the event data, then emit it."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        resolver: Optional[DataResolver] = None,
        emitter: Optional[EventEmitter] = None,
        console: Optional[Console] = None,
    ):
        """
        Args:
            config: Application configuration. If None, loads from environment.
            resolver: Stage 1. Built from config when omitted.
            emitter: Stage 2. Built from config when omitted.
            console: Where status lines go. Defaults to stdout.
        """
        self._config = config or get_config()

        self._resolver = resolver or DataResolver(
            service_path=self._config.service_path,
            file_service=FileService(),
            stdin_reader=StdinReader(),
        )
        self._emitter = emitter or EventEmitter(
            client_factory=partial(EventGatewayClient, timeout=self._config.gateway.timeout_seconds),
            console=console or Console(),
            telemetry=build_telemetry(self._config),
            default_url=self._config.gateway.url,
        )

    def resolve(self, options: EmitOptions) -> Payload:
        return self._resolver.resolve(options)

    def run(self, options: EmitOptions) -> Payload:
        """
        Resolve and emit one event.

        Returns:
            The payload that was emitted.

        Raises:
            EmitError: On any resolution or emission failure.
        """
        payload = self.resolve(options)
        logger.debug("Resolved %s for event %s", type(payload).__name__, options.name)
        self._emitter.emit(options, payload)
        return payload
