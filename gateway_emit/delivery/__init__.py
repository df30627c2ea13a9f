# ==============================================
# STAGE 2: DELIVERY
# ==============================================
#
# Sends the resolved payload to the Event Gateway and reports
# the outcome with one status line.
#
# Modules:
# --------
# - request.py         → EmitRequest (event, data, dataType)
# - gateway_client.py  → HTTP client for the Event Gateway
# - event_emitter.py   → Builds the request, sends it, reports outcome
#
# ==============================================

from .request import EmitRequest
from .gateway_client import EventGatewayClient
from .event_emitter import EventEmitter, format_status_line

__all__ = ["EmitRequest", "EventGatewayClient", "EventEmitter", "format_status_line"]
