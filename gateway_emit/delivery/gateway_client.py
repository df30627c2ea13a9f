# ==============================================
# EventGatewayClient
# ==============================================
#
# PURPOSE:
#   Deliver one EmitRequest to a running Event Gateway over HTTP.
#
# WIRE FORMAT:
# ------------
#   POST <url>/
#   Event: <event name>
#   Content-Type: <dataType or application/json>
#
#   <compact JSON of the data, or the raw text for opaque data>
#
#   Any status >= 400 and any connection problem is raised as
#   TransportError. No retries here.
#
# ==============================================

import logging
from typing import Optional

import requests

from gateway_emit.delivery.request import EmitRequest
from gateway_emit.errors import TransportError

logger = logging.getLogger(__name__)


class EventGatewayClient:
    def __init__(self, url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        # Store connection params. Don't connect yet.
        self.url = url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def emit(self, request: EmitRequest) -> requests.Response:
        headers = {
            "Event": request.event,
            "Content-Type": request.content_type,
        }
        body = request.body().encode("utf-8")
        logger.debug("POST %s event=%s content-type=%s", self.url, request.event, request.content_type)

        try:
            response = self.session.post(self.url, data=body, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Could not reach the Event Gateway at {self.url}: {e}") from e

        if response.status_code >= 400:
            raise TransportError(
                f"Event Gateway responded with {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response
