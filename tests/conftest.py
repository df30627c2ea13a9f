# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests. Nothing here talks to a real
# Event Gateway; the transport is replaced with fakes.
# ==============================================

import io
import json

import pytest

from gateway_emit.config import reset_config
from gateway_emit.console import Console
from gateway_emit.errors import TransportError
from gateway_emit.resolution.data_resolver import DataResolver
from gateway_emit.sources.stdin_reader import StdinReader


class FakeGatewayClient:
    """Stands in for EventGatewayClient; records every request."""

    def __init__(self, url, fail=False):
        self.url = url
        self.fail = fail
        self.requests = []

    def emit(self, request):
        self.requests.append(request)
        if self.fail:
            raise TransportError("gateway unavailable", status_code=503)
        return None


class RecordingTelemetry:
    def __init__(self):
        self.events = []

    def record(self, event_key):
        self.events.append(event_key)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep the config singleton and env vars from leaking between tests."""
    for name in ("EVENT_GATEWAY_URL", "EVENT_GATEWAY_TIMEOUT", "TELEMETRY_ENABLED",
                 "TELEMETRY_FILE", "SERVICE_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("gateway_emit.config.load_dotenv", lambda *args, **kwargs: False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def console_stream():
    return io.StringIO()


@pytest.fixture
def console(console_stream):
    return Console(stream=console_stream)


@pytest.fixture
def telemetry():
    return RecordingTelemetry()


@pytest.fixture
def gateway_clients():
    """Every FakeGatewayClient built by the factory, in order."""
    return []


@pytest.fixture
def client_factory(gateway_clients):
    def factory(url):
        client = FakeGatewayClient(url)
        gateway_clients.append(client)
        return client
    return factory


@pytest.fixture
def failing_client_factory(gateway_clients):
    def factory(url):
        client = FakeGatewayClient(url, fail=True)
        gateway_clients.append(client)
        return client
    return factory


@pytest.fixture
def stdin_factory():
    def make(text):
        return StdinReader(stream=io.StringIO(text))
    return make


@pytest.fixture
def resolver(tmp_path):
    """Resolver rooted at a temporary service directory with empty stdin."""
    return DataResolver(service_path=str(tmp_path), stdin_reader=StdinReader(stream=io.StringIO("")))


@pytest.fixture
def sample_event():
    return {"key": "value"}


@pytest.fixture
def json_file(tmp_path, sample_event):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(sample_event), encoding="utf-8")
    return path
