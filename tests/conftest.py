import pytest

from selfie_relay.core.provider_config import SelfieConfig


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records `post` calls and replays a canned response or exception."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


class FakeTransport:
    def __init__(self, error=None):
        self.error = error
        self.deliveries = []

    def deliver(self, channel, message, media):
        self.deliveries.append((channel, message, media))
        if self.error is not None:
            raise self.error


def success_payload(*urls):
    return {
        "base_resp": {"status_code": 0, "status_msg": "success"},
        "data": {"image_urls": list(urls)},
    }


@pytest.fixture
def config():
    return SelfieConfig(api_key="test-key", gateway_url="http://gateway.test", timeout=5.0)


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse


@pytest.fixture
def fake_transport_factory():
    return FakeTransport


@pytest.fixture
def make_success_payload():
    return success_payload
