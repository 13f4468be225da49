import pytest
from fastapi.testclient import TestClient

from tatum_webhook.config import ReceiverSettings
from tatum_webhook.main import create_app
from tatum_webhook.services.signature import compute_signature

SECRET = "AxQtest-hmac-secret"


@pytest.fixture
def settings() -> ReceiverSettings:
    return ReceiverSettings(tatum_hmac_secret=SECRET, _env_file=None)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def signed_headers():
    def _headers(body: bytes, secret: str = SECRET) -> dict[str, str]:
        return {
            "content-type": "application/json",
            "x-payload-hash": compute_signature(secret, body),
        }

    return _headers
