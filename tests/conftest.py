# tests/conftest.py
"""
Fixtures: a freshly generated service-account key on disk, a fake token
endpoint for google-auth, and an httpx MockTransport that records requests.
"""
import json

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from fcm_send.config import Settings


@pytest.fixture(scope="session")
def private_key_pem():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def service_account_info(private_key_pem):
    return {
        "type": "service_account",
        "project_id": "miso-mobile",
        "private_key_id": "abc123def456",
        "private_key": private_key_pem,
        "client_email": "firebase-adminsdk@miso-mobile.iam.gserviceaccount.com",
        "client_id": "1234567890",
        "token_uri": "https://oauth2.googleapis.com/token",
    }


@pytest.fixture
def key_file(tmp_path, service_account_info):
    path = tmp_path / "miso-mobile-firebase-adminsdk.json"
    path.write_text(json.dumps(service_account_info))
    return path


@pytest.fixture
def settings(key_file):
    return Settings(project_id="miso-mobile", credential_path=str(key_file))


class FakeTokenResponse:
    def __init__(self, status, payload):
        self.status = status
        self.headers = {"content-type": "application/json"}
        self.data = json.dumps(payload).encode("utf-8")


class FakeTokenEndpoint:
    """google-auth transport callable standing in for the OAuth2 token endpoint."""

    def __init__(self, status=200, payload=None):
        self.status = status
        self.payload = payload or {"access_token": "ya29.test-token", "expires_in": 3600, "token_type": "Bearer"}
        self.calls = []

    def __call__(self, url, method="GET", body=None, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "method": method, "body": body})
        return FakeTokenResponse(self.status, self.payload)


@pytest.fixture
def token_endpoint():
    return FakeTokenEndpoint()


@pytest.fixture
def rejecting_token_endpoint():
    return FakeTokenEndpoint(
        status=400,
        payload={"error": "invalid_grant", "error_description": "Invalid JWT Signature."},
    )


class RecordingTransport(httpx.MockTransport):
    def __init__(self, status_code=200, text='{"name": "projects/miso-mobile/messages/0:1"}', exc=None):
        self.requests = []
        self.status_code = status_code
        self.text = text
        self.exc = exc
        super().__init__(self._handle)

    def _handle(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.text)


@pytest.fixture
def fcm_transport():
    return RecordingTransport()
