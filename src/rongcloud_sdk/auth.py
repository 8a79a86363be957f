"""
Request signing.

Both protocols authenticate with the same material: a random nonce, a
timestamp in seconds and Signature = sha1(app_secret + nonce + timestamp).
The REST protocol adds a per-call request id for correlation.
"""

import hashlib
import secrets
import time
import uuid
from typing import Union

from pydantic import SecretStr


def compute_signature(app_secret: str, nonce: str, timestamp: str) -> str:
    """SHA-1 hex digest of secret + nonce + timestamp (wire contract)."""
    return hashlib.sha1(f"{app_secret}{nonce}{timestamp}".encode("utf-8")).hexdigest()


def make_nonce() -> str:
    return secrets.token_hex(8)


def make_timestamp() -> str:
    return str(int(time.time()))


def make_request_id() -> str:
    return str(uuid.uuid4())


class Signer:
    def __init__(self, app_key: str, app_secret: Union[str, SecretStr]):
        self._app_key = app_key
        self._app_secret = app_secret if isinstance(app_secret, SecretStr) else SecretStr(app_secret)

    @property
    def app_key(self) -> str:
        return self._app_key

    def _material(self) -> tuple[str, str, str]:
        nonce = make_nonce()
        timestamp = make_timestamp()
        return nonce, timestamp, compute_signature(self._app_secret.get_secret_value(), nonce, timestamp)

    def legacy_headers(self) -> dict[str, str]:
        """Headers for the form-encoded protocol."""
        nonce, timestamp, signature = self._material()
        return {
            "App-Key": self._app_key,
            "Nonce": nonce,
            "Timestamp": timestamp,
            "Signature": signature,
        }

    def rest_headers(self) -> tuple[dict[str, str], str]:
        """Headers for the /v2 JSON protocol, plus the request id placed in them."""
        nonce, timestamp, signature = self._material()
        request_id = make_request_id()
        return {
            "RC-App-Key": self._app_key,
            "RC-Nonce": nonce,
            "RC-Timestamp": timestamp,
            "RC-Signature": signature,
            "RC-Request-Id": request_id,
        }, request_id
