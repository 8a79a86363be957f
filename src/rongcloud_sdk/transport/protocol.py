"""
Wire protocols.

The platform speaks two dialects:

- legacy: POST <base>/<resource>/<action>.json, form-encoded parameters,
  signed with App-Key / Nonce / Timestamp / Signature headers.
- REST:   <METHOD> <base>/v2/..., JSON bodies for mutations and query
  parameters for paginated reads, signed with the RC-* header set and
  an RC-Request-Id correlation header.

Each dialect is a Protocol strategy that builds the outbound request and
decodes the reply. Operations pick one; HttpClient runs either.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, NamedTuple, Optional

import httpx

from rongcloud_sdk.auth import Signer
from rongcloud_sdk.errors import ErrorOrigin
from rongcloud_sdk.transport.envelope import decode_legacy, decode_rest

LEGACY_FORMAT = "json"


class PreparedRequest(NamedTuple):
    request: httpx.Request
    request_id: Optional[str]


def form_value(value: Any) -> Any:
    """Render one form value: bools as true/false, numbers as decimals, lists element-wise."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [form_value(v) for v in value]
    return str(value)


def form_params(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Drop unset parameters: None, empty strings and empty lists are omitted, never sent empty."""
    if not params:
        return {}
    return {k: form_value(v) for k, v in params.items() if v is not None and v != "" and v != [] and v != ()}


class Protocol(ABC):
    origin: ErrorOrigin

    @abstractmethod
    def build_request(
        self,
        client: httpx.AsyncClient,
        signer: Signer,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> PreparedRequest: ...

    @abstractmethod
    def decode(self, response: httpx.Response, request_id: Optional[str]) -> Any: ...


class LegacyProtocol(Protocol):
    origin = ErrorOrigin.LEGACY

    def build_request(self, client, signer, method, path, *, params=None, body=None):
        headers = signer.legacy_headers()
        headers["Content-Type"] = "application/x-www-form-urlencoded"
        request = client.build_request(
            method, f"{path}.{LEGACY_FORMAT}", data=form_params(params), headers=headers,
        )
        return PreparedRequest(request, None)

    def decode(self, response, request_id):
        return decode_legacy(response)


class RestProtocol(Protocol):
    origin = ErrorOrigin.REST

    def build_request(self, client, signer, method, path, *, params=None, body=None):
        headers, request_id = signer.rest_headers()
        headers["Content-Type"] = "application/json"
        query = {k: str(v) for k, v in params.items() if v is not None} if params else None
        request = client.build_request(method, path, params=query, json=body, headers=headers)
        return PreparedRequest(request, request_id)

    def decode(self, response, request_id):
        return decode_rest(response, request_id or "")


LEGACY = LegacyProtocol()
REST = RestProtocol()
