"""
HTTP dispatcher for the RongCloud server API.
"""

import logging
from typing import Any, Mapping, NamedTuple, Optional

import httpx

from rongcloud_sdk.auth import Signer
from rongcloud_sdk.errors import TransportError
from rongcloud_sdk.transport.protocol import LEGACY, REST, Protocol

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://api-cn.ronghub.com"
DEFAULT_SMS_URL = "http://api.sms.ronghub.com"
DEFAULT_TIMEOUT = 10.0
USER_AGENT = "rongcloud-sdk-python/0.1.0"


class Reply(NamedTuple):
    data: Any
    request_id: Optional[str]


class HttpClient:
    def __init__(
        self,
        signer: Signer,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._signer = signer
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def call(
        self,
        protocol: Protocol,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
    ) -> Reply:
        """Sign, send and decode one request. Never retries."""
        prepared = protocol.build_request(self._client, self._signer, method, path, params=params, body=body)
        request = prepared.request
        logger.debug("%s %s request_id=%s", request.method, request.url, prepared.request_id)
        try:
            response = await self._client.send(request)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %r", request.method, request.url, e)
            raise TransportError(
                f"{request.method} {request.url} failed: {e!r}",
                cause=e, origin=protocol.origin, request_id=prepared.request_id,
            ) from e
        return Reply(protocol.decode(response, prepared.request_id), prepared.request_id)

    async def post_form(self, path: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Legacy call: POST <path>.json with form parameters."""
        reply = await self.call(LEGACY, "POST", path, params=params)
        return reply.data

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Reply:
        return await self.call(REST, "GET", path, params=params)

    async def post(self, path: str, body: Optional[Any] = None) -> Reply:
        return await self.call(REST, "POST", path, body=body)

    async def put(self, path: str, body: Optional[Any] = None) -> Reply:
        return await self.call(REST, "PUT", path, body=body)

    async def delete(self, path: str, body: Optional[Any] = None) -> Reply:
        return await self.call(REST, "DELETE", path, body=body)

    async def close(self) -> None:
        await self._client.aclose()
