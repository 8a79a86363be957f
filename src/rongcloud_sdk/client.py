"""
AsyncRongCloud / RongCloud — main SDK clients.
"""

import asyncio
import functools
import inspect
from typing import Any, Callable, Optional

import httpx

from rongcloud_sdk.auth import Signer
from rongcloud_sdk.conversation import ConversationAPI
from rongcloud_sdk.group import GroupAPI
from rongcloud_sdk.message import MessageAPI
from rongcloud_sdk.models.config import ClientConfig, ClientOptions
from rongcloud_sdk.sensitive import SensitiveAPI
from rongcloud_sdk.transport.http import HttpClient
from rongcloud_sdk.ultragroup import UltraGroupAPI


class AsyncRongCloud:
    """Async RongCloud server API client (primary).

    One instance can be shared by any number of tasks: configuration is
    immutable and every call signs its own request.
    """

    def __init__(
        self,
        app_key: str,
        app_secret: str,
        options: Optional[ClientOptions] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        *,
        config: Optional[ClientConfig] = None,
    ):
        self.config = config or ClientConfig.build(app_key, app_secret, options)

        self.http = HttpClient(
            Signer(self.config.app_key, self.config.app_secret),
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=transport,
        )
        self.conversation = ConversationAPI(self.http)
        self.group = GroupAPI(self.http)
        self.message = MessageAPI(self.http)
        self.sensitive = SensitiveAPI(self.http)
        self.ultragroup = UltraGroupAPI(self.http)

    @classmethod
    def from_config(
        cls, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncRongCloud":
        return cls(config.app_key, "", transport=transport, config=config)

    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "AsyncRongCloud":
        return cls.from_config(ClientConfig.from_env(), transport=transport)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncRongCloud":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class _SyncAPI:
    """Blocking view of an API group: coroutine methods run on the owner's loop."""

    def __init__(self, api: Any, run: Callable[[Any], Any]):
        self._api = api
        self._run = run

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._api, name)
        if not inspect.iscoroutinefunction(attr):
            return attr

        @functools.wraps(attr)
        def call(*args: Any, **kwargs: Any) -> Any:
            return self._run(attr(*args, **kwargs))
        return call


class RongCloud:
    """Sync wrapper around AsyncRongCloud. Runs the event loop internally.

    The private loop makes an instance single-threaded; use one per thread
    (the ClientConfig itself can be shared).
    """

    def __init__(self, *args: Any, **kwargs: Any):
        self._async = AsyncRongCloud(*args, **kwargs)
        self._loop = asyncio.new_event_loop()
        self.conversation = _SyncAPI(self._async.conversation, self._run)
        self.group = _SyncAPI(self._async.group, self._run)
        self.message = _SyncAPI(self._async.message, self._run)
        self.sensitive = _SyncAPI(self._async.sensitive, self._run)
        self.ultragroup = _SyncAPI(self._async.ultragroup, self._run)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> "RongCloud":
        return cls(config.app_key, "", transport=transport, config=config)

    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "RongCloud":
        return cls.from_config(ClientConfig.from_env(), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._async.config

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "RongCloud":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
