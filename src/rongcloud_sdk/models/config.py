"""
Client configuration.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from rongcloud_sdk.transport.http import DEFAULT_BASE_URL, DEFAULT_SMS_URL, DEFAULT_TIMEOUT


class ClientOptions(BaseModel):
    """Optional overrides; unset fields keep their defaults."""

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = None
    sms_url: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)


class ClientConfig(BaseModel):
    """Immutable per-client settings, safe to share between tasks and threads."""

    model_config = ConfigDict(frozen=True)

    app_key: str
    app_secret: SecretStr
    base_url: str = DEFAULT_BASE_URL
    sms_url: str = DEFAULT_SMS_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @classmethod
    def build(cls, app_key: str, app_secret: str, options: Optional[ClientOptions] = None) -> "ClientConfig":
        overrides = options.model_dump(exclude_none=True) if options else {}
        return cls(app_key=app_key, app_secret=app_secret, **overrides)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Read RONGCLOUD_APP_KEY / _APP_SECRET and the optional _BASE_URL / _SMS_URL / _TIMEOUT."""
        options = ClientOptions(
            base_url=os.environ.get("RONGCLOUD_BASE_URL") or None,
            sms_url=os.environ.get("RONGCLOUD_SMS_URL") or None,
            timeout=os.environ.get("RONGCLOUD_TIMEOUT") or None,
        )
        return cls.build(
            os.environ.get("RONGCLOUD_APP_KEY", ""),
            os.environ.get("RONGCLOUD_APP_SECRET", ""),
            options,
        )
