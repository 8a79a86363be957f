"""
rongcloud-sdk — RongCloud server API SDK for Python.

Signed HTTP client for the RongCloud IM platform: legacy form API and /v2 REST API.
"""

import logging

from rongcloud_sdk.client import RongCloud, AsyncRongCloud
from rongcloud_sdk.errors import (
    RongCloudError,
    ClientValidationError,
    RemoteAPIError,
    TransportError,
    ErrorOrigin,
    PARAM_ERROR,
)
from rongcloud_sdk.models.config import ClientConfig, ClientOptions
from rongcloud_sdk.models.conversation import ConversationType, UnPushLevel
from rongcloud_sdk.models.envelope import RestResult
from rongcloud_sdk.models.sensitive import SensitiveType
from rongcloud_sdk.models.ultragroup import UGMessage, PushExt

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "RongCloud",
    "AsyncRongCloud",
    "ClientConfig",
    "ClientOptions",
    "RongCloudError",
    "ClientValidationError",
    "RemoteAPIError",
    "TransportError",
    "ErrorOrigin",
    "PARAM_ERROR",
    "ConversationType",
    "UnPushLevel",
    "RestResult",
    "SensitiveType",
    "UGMessage",
    "PushExt",
]
