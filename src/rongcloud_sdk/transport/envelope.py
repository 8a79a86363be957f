"""
Envelope parsing and tolerant record decoding.
"""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from rongcloud_sdk.errors import ErrorOrigin, RemoteAPIError, TransportError
from rongcloud_sdk.models.envelope import Envelope, RestEnvelope

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
E = TypeVar("E", bound=Envelope)


def parse_envelope(
    response: httpx.Response,
    envelope_type: type[E],
    origin: ErrorOrigin,
    request_id: Optional[str] = None,
) -> E:
    """Parse a response body into an envelope, raising for anything but code 200.

    Non-2xx statuses are not errors by themselves: the body still decides.
    A body without `code` reads as code 0 and is rejected.
    """
    try:
        raw = response.json()
    except ValueError as e:
        raise TransportError(
            f"Malformed response body (HTTP {response.status_code}): {response.text[:200]}",
            cause=e, origin=origin, request_id=request_id,
        ) from e
    if not isinstance(raw, dict):
        raise TransportError(
            f"Unexpected response body (HTTP {response.status_code}): {response.text[:200]}",
            origin=origin, request_id=request_id,
        )
    try:
        envelope = envelope_type.model_validate(raw)
    except ValidationError as e:
        raise TransportError("Unreadable response envelope", cause=e, origin=origin, request_id=request_id) from e

    if not envelope.ok:
        logger.debug("Remote rejection code=%s request_id=%s: %s", envelope.code, request_id, envelope.error_message)
        raise RemoteAPIError(envelope.code, envelope.error_message, origin=origin, request_id=request_id)
    return envelope


def decode_legacy(response: httpx.Response) -> dict[str, Any]:
    """Decode a form-protocol response: everything in the envelope except its code."""
    return parse_envelope(response, Envelope, ErrorOrigin.LEGACY).payload()


def decode_rest(response: httpx.Response, request_id: str) -> Any:
    """Decode a /v2 response: the `data` member, an empty map when absent."""
    envelope = parse_envelope(response, RestEnvelope, ErrorOrigin.REST, request_id)
    return envelope.data if envelope.data is not None else {}


def tolerant_decode(model: type[M], raw: Any) -> M:
    """Build `model` from a loosely-typed mapping; unusable input yields the all-default record."""
    if not isinstance(raw, dict):
        return model()
    try:
        return model.model_validate(raw)
    except ValidationError:
        logger.debug("Discarding unreadable %s record: %r", model.__name__, raw)
        return model()


def tolerant_list(model: type[M], data: Any, key: str) -> list[M]:
    """Decode data[key] as a list of `model` records.

    An absent, null or non-list collection is an empty result. Elements that
    are not objects are skipped.
    """
    if not isinstance(data, dict):
        return []
    items = data.get(key)
    if not isinstance(items, list):
        return []
    return [tolerant_decode(model, item) for item in items if isinstance(item, dict)]
