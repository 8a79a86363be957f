"""
Pre-flight checks shared by every operation.

These mirror server-side limits so that a call the platform would reject
fails locally, before any request is built.
"""

from typing import Any, Collection, Optional, Sized

from rongcloud_sdk.errors import ClientValidationError, ErrorOrigin

MAX_SENSITIVE_REMOVE = 50
MAX_SENSITIVE_WORD_LENGTH = 32
MAX_UG_PUBLISH_GROUPS = 3
MAX_EXPANSION_KEYS = 100
MAX_PRIVATE_RECIPIENTS = 1000
MAX_SYSTEM_RECIPIENTS = 100
MAX_GROUP_TARGETS = 3
MAX_CHATROOM_TARGETS = 10


def require(origin: ErrorOrigin, **fields: Any) -> None:
    """Raise for the first field that is None, empty or an empty collection."""
    for name, value in fields.items():
        if value is None or (isinstance(value, (str, list, tuple, dict, set)) and len(value) == 0):
            raise ClientValidationError(f"param '{name}' is required", origin)


def check_count(origin: ErrorOrigin, name: str, items: Optional[Sized], maximum: int, minimum: int = 1) -> None:
    count = len(items) if items is not None else 0
    if count < minimum:
        raise ClientValidationError(f"param '{name}' is required", origin)
    if count > maximum:
        raise ClientValidationError(f"param '{name}' exceeds the limit of {maximum} (got {count})", origin)


def check_length(origin: ErrorOrigin, name: str, value: str, maximum: int) -> None:
    if len(value) > maximum:
        raise ClientValidationError(f"param '{name}' is longer than {maximum} characters", origin)


def check_choice(origin: ErrorOrigin, name: str, value: Any, allowed: Collection[Any]) -> None:
    if value not in allowed:
        raise ClientValidationError(f"param '{name}' was wrong", origin)
