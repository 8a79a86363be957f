"""
Conversation do-not-disturb settings (legacy protocol).
"""

from typing import Optional, Union

from pydantic import TypeAdapter

from rongcloud_sdk.errors import ClientValidationError, ErrorOrigin
from rongcloud_sdk.models.conversation import NOTIFICATION_TYPES, ConversationType, UnPushLevel
from rongcloud_sdk.models.envelope import LooseInt
from rongcloud_sdk.transport.http import HttpClient
from rongcloud_sdk.validation import check_choice, require

_LEGACY = ErrorOrigin.LEGACY
_is_muted = TypeAdapter(LooseInt)


def _conversation_type(value: Union[ConversationType, int, None]) -> ConversationType:
    try:
        return ConversationType(value)
    except ValueError:
        raise ClientValidationError("param 'conversation_type' is required", _LEGACY) from None


class ConversationAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def _set_muted(
        self, conversation_type: Union[ConversationType, int], user_id: str, target_id: str,
        is_muted: int, bus_channel: Optional[str],
    ) -> None:
        ct = _conversation_type(conversation_type)
        require(_LEGACY, user_id=user_id, target_id=target_id)
        await self._http.post_form("/conversation/notification/set", {
            "requestId": user_id,
            "conversationType": int(ct),
            "targetId": target_id,
            "isMuted": is_muted,
            "busChannel": bus_channel,
        })

    async def mute(
        self, conversation_type: Union[ConversationType, int], user_id: str, target_id: str,
        bus_channel: Optional[str] = None,
    ) -> None:
        """Stop push notifications for one conversation of `user_id`."""
        await self._set_muted(conversation_type, user_id, target_id, 1, bus_channel)

    async def unmute(
        self, conversation_type: Union[ConversationType, int], user_id: str, target_id: str,
        bus_channel: Optional[str] = None,
    ) -> None:
        """Resume push notifications for one conversation of `user_id`."""
        await self._set_muted(conversation_type, user_id, target_id, 0, bus_channel)

    async def get(
        self, conversation_type: Union[ConversationType, int], user_id: str, target_id: str,
        bus_channel: Optional[str] = None,
    ) -> int:
        """Return 1 if the conversation is muted for `user_id`, else 0."""
        ct = _conversation_type(conversation_type)
        require(_LEGACY, user_id=user_id, target_id=target_id)
        result = await self._http.post_form("/conversation/notification/get", {
            "requestId": user_id,
            "conversationType": int(ct),
            "targetId": target_id,
            "busChannel": bus_channel,
        })
        return _is_muted.validate_python(result.get("isMuted"))

    async def type_notification_set(
        self, conversation_type: Union[ConversationType, int], request_id: str, unpush_level: Union[UnPushLevel, int],
    ) -> None:
        """Set the do-not-disturb level for every conversation of one type."""
        check_choice(_LEGACY, "conversation_type", conversation_type, NOTIFICATION_TYPES)
        require(_LEGACY, request_id=request_id)
        check_choice(_LEGACY, "unpush_level", unpush_level, set(UnPushLevel))
        await self._http.post_form("/conversation/type/notification/set", {
            "conversationType": int(conversation_type),
            "requestId": request_id,
            "unpushLevel": int(unpush_level),
        })

    async def type_notification_get(self, conversation_type: Union[ConversationType, int], request_id: str) -> int:
        check_choice(_LEGACY, "conversation_type", conversation_type, NOTIFICATION_TYPES)
        require(_LEGACY, request_id=request_id)
        result = await self._http.post_form("/conversation/type/notification/get", {
            "conversationType": int(conversation_type),
            "requestId": request_id,
        })
        return _is_muted.validate_python(result.get("isMuted"))

    async def notification_set(
        self,
        conversation_type: Union[ConversationType, int],
        request_id: str,
        target_id: str,
        is_muted: int,
        unpush_level: Union[UnPushLevel, int],
        bus_channel: Optional[str] = None,
    ) -> None:
        """Set mute state and do-not-disturb level of a single conversation."""
        check_choice(_LEGACY, "conversation_type", conversation_type, NOTIFICATION_TYPES)
        require(_LEGACY, request_id=request_id, target_id=target_id)
        check_choice(_LEGACY, "is_muted", is_muted, (0, 1))
        check_choice(_LEGACY, "unpush_level", unpush_level, set(UnPushLevel))
        await self._http.post_form("/conversation/notification/set", {
            "conversationType": int(conversation_type),
            "requestId": request_id,
            "targetId": target_id,
            "isMuted": int(is_muted),
            "unpushLevel": int(unpush_level),
            "busChannel": bus_channel,
        })

    async def notification_get(
        self,
        conversation_type: Union[ConversationType, int],
        request_id: str,
        target_id: str,
        bus_channel: Optional[str] = None,
    ) -> int:
        check_choice(_LEGACY, "conversation_type", conversation_type, NOTIFICATION_TYPES)
        require(_LEGACY, request_id=request_id, target_id=target_id)
        result = await self._http.post_form("/conversation/notification/get", {
            "conversationType": int(conversation_type),
            "requestId": request_id,
            "targetId": target_id,
            "busChannel": bus_channel,
        })
        return _is_muted.validate_python(result.get("isMuted"))
