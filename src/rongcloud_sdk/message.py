"""
Message sending, recall and history (legacy protocol).

Message bodies are opaque to the SDK: `content` is sent as given, or
JSON-encoded when a mapping is passed.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional, Sequence, Union

from rongcloud_sdk.errors import ClientValidationError, ErrorOrigin
from rongcloud_sdk.models.conversation import ConversationType
from rongcloud_sdk.models.message import HistoryFile
from rongcloud_sdk.transport.envelope import tolerant_decode
from rongcloud_sdk.transport.http import HttpClient
from rongcloud_sdk.validation import (
    MAX_CHATROOM_TARGETS,
    MAX_GROUP_TARGETS,
    MAX_PRIVATE_RECIPIENTS,
    MAX_SYSTEM_RECIPIENTS,
    check_count,
    require,
)

_LEGACY = ErrorOrigin.LEGACY
_HISTORY_DATE = re.compile(r"^\d{10}$")  # YYYYMMDDHH

Content = Union[str, Mapping[str, Any]]


def _encode(content: Content) -> str:
    if isinstance(content, str):
        return content
    return json.dumps(dict(content), ensure_ascii=False)


def _check_date(date: str) -> None:
    require(_LEGACY, date=date)
    if not _HISTORY_DATE.match(date):
        raise ClientValidationError("param 'date' must be formatted as YYYYMMDDHH", _LEGACY)


class MessageAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def private_send(
        self,
        from_user_id: str,
        to_user_ids: Sequence[str],
        object_name: str,
        content: Content,
        *,
        push_content: Optional[str] = None,
        push_data: Optional[str] = None,
        count: Optional[int] = None,
        verify_blacklist: Optional[int] = None,
        is_persisted: Optional[int] = None,
        is_include_sender: Optional[int] = None,
        content_available: Optional[int] = None,
    ) -> None:
        """Send a one-to-one message to up to 1000 users."""
        require(_LEGACY, from_user_id=from_user_id, object_name=object_name, content=content)
        check_count(_LEGACY, "to_user_ids", to_user_ids, MAX_PRIVATE_RECIPIENTS)
        await self._http.post_form("/message/private/publish", {
            "fromUserId": from_user_id,
            "toUserId": list(to_user_ids),
            "objectName": object_name,
            "content": _encode(content),
            "pushContent": push_content,
            "pushData": push_data,
            "count": count,
            "verifyBlacklist": verify_blacklist,
            "isPersisted": is_persisted,
            "isIncludeSender": is_include_sender,
            "contentAvailable": content_available,
        })

    async def private_recall(
        self, from_user_id: str, target_id: str, message_uid: str, sent_time: int, is_admin: Optional[int] = None,
    ) -> None:
        """Recall a one-to-one message. `sent_time` is the send timestamp in milliseconds."""
        require(_LEGACY, from_user_id=from_user_id, target_id=target_id, message_uid=message_uid)
        if not sent_time:
            raise ClientValidationError("param 'sent_time' is required", _LEGACY)
        await self._http.post_form("/message/recall", {
            "conversationType": int(ConversationType.PRIVATE),
            "fromUserId": from_user_id,
            "targetId": target_id,
            "messageUID": message_uid,
            "sentTime": sent_time,
            "isAdmin": is_admin,
        })

    async def group_send(
        self,
        from_user_id: str,
        to_group_ids: Sequence[str],
        object_name: str,
        content: Content,
        *,
        push_content: Optional[str] = None,
        push_data: Optional[str] = None,
        is_persisted: Optional[int] = None,
        is_include_sender: Optional[int] = None,
        is_mentioned: Optional[int] = None,
        content_available: Optional[int] = None,
    ) -> None:
        """Send a message to up to three groups."""
        require(_LEGACY, from_user_id=from_user_id, object_name=object_name, content=content)
        check_count(_LEGACY, "to_group_ids", to_group_ids, MAX_GROUP_TARGETS)
        await self._http.post_form("/message/group/publish", {
            "fromUserId": from_user_id,
            "toGroupId": list(to_group_ids),
            "objectName": object_name,
            "content": _encode(content),
            "pushContent": push_content,
            "pushData": push_data,
            "isPersisted": is_persisted,
            "isIncludeSender": is_include_sender,
            "isMentioned": is_mentioned,
            "contentAvailable": content_available,
        })

    async def chatroom_send(
        self, from_user_id: str, to_chatroom_ids: Sequence[str], object_name: str, content: Content,
    ) -> None:
        require(_LEGACY, from_user_id=from_user_id, object_name=object_name, content=content)
        check_count(_LEGACY, "to_chatroom_ids", to_chatroom_ids, MAX_CHATROOM_TARGETS)
        await self._http.post_form("/message/chatroom/publish", {
            "fromUserId": from_user_id,
            "toChatroomId": list(to_chatroom_ids),
            "objectName": object_name,
            "content": _encode(content),
        })

    async def system_send(
        self,
        from_user_id: str,
        to_user_ids: Sequence[str],
        object_name: str,
        content: Content,
        *,
        push_content: Optional[str] = None,
        push_data: Optional[str] = None,
        is_persisted: Optional[int] = None,
        is_counted: Optional[int] = None,
        content_available: Optional[int] = None,
    ) -> None:
        """Send a system notification to up to 100 users."""
        require(_LEGACY, from_user_id=from_user_id, object_name=object_name, content=content)
        check_count(_LEGACY, "to_user_ids", to_user_ids, MAX_SYSTEM_RECIPIENTS)
        await self._http.post_form("/message/system/publish", {
            "fromUserId": from_user_id,
            "toUserId": list(to_user_ids),
            "objectName": object_name,
            "content": _encode(content),
            "pushContent": push_content,
            "pushData": push_data,
            "isPersisted": is_persisted,
            "isCounted": is_counted,
            "contentAvailable": content_available,
        })

    async def history_get(self, date: str) -> HistoryFile:
        """Location of the message log for one hour, `date` as YYYYMMDDHH."""
        _check_date(date)
        result = await self._http.post_form("/message/history", {"date": date})
        return tolerant_decode(HistoryFile, result)

    async def history_remove(self, date: str) -> None:
        _check_date(date)
        await self._http.post_form("/message/history/delete", {"date": date})
