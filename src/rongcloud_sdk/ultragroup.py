"""
Ultra groups.

Group, member, mute and channel management use the /v2 REST protocol and
return a RestResult carrying the RC-Request-Id that was sent. Message
expansion and publish still go through the legacy form protocol.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence
from urllib.parse import quote

from pydantic import TypeAdapter

from rongcloud_sdk.errors import ErrorOrigin
from rongcloud_sdk.models.envelope import LooseBool, RestResult
from rongcloud_sdk.models.ultragroup import (
    PushExt,
    UGChannelInfo,
    UGGroupInfo,
    UGMessage,
    UGMessageExpansionItem,
    UGUserInfo,
)
from rongcloud_sdk.transport.envelope import tolerant_decode, tolerant_list
from rongcloud_sdk.transport.http import HttpClient, Reply
from rongcloud_sdk.validation import MAX_EXPANSION_KEYS, MAX_UG_PUBLISH_GROUPS, check_count, require

_REST = ErrorOrigin.REST
_LEGACY = ErrorOrigin.LEGACY
_status = TypeAdapter(LooseBool)


def _q(segment: str) -> str:
    """Percent-encode one path segment, slashes included."""
    return quote(segment, safe="")


def _done(reply: Reply) -> RestResult[None]:
    return RestResult(request_id=reply.request_id or "")


class UltraGroupAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    # --- groups ---

    async def create(self, user_id: str, group_id: str, group_name: str) -> RestResult[None]:
        """Create an ultra group owned by `user_id`."""
        require(_REST, user_id=user_id, group_id=group_id, group_name=group_name)
        return _done(await self._http.post("/v2/ultragroups", {
            "user_id": user_id,
            "group_id": group_id,
            "group_name": group_name,
        }))

    async def dismiss(self, group_id: str) -> RestResult[None]:
        require(_REST, group_id=group_id)
        return _done(await self._http.delete(f"/v2/ultragroups/{_q(group_id)}"))

    async def join(self, user_id: str, group_id: str) -> RestResult[None]:
        require(_REST, user_id=user_id, group_id=group_id)
        return _done(await self._http.post(f"/v2/ultragroups/{_q(group_id)}/users/{_q(user_id)}"))

    async def quit(self, user_id: str, group_id: str) -> RestResult[None]:
        require(_REST, user_id=user_id, group_id=group_id)
        return _done(await self._http.delete(f"/v2/ultragroups/{_q(group_id)}/users/{_q(user_id)}"))

    async def update(self, group_id: str, group_name: str) -> RestResult[None]:
        """Rename a group."""
        require(_REST, group_id=group_id, group_name=group_name)
        return _done(await self._http.put(f"/v2/ultragroups/{_q(group_id)}", {"group_name": group_name}))

    async def query_user_groups(self, user_id: str, page: int = 1, size: int = 20) -> RestResult[list[UGGroupInfo]]:
        """Groups `user_id` belongs to, one page at a time."""
        require(_REST, user_id=user_id)
        reply = await self._http.get(f"/v2/ultragroups/users/{_q(user_id)}/groups", {"page": page, "size": size})
        return RestResult(request_id=reply.request_id or "", data=tolerant_list(UGGroupInfo, reply.data, "groups"))

    async def query_group_users(self, group_id: str, page: int = 1, size: int = 20) -> RestResult[list[UGUserInfo]]:
        require(_REST, group_id=group_id)
        reply = await self._http.get(f"/v2/ultragroups/{_q(group_id)}/users", {"page": page, "size": size})
        return RestResult(request_id=reply.request_id or "", data=tolerant_list(UGUserInfo, reply.data, "users"))

    # --- messages ---

    async def send(self, msg: UGMessage) -> RestResult[None]:
        """Send a message to one or more ultra groups."""
        require(_REST, from_user_id=msg.from_user_id, to_group_ids=msg.to_group_ids)
        return _done(await self._http.post("/v2/message/ultragroup/send", msg.to_body()))

    # --- muted members ---

    async def mute_members_add(self, group_id: str, user_ids: Sequence[str]) -> RestResult[None]:
        require(_REST, group_id=group_id, user_ids=user_ids)
        return _done(await self._http.post(f"/v2/ultragroups/{_q(group_id)}/muted-users", {"user_ids": list(user_ids)}))

    async def mute_members_remove(self, group_id: str, user_ids: Sequence[str]) -> RestResult[None]:
        require(_REST, group_id=group_id, user_ids=user_ids)
        return _done(await self._http.delete(f"/v2/ultragroups/{_q(group_id)}/muted-users", {"user_ids": list(user_ids)}))

    async def mute_members_list(self, group_id: str) -> RestResult[list[UGUserInfo]]:
        """Muted members with the time each mute was set."""
        require(_REST, group_id=group_id)
        reply = await self._http.get(f"/v2/ultragroups/{_q(group_id)}/muted-users")
        return RestResult(request_id=reply.request_id or "", data=tolerant_list(UGUserInfo, reply.data, "users"))

    async def set_muted(self, group_id: str, status: bool) -> RestResult[None]:
        """Mute (True) or unmute (False) every member of the group."""
        require(_REST, group_id=group_id)
        return _done(await self._http.put(f"/v2/ultragroups/{_q(group_id)}/muted-status", {"status": bool(status)}))

    async def query_muted(self, group_id: str) -> RestResult[bool]:
        require(_REST, group_id=group_id)
        reply = await self._http.get(f"/v2/ultragroups/{_q(group_id)}/muted-status")
        status = reply.data.get("status") if isinstance(reply.data, dict) else None
        return RestResult(request_id=reply.request_id or "", data=_status.validate_python(status))

    # --- mute whitelist ---

    async def whitelist_add(self, group_id: str, user_ids: Sequence[str]) -> RestResult[None]:
        require(_REST, group_id=group_id, user_ids=user_ids)
        return _done(await self._http.post(f"/v2/ultragroups/{_q(group_id)}/allowed-users", {"user_ids": list(user_ids)}))

    async def whitelist_remove(self, group_id: str, user_ids: Sequence[str]) -> RestResult[None]:
        require(_REST, group_id=group_id, user_ids=user_ids)
        return _done(await self._http.delete(f"/v2/ultragroups/{_q(group_id)}/allowed-users", {"user_ids": list(user_ids)}))

    async def whitelist_list(self, group_id: str) -> RestResult[list[UGUserInfo]]:
        require(_REST, group_id=group_id)
        reply = await self._http.get(f"/v2/ultragroups/{_q(group_id)}/allowed-users")
        return RestResult(request_id=reply.request_id or "", data=tolerant_list(UGUserInfo, reply.data, "users"))

    # --- channels ---

    async def channel_create(self, group_id: str, channel_id: str) -> RestResult[None]:
        require(_REST, group_id=group_id, channel_id=channel_id)
        return _done(await self._http.post("/v2/ultragroups/channels", {
            "group_id": group_id,
            "channel_id": channel_id,
        }))

    async def channel_delete(self, group_id: str, channel_id: str) -> RestResult[None]:
        require(_REST, group_id=group_id, channel_id=channel_id)
        return _done(await self._http.delete(f"/v2/ultragroups/{_q(group_id)}/channels/{_q(channel_id)}"))

    async def channel_list(self, group_id: str, page: int = 1, limit: int = 20) -> RestResult[list[UGChannelInfo]]:
        require(_REST, group_id=group_id)
        reply = await self._http.get(f"/v2/ultragroups/{_q(group_id)}/channels", {"page": page, "limit": limit})
        return RestResult(
            request_id=reply.request_id or "", data=tolerant_list(UGChannelInfo, reply.data, "channel_list"),
        )

    # --- message expansion (legacy) ---

    async def expansion_set(
        self, group_id: str, user_id: str, msg_uid: str, bus_channel: str, extra: Mapping[str, str],
    ) -> None:
        """Set up to 100 expansion key/values on a sent message."""
        require(_LEGACY, group_id=group_id, user_id=user_id, msg_uid=msg_uid, bus_channel=bus_channel)
        check_count(_LEGACY, "extra", extra, MAX_EXPANSION_KEYS)
        await self._http.post_form("/ultragroup/message/expansion/set", {
            "msgUID": msg_uid,
            "busChannel": bus_channel,
            "userId": user_id,
            "groupId": group_id,
            "extraKeyVal": json.dumps(dict(extra), ensure_ascii=False),
        })

    async def expansion_delete(
        self, group_id: str, user_id: str, msg_uid: str, bus_channel: str, keys: Sequence[str],
    ) -> None:
        require(_LEGACY, group_id=group_id, user_id=user_id, msg_uid=msg_uid, bus_channel=bus_channel)
        check_count(_LEGACY, "keys", keys, MAX_EXPANSION_KEYS)
        await self._http.post_form("/ultragroup/message/expansion/delete", {
            "msgUID": msg_uid,
            "busChannel": bus_channel,
            "userId": user_id,
            "groupId": group_id,
            "extraKey": json.dumps(list(keys), ensure_ascii=False),
        })

    async def expansion_query(self, group_id: str, msg_uid: str) -> list[UGMessageExpansionItem]:
        """Expansion entries of a message; `extraContent` maps key -> {"v": value, "ts": millis}."""
        require(_LEGACY, group_id=group_id, msg_uid=msg_uid)
        result = await self._http.post_form("/ultragroup/message/expansion/query", {
            "msgUID": msg_uid,
            "groupId": group_id,
        })
        content = result.get("extraContent")
        if not isinstance(content, dict):
            return []
        items = []
        for key, entry in content.items():
            entry = entry if isinstance(entry, dict) else {}
            items.append(tolerant_decode(
                UGMessageExpansionItem, {"key": key, "value": entry.get("v"), "timestamp": entry.get("ts")},
            ))
        return items

    async def publish(
        self,
        from_user_id: str,
        object_name: str,
        content: str,
        to_group_ids: Sequence[str],
        *,
        push_content: Optional[str] = None,
        push_data: Optional[str] = None,
        is_persisted: Optional[str] = None,
        is_mentioned: Optional[str] = None,
        content_available: Optional[str] = None,
        bus_channel: Optional[str] = None,
        expansion: bool = False,
        extra_content: Optional[str] = None,
        push_ext: Optional[PushExt] = None,
    ) -> None:
        """Publish a message to at most three ultra groups (legacy protocol)."""
        require(_LEGACY, from_user_id=from_user_id, object_name=object_name, content=content)
        check_count(_LEGACY, "to_group_ids", to_group_ids, MAX_UG_PUBLISH_GROUPS)
        params: dict[str, Any] = {
            "fromUserId": from_user_id,
            "toGroupIds": json.dumps(list(to_group_ids)),
            "objectName": object_name,
            "content": content,
            "expansion": expansion,
            "pushContent": push_content,
            "pushData": push_data,
            "isPersisted": is_persisted,
            "isMentioned": is_mentioned,
            "contentAvailable": content_available,
            "buschannel": bus_channel,
        }
        if expansion:
            params["extraContent"] = extra_content
        if push_ext is not None:
            params["pushExt"] = push_ext.model_dump_json(by_alias=True)
        await self._http.post_form("/message/ultragroup/publish", params)
