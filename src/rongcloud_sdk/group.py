"""
Groups (legacy protocol).
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from rongcloud_sdk.errors import ClientValidationError, ErrorOrigin
from rongcloud_sdk.models.group import GroupInfo, GroupMuteStatus, GroupUser
from rongcloud_sdk.transport.envelope import tolerant_list
from rongcloud_sdk.transport.http import HttpClient
from rongcloud_sdk.validation import require

_LEGACY = ErrorOrigin.LEGACY


class GroupAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def create(self, group_id: str, group_name: str, member_ids: Sequence[str]) -> None:
        """Create a group with its initial members."""
        require(_LEGACY, group_id=group_id, group_name=group_name, member_ids=member_ids)
        await self._http.post_form("/group/create", {
            "userId": list(member_ids),
            "groupId": group_id,
            "groupName": group_name,
        })

    async def get(self, group_id: str) -> GroupInfo:
        require(_LEGACY, group_id=group_id)
        result = await self._http.post_form("/group/user/query", {"groupId": group_id})
        return GroupInfo(id=group_id, users=tolerant_list(GroupUser, result, "users"))

    async def join(self, group_id: str, group_name: str, member_ids: Sequence[str]) -> None:
        require(_LEGACY, group_id=group_id, member_ids=member_ids)
        await self._http.post_form("/group/join", {
            "userId": list(member_ids),
            "groupId": group_id,
            "groupName": group_name,
        })

    async def quit(self, group_id: str, member_ids: Sequence[str]) -> None:
        require(_LEGACY, group_id=group_id, member_ids=member_ids)
        await self._http.post_form("/group/quit", {"userId": list(member_ids), "groupId": group_id})

    async def update(self, group_id: str, group_name: str) -> None:
        require(_LEGACY, group_id=group_id, group_name=group_name)
        await self._http.post_form("/group/refresh", {"groupId": group_id, "groupName": group_name})

    async def dismiss(self, group_id: str, user_id: str) -> None:
        require(_LEGACY, group_id=group_id, user_id=user_id)
        await self._http.post_form("/group/dismiss", {"userId": user_id, "groupId": group_id})

    async def sync(self, user_id: str, groups: Mapping[str, str]) -> None:
        """Replace the server-side group list of `user_id` with `groups` (id -> name)."""
        require(_LEGACY, user_id=user_id, groups=dict(groups))
        params = {"userId": user_id}
        for group_id, name in groups.items():
            if not group_id:
                raise ClientValidationError("param 'groups' contains an empty group id", _LEGACY)
            params[f"group[{group_id}]"] = name
        await self._http.post_form("/group/sync", params)

    # --- muted members ---

    async def mute_members_add(self, group_id: str, member_ids: Sequence[str], minute: int) -> None:
        """Mute members for `minute` minutes."""
        require(_LEGACY, group_id=group_id, member_ids=member_ids)
        if minute <= 0:
            raise ClientValidationError("param 'minute' must be positive", _LEGACY)
        await self._http.post_form("/group/user/gag/add", {
            "userId": list(member_ids),
            "groupId": group_id,
            "minute": minute,
        })

    async def mute_members_list(self, group_id: str) -> list[GroupUser]:
        require(_LEGACY, group_id=group_id)
        result = await self._http.post_form("/group/user/gag/list", {"groupId": group_id})
        return tolerant_list(GroupUser, result, "users")

    async def mute_members_remove(self, group_id: str, member_ids: Sequence[str]) -> None:
        require(_LEGACY, group_id=group_id, member_ids=member_ids)
        await self._http.post_form("/group/user/gag/rollback", {"userId": list(member_ids), "groupId": group_id})

    # --- whole-group mute ---

    async def mute_all_add(self, group_ids: Sequence[str]) -> None:
        require(_LEGACY, group_ids=group_ids)
        await self._http.post_form("/group/ban/add", {"groupId": list(group_ids)})

    async def mute_all_list(self, group_ids: Optional[Sequence[str]] = None) -> list[GroupMuteStatus]:
        """Mute state of the given groups, or of every muted group when none are given."""
        result = await self._http.post_form("/group/ban/query", {"groupId": list(group_ids or [])})
        return tolerant_list(GroupMuteStatus, result, "groupinfo")

    async def mute_all_remove(self, group_ids: Sequence[str]) -> None:
        require(_LEGACY, group_ids=group_ids)
        await self._http.post_form("/group/ban/rollback", {"groupId": list(group_ids)})

    # --- mute whitelist ---

    async def whitelist_add(self, group_id: str, user_ids: Sequence[str]) -> None:
        require(_LEGACY, group_id=group_id, user_ids=user_ids)
        await self._http.post_form("/group/user/ban/whitelist/add", {"groupId": group_id, "userId": list(user_ids)})

    async def whitelist_list(self, group_id: str) -> list[str]:
        require(_LEGACY, group_id=group_id)
        result = await self._http.post_form("/group/user/ban/whitelist/query", {"groupId": group_id})
        user_ids = result.get("userIds")
        if not isinstance(user_ids, list):
            return []
        return [str(u) for u in user_ids if isinstance(u, (str, int))]

    async def whitelist_remove(self, group_id: str, user_ids: Sequence[str]) -> None:
        require(_LEGACY, group_id=group_id, user_ids=user_ids)
        await self._http.post_form(
            "/group/user/ban/whitelist/rollback", {"groupId": group_id, "userId": list(user_ids)},
        )
