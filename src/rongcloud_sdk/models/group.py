"""
Group models: records decoded from the legacy /group/* endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field

from rongcloud_sdk.models.envelope import LooseStr


class GroupUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: LooseStr = ""
    user_id: LooseStr = Field(default="", alias="userId")
    time: LooseStr = ""


class GroupInfo(BaseModel):
    id: str = ""
    users: list[GroupUser] = []


class GroupMuteStatus(BaseModel):
    """One entry of /group/ban/query.json: stat is "1" while everyone is muted."""

    model_config = ConfigDict(populate_by_name=True)

    group_id: LooseStr = Field(default="", alias="groupId")
    stat: LooseStr = ""
