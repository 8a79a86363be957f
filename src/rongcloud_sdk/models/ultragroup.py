"""
Ultra group models: records decoded from /v2 responses and message bodies sent to it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rongcloud_sdk.models.envelope import LooseInt, LooseStr


class UGGroupInfo(BaseModel):
    group_id: LooseStr = ""
    group_name: LooseStr = ""


class UGUserInfo(BaseModel):
    id: LooseStr = ""
    muted_time: LooseStr = Field(default="", alias="time")

    model_config = ConfigDict(populate_by_name=True)


class UGChannelInfo(BaseModel):
    channel_id: LooseStr = ""
    create_time: LooseStr = ""


class UGMessageExpansionItem(BaseModel):
    key: str
    value: LooseStr = ""
    timestamp: LooseInt = 0


class UGMessage(BaseModel):
    """Body of POST /v2/message/ultragroup/send. Unset optional fields are not sent."""

    from_user_id: str
    to_group_ids: list[str]
    object_name: str
    content: str
    to_user_ids: Optional[list[str]] = None
    push_content: Optional[str] = None
    push_data: Optional[str] = None
    include_sender_enable: Optional[bool] = None
    store_flag: bool = True
    mentioned_flag: Optional[bool] = None
    silence_push: Optional[bool] = None
    push_ext: Optional[str] = None
    bus_channel: Optional[str] = None

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)


class PushExt(BaseModel):
    """pushExt of the legacy ultra group publish call."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    template_id: str = Field(default="", alias="templateId")
    force_show_push_content: int = Field(default=0, alias="forceShowPushContent")
    push_configs: list[dict[str, dict[str, str]]] = Field(default_factory=list, alias="pushConfigs")
