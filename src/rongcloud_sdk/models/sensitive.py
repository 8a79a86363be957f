"""
Sensitive word models.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

from rongcloud_sdk.models.envelope import LooseStr


class SensitiveType(IntEnum):
    REPLACE = 0
    BLOCK = 1


class SensitiveWord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: LooseStr = ""
    word: LooseStr = ""
    replace_word: LooseStr = Field(default="", alias="replaceWord")
