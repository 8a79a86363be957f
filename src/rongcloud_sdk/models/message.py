"""
Message models.
"""

from pydantic import BaseModel

from rongcloud_sdk.models.envelope import LooseStr


class HistoryFile(BaseModel):
    """Download location of one hour of message history."""

    url: LooseStr = ""
    date: LooseStr = ""
