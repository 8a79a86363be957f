"""
Conversation enums.
"""

from enum import IntEnum


class ConversationType(IntEnum):
    PRIVATE = 1
    DISCUSSION = 2
    GROUP = 3
    CHATROOM = 4
    CUSTOMER_SERVICE = 5
    SYSTEM = 6
    ULTRA_GROUP = 10


# Types accepted by the per-type and per-conversation do-not-disturb endpoints.
NOTIFICATION_TYPES = frozenset({
    ConversationType.PRIVATE,
    ConversationType.GROUP,
    ConversationType.SYSTEM,
    ConversationType.ULTRA_GROUP,
})


class UnPushLevel(IntEnum):
    ALL_MESSAGE = -1       # notify for everything
    NOT_SET = 0
    AT_MESSAGE = 1         # only @ mentions
    AT_USER = 2            # only @ mentions of this user
    AT_ALL_GROUP_MEMBERS = 4
    NOT_RECV = 5           # no notifications
