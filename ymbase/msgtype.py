"""Message kinds and the bit masks used to filter them."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "MsgType",
    "conv2bitmask",
    "MSG_MASK_ERROR",
    "MSG_MASK_WARNING",
    "MSG_MASK_FAILURE",
    "MSG_MASK_INFO",
    "MSG_MASK_DEBUG",
    "MSG_MASK_ALL",
    "MSG_MASK_NONE",
]


class MsgType(Enum):
    """Kind of a message."""

    Error = 0
    Warning = 1
    Failure = 2
    Info = 3
    Debug = 4
    End = 5

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    MsgType.Error: "(ERROR  )",
    MsgType.Warning: "(WARNING)",
    MsgType.Info: "(INFO   )",
    MsgType.Failure: "(FAILURE)",
    MsgType.Debug: "(DEBUG  )",
    MsgType.End: "(-------)",
}

_MASK_WIDTH = MsgType.End.value
_MASK_LIMIT = (1 << _MASK_WIDTH) - 1


def conv2bitmask(msg_type: MsgType) -> int:
    """Return the bit mask selecting ``msg_type``; ``MsgType.End`` has no bit."""
    return (1 << MsgType(msg_type).value) & _MASK_LIMIT


MSG_MASK_ERROR = conv2bitmask(MsgType.Error)
MSG_MASK_WARNING = conv2bitmask(MsgType.Warning)
MSG_MASK_INFO = conv2bitmask(MsgType.Info)
MSG_MASK_FAILURE = conv2bitmask(MsgType.Failure)
MSG_MASK_DEBUG = conv2bitmask(MsgType.Debug)
MSG_MASK_ALL = (
    MSG_MASK_ERROR | MSG_MASK_WARNING | MSG_MASK_INFO | MSG_MASK_FAILURE | MSG_MASK_DEBUG
)
MSG_MASK_NONE = 0