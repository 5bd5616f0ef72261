"""Reply-mode and voice-mode selection per conversation."""

from __future__ import annotations

import threading

REPLY_MODES = ("青云客", "小爱")
DEFAULT_REPLY_MODE = "青云客"
DEFAULT_SOUND_MODE = "拟声鸟阿梓"
SOUND_MODES = (
    "拟声鸟阿梓", "拟声鸟文静", "拟声鸟药水哥",
    "百度女声", "百度男声", "百度度逍遥", "百度度丫丫",
)


class ModeStore:
    """In-memory integer setting per conversation; unset ones read as 0."""

    def __init__(self) -> None:
        self._data: dict[int, int] = {}
        self._lock = threading.Lock()

    def get(self, gid: int) -> int:
        with self._lock:
            return self._data.get(gid, 0)

    def set(self, gid: int, value: int) -> None:
        with self._lock:
            self._data[gid] = int(value)


def conversation_id(group_id: int, user_id: int) -> int:
    """The group id, or the negated user id in private chats."""
    return group_id if group_id != 0 else -user_id


def set_reply_mode(store: ModeStore | None, gid: int, name: str) -> None:
    """Store the reply mode ``name`` for a conversation."""
    if name not in REPLY_MODES:
        raise ValueError("no such mode")
    if store is None:
        raise LookupError("no such plugin")
    store.set(gid, REPLY_MODES.index(name))


def get_reply_mode(store: ModeStore | None, gid: int) -> str:
    """The reply mode of a conversation, or the default."""
    if store is not None:
        index = store.get(gid)
        if 0 <= index < len(REPLY_MODES):
            return REPLY_MODES[index]
    return DEFAULT_REPLY_MODE


class TTSModes:
    """Ordered list of voice modes whose first entry is the default."""

    def __init__(self) -> None:
        self._modes = list(SOUND_MODES)
        self._lock = threading.RLock()

    def list(self) -> list[str]:
        """A copy of the current ordering."""
        with self._lock:
            return list(self._modes)

    def get_sound_mode(self, store: ModeStore | None, gid: int) -> str:
        """The voice mode of a conversation."""
        if store is not None:
            with self._lock:
                index = store.get(gid)
                if 0 <= index < len(self._modes):
                    return self._modes[index]
        return DEFAULT_SOUND_MODE

    def set_sound_mode(self, store: ModeStore, gid: int, name: str) -> None:
        """Store the voice mode ``name`` for a conversation."""
        with self._lock:
            if name not in self._modes:
                raise ValueError("no such mode")
            index = self._modes.index(name)
        store.set(gid, index)

    def set_default_sound_mode(self, name: str) -> None:
        """Make ``name`` the default by swapping it into first place."""
        with self._lock:
            if name not in self._modes:
                raise ValueError("no such mode")
            index = self._modes.index(name)
            self._modes[0], self._modes[index] = self._modes[index], self._modes[0]