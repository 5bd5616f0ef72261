"""Drift bottles: messages thrown into a channel and picked up at random."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path

_ISO_POLY = 0xD800000000000000
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _make_table(poly: int) -> list[int]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return table


_ISO_TABLE = _make_table(_ISO_POLY)


def crc64_iso(data: bytes) -> int:
    """CRC-64 with the ISO polynomial, as an unsigned 64-bit integer."""
    crc = _MASK64
    for byte in data:
        crc = _ISO_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK64


@dataclass
class Bottle:
    """A thrown message; ``grp`` limits who can pick it (0 means anyone)."""

    id: int
    qq: int
    grp: int
    name: str
    msg: str


def new_bottle(qq: int, grp: int, name: str, msg: str) -> Bottle:
    """Create a bottle whose id is the signed checksum of its contents."""
    checksum = crc64_iso(f"{qq}_{grp}_{name}_{msg}".encode("utf-8"))
    if checksum > _INT64_MAX:
        checksum -= 1 << 64
    return Bottle(id=checksum, qq=qq, grp=grp, name=name, msg=msg)


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class Sea:
    """SQLite store with one table per channel."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()

    def __enter__(self) -> Sea:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _require(self, channel: str) -> None:
        found = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (channel,)
        ).fetchone()
        if found is None:
            raise LookupError(f"no such channel: {channel}")

    def create_channel(self, channel: str) -> None:
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(channel)} ("
                "id INTEGER PRIMARY KEY, qq INTEGER, grp INTEGER, name TEXT, msg TEXT)"
            )

    def throw(self, bottle: Bottle, channel: str) -> None:
        with self._lock:
            self._require(channel)
            with self._conn:
                self._conn.execute(
                    f"INSERT OR REPLACE INTO {_quote(channel)} (id, qq, grp, name, msg) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (bottle.id, bottle.qq, bottle.grp, bottle.name, bottle.msg),
                )

    def fetch(self, channel: str, grp: int) -> Bottle:
        """Pick a random bottle open to everyone or to ``grp``."""
        with self._lock:
            self._require(channel)
            found = self._conn.execute(
                f"SELECT id, qq, grp, name, msg FROM {_quote(channel)} "
                "WHERE grp=0 OR grp=? ORDER BY RANDOM() LIMIT 1",
                (grp,),
            ).fetchone()
        if found is None:
            raise LookupError("no bottle found")
        return Bottle(*found)

    def destroy(self, bottle: Bottle, channel: str) -> None:
        with self._lock:
            self._require(channel)
            with self._conn:
                self._conn.execute(f"DELETE FROM {_quote(channel)} WHERE id=?", (bottle.id,))

    def count(self, channel: str) -> int:
        with self._lock:
            self._require(channel)
            return self._conn.execute(f"SELECT COUNT(*) FROM {_quote(channel)}").fetchone()[0]

    def close(self) -> None:
        self._conn.close()


_THROW_RE = re.compile(
    r"^(在群[0-9]+)?丢漂流瓶(到频道[0-9A-Za-z_]+)?[\t\n\f\r ]+(.*)$"
)
_PICK_RE = re.compile(r"^(从频道[0-9A-Za-z_]+)?捡漂流瓶$")

DEFAULT_CHANNEL = "global"


def parse_throw(text: str, group_id: int) -> tuple[int, str, str] | None:
    """Parse a throw command into ``(grp, channel, msg)``; None if not one."""
    match = _THROW_RE.match(text)
    if match is None:
        return None
    grp = group_id
    if match.group(1):
        grp = int(match.group(1)[2:])
        if not _INT64_MIN <= grp <= _INT64_MAX:
            raise ValueError("群号非法!")
    channel = match.group(2)[3:] if match.group(2) else DEFAULT_CHANNEL
    msg = match.group(3)
    if not msg:
        raise ValueError("消息为空!")
    return grp, channel, msg


def parse_pick(text: str) -> str | None:
    """Return the channel named by a pick command, or None if not one."""
    match = _PICK_RE.match(text)
    if match is None:
        return None
    return match.group(1)[3:] if match.group(1) else DEFAULT_CHANNEL