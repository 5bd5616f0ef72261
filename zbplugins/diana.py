"""Short essays about a virtual idol, and a text-similarity check against an online index."""

from __future__ import annotations

import hashlib
import json
import math
import sqlite3
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

import requests

CHECK_URL = "https://asoulcnki.asia/v1/api/check"
HENTAI_ID = -3802576048116006195
CHECK_KEYWORD = "查重"
NOT_FOUND_REPLY = "枝网没搜到，查重率为0%，鉴定为原创"
_CONTENT_LIMIT = 102
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def text_id(text: str) -> int:
    """Signed 64-bit id from the first eight bytes (little endian) of the text's MD5."""
    digest = hashlib.md5(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little", signed=True)


class TextDatabase:
    """SQLite store of essays."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS text (id INTEGER PRIMARY KEY, data TEXT)"
            )

    def __enter__(self) -> TextDatabase:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def add(self, text: str) -> int:
        """Store an essay under its content id and return that id."""
        ident = text_id(text)
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO text (id, data) VALUES (?, ?)", (ident, text)
            )
        return ident

    def random(self) -> str:
        """A random essay."""
        with self._lock:
            found = self._conn.execute(
                "SELECT data FROM text ORDER BY RANDOM() LIMIT 1"
            ).fetchone()
        if found is None:
            raise LookupError("no text found")
        return found[0] or ""

    def hentai(self) -> str:
        """The one special essay."""
        with self._lock:
            found = self._conn.execute(
                "SELECT data FROM text WHERE id = ?", (HENTAI_ID,)
            ).fetchone()
        if found is None:
            raise LookupError("no text found")
        return found[0] or ""

    def count(self) -> int:
        with self._lock:
            return self._conn.execute("SELECT COUNT(*) FROM text").fetchone()[0]


def is_check_request(segments: Iterable[Mapping[str, Any]]) -> bool:
    """True for a reply message whose text reads the check keyword."""
    segments = list(segments)
    if not segments or segments[0].get("type") != "reply":
        return False
    for segment in segments:
        if segment.get("type") != "text":
            continue
        text = str((segment.get("data") or {}).get("text", ""))
        for junk in (" ", "\r", "\n"):
            text = text.replace(junk, "")
        if text == CHECK_KEYWORD:
            return True
    return False


def check(text: str, session: Any = None) -> dict:
    """Submit ``text`` to the similarity index and return its JSON answer."""
    session = session if session is not None else requests
    response = session.post(
        CHECK_URL,
        data=json.dumps({"text": text}, ensure_ascii=False).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )
    response.raise_for_status()
    return response.json()


def _show(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _truncate(content: str) -> str:
    raw = content.encode("utf-8")
    if len(raw) <= _CONTENT_LIMIT:
        return content
    return raw[:_CONTENT_LIMIT].decode("utf-8", errors="ignore") + "....."


def report(result: Mapping[str, Any], now: datetime | None = None) -> str:
    """The reply text for a similarity check answer."""
    code = result.get("code") or 0
    if code != 0:
        raise RuntimeError(f"api返回错误:{code}")
    related_list = (result.get("data") or {}).get("related") or []
    if not related_list:
        return NOT_FOUND_REPLY
    first = related_list[0] or {}
    related = first.get("reply") or {}
    rate = float(first.get("rate") or 0)
    now = now if now is not None else datetime.now()
    ctime = datetime.fromtimestamp(int(float(related.get("ctime") or 0)))
    return "".join(
        (
            "枝网文本复制检测报告(简洁)", "\n",
            "查重时间: ", now.strftime(_TIME_FORMAT), "\n",
            "总文字复制比: ", str(int(math.floor(rate * 100))), "%", "\n",
            "相似小作文：", "\n", _truncate(_show(related.get("content"))), "\n",
            "获赞数：", _show(related.get("like_num")), "\n",
            _show(first.get("reply_url")), "\n",
            "作者: ", _show(related.get("m_name")), "\n",
            "发表时间: ", ctime.strftime(_TIME_FORMAT), "\n",
            "查重结果仅作参考，请注意辨别是否为原创", "\n",
            "数据来源: https://asoulcnki.asia/",
        )
    )