"""Turn text into "abstract speech" by replacing syllables with emoji."""

from __future__ import annotations

import sqlite3
from pathlib import Path


class PinyinDatabase:
    """Lookup tables from characters to pinyin and from pinyin to emoji."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS pinyin (word TEXT, pronunciation TEXT)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS emoji (pronunciation TEXT, emoji TEXT)"
            )

    def __enter__(self) -> PinyinDatabase:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def pinyin(self, word: str) -> str:
        """Pinyin of a character, or an empty string."""
        found = self._conn.execute(
            "SELECT pronunciation FROM pinyin WHERE word = ? LIMIT 1", (word,)
        ).fetchone()
        return found[0] or "" if found else ""

    def emoji(self, pronun: str) -> str:
        """Emoji for a pronunciation, or an empty string."""
        found = self._conn.execute(
            "SELECT emoji FROM emoji WHERE pronunciation = ? LIMIT 1", (pronun,)
        ).fetchone()
        return found[0] or "" if found else ""


def translate(text: str, db: PinyinDatabase) -> str:
    """Replace character pairs, then single characters, by matching emoji."""
    out = []
    i = 0
    while i < len(text):
        if i + 1 < len(text):
            pair = db.emoji(db.pinyin(text[i]) + db.pinyin(text[i + 1]))
            if pair:
                out.append(pair)
                i += 2
                continue
        single = db.emoji(db.pinyin(text[i]))
        out.append(single or text[i])
        i += 1
    return "".join(out)