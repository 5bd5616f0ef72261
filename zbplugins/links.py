"""Link replies: a random generated waifu picture and a search link."""

from __future__ import annotations

import random
from typing import Any
from urllib.parse import quote_plus

WAIFU_URL = "https://www.thiswaifudoesnotexist.net/example-{}.jpg"
BAIDU_URL = "https://buhuibaidu.me/?s="


def waifu_url(rng: Any = None) -> str:
    """Return the URL of a random picture numbered 1 to 100000."""
    rng = rng if rng is not None else random
    return WAIFU_URL.format(rng.randrange(100000) + 1)


def baidu_url(text: str) -> str | None:
    """Return the search link for ``text``, or None when it is empty."""
    if not text:
        return None
    return BAIDU_URL + quote_plus(text)