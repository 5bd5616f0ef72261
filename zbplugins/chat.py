"""Small talk: name calls, poke replies and a per-group air conditioner."""

from __future__ import annotations

import random
import re
import threading
import time
from typing import Any, Callable

DEFAULT_TEMPERATURE = 26
_INT64_MAX = 2**63 - 1


class RateLimiter:
    """Token bucket holding ``burst`` tokens, refilled ``burst`` per ``interval`` seconds."""

    def __init__(self, interval: float, burst: int,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.interval = float(interval)
        self.burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()
        self._lock = threading.Lock()

    def acquire(self, n: int = 1) -> bool:
        """Take ``n`` tokens if available."""
        with self._lock:
            now = self._clock()
            refill = (now - self._last) * self.burst / self.interval
            self._tokens = min(float(self.burst), self._tokens + refill)
            self._last = now
            if self._tokens >= n:
                self._tokens -= n
                return True
            return False


class RateManager:
    """One rate limiter per key, created on first use."""

    def __init__(self, interval: float, burst: int,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.interval = interval
        self.burst = burst
        self._clock = clock
        self._limiters: dict[Any, RateLimiter] = {}
        self._lock = threading.Lock()

    def load(self, key: Any) -> RateLimiter:
        """Return the limiter for ``key``."""
        with self._lock:
            limiter = self._limiters.get(key)
            if limiter is None:
                limiter = RateLimiter(self.interval, self.burst, self._clock)
                self._limiters[key] = limiter
            return limiter


def name_reply(nickname: str, rng: Any = None) -> str:
    """Reply when the bot is called by name."""
    rng = rng if rng is not None else random
    replies = (
        nickname + "在此，有何贵干~",
        "(っ●ω●)っ在~",
        "这里是" + nickname + "(っ●ω●)っ",
        nickname + "不在呢~",
    )
    return replies[rng.randrange(len(replies))]


def poke_reply(manager: RateManager, gid: int, nickname: str) -> str | None:
    """Reply to a poke, or None when poked too often."""
    limiter = manager.load(gid)
    if limiter.acquire(3):
        return "请不要戳" + nickname + " >_<"
    if limiter.acquire(1):
        return "喂(#`O′) 戳" + nickname + "干嘛！"
    return None


def _atoi(text: Any) -> int:
    text = str(text)
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        return 0
    return max(-_INT64_MAX - 1, min(_INT64_MAX, int(text)))


class AirConditioner:
    """Per-group air conditioner state."""

    def __init__(self) -> None:
        self._temp: dict[int, int] = {}
        self._on: dict[int, bool] = {}

    def turn_on(self, gid: int) -> str:
        self._on[gid] = True
        return "❄️哔~"

    def turn_off(self, gid: int) -> str:
        self._on[gid] = False
        self._temp.pop(gid, None)
        return "💤哔~"

    def set_temperature(self, gid: int, temp: Any) -> str:
        """Set the temperature if the conditioner is on; return the status text."""
        self._temp.setdefault(gid, DEFAULT_TEMPERATURE)
        if self._on.get(gid, False):
            self._temp[gid] = _atoi(temp)
        return self._report(gid)

    def status(self, gid: int) -> str:
        self._temp.setdefault(gid, DEFAULT_TEMPERATURE)
        return self._report(gid)

    def _report(self, gid: int) -> str:
        head = "❄️风速中" if self._on.get(gid, False) else "💤"
        return f"{head}\n群温度 {self._temp[gid]}℃"