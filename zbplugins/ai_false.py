"""Server status report and the packed default rate-limit setting."""

from __future__ import annotations

import math
import re

import psutil

_LIMIT_RE = re.compile(
    r"^设置默认限速为每[ \t\n\f\r]*([0-9]+)[ \t\n\f\r]*(分钟|秒)"
    r"[ \t\n\f\r]*([0-9]+)[ \t\n\f\r]*次触发$"
)
_INT64_MAX = 2**63 - 1


def pack_limit(seconds: int, burst: int) -> int:
    """Pack an interval and a burst into one stored integer."""
    return (seconds & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(data: int) -> tuple[int, int]:
    """Return ``(seconds, burst)`` from a stored integer."""
    return data & 0xFFFF, (data >> 16) & 0xFFFF


def _parse_int64(text: str) -> int:
    value = int(text)
    if value > _INT64_MAX:
        raise ValueError(f"value out of range: {text}")
    return value


def parse_limit_command(text: str) -> tuple[int, int]:
    """Parse a rate-limit command into ``(seconds, burst)``."""
    match = _LIMIT_RE.match(text)
    if match is None:
        raise ValueError("not a rate limit command")
    seconds = _parse_int64(match.group(1))
    if match.group(2) == "分钟":
        seconds *= 60
    if seconds >= 65536 or seconds <= 0:
        raise ValueError("interval too big")
    burst = _parse_int64(match.group(3))
    if burst >= 65536 or burst <= 0:
        raise ValueError("burst too big")
    return seconds, burst


def _round(value: float) -> float:
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


def _fmt(value: float) -> str:
    return str(int(value)) if value == int(value) else repr(value)


def cpu_percent() -> float:
    """CPU usage over one second, rounded; -1 on failure."""
    try:
        return _round(psutil.cpu_percent(interval=1))
    except Exception:
        return -1.0


def mem_percent() -> float:
    """Memory usage, rounded; -1 on failure."""
    try:
        return _round(psutil.virtual_memory().percent)
    except Exception:
        return -1.0


def disk_report() -> str:
    """One line per used partition, or the error text."""
    try:
        parts = psutil.disk_partitions(all=True)
    except Exception as err:
        return str(err)
    lines = []
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except Exception as err:
            lines.append("\n  - " + str(err))
            continue
        pc = int(_round(usage.percent))
        if pc > 0:
            lines.append(f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {pc}%")
    return "".join(lines)


def status_text() -> str:
    """The full status reply."""
    return (
        "* CPU占用: " + _fmt(cpu_percent()) + "%\n"
        + "* RAM占用: " + _fmt(mem_percent()) + "%\n"
        + "* 硬盘使用: " + disk_report()
    )