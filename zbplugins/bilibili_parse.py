"""Video link parsing: fetch a video's statistics and format a summary."""

from __future__ import annotations

import re
from typing import Any

import requests

VIDEO_API = "https://api.bilibili.com/x/web-interface/view?"
CARD_API = "http://api.bilibili.com/x/web-interface/card?"
ORIGIN = "https://www.bilibili.com/video/"

_VIDEO_URL_RE = re.compile(r"https://www.bilibili.com/video/([0-9a-zA-Z]+)")

Segment = tuple[str, str]


def _get(data: Any, *keys: str, default: Any = 0) -> Any:
    for key in keys:
        if not isinstance(data, dict) or key not in data or data[key] is None:
            return default
        data = data[key]
    return data


def row(n: int) -> str:
    """Format a count, abbreviating values of ten thousand or more."""
    if abs(n) >= 10000:
        return f"{n / 10000:.2f}万"
    return str(n)


def cut_url(url: str) -> str:
    """Return the video id found in a video page URL, or an empty string."""
    match = _VIDEO_URL_RE.search(url)
    return match.group(1) if match else ""


def video_query(video_id: str) -> str:
    """Return the API URL that describes the video ``av...`` or ``BV...``."""
    if len(video_id) < 2:
        raise ValueError(f"invalid video id: {video_id!r}")
    prefix = video_id[:2]
    if prefix == "av":
        return VIDEO_API + "aid=" + video_id[2:]
    if prefix == "BV":
        return VIDEO_API + "bvid=" + video_id
    return VIDEO_API


def format_video(data: dict, video_id: str, owner_fans: int = 0) -> list[Segment]:
    """Build the reply segments from the video API response."""
    video = _get(data, "data", default={})
    segments: list[Segment] = [("text", f"标题: {_get(video, 'title', default='')}\n")]
    if _get(video, "rights", "is_cooperation") == 1:
        for staff in _get(video, "staff", default=[]):
            segments.append((
                "text",
                f"{_get(staff, 'title', default='')}: {_get(staff, 'name', default='')}"
                f", 粉丝: {row(_get(staff, 'follower'))}\n",
            ))
    else:
        segments.append((
            "text",
            f"UP主: {_get(video, 'owner', 'name', default='')}, 粉丝: {row(owner_fans)}\n",
        ))
    stat = _get(video, "stat", default={})
    segments.append(("text", f"播放: {row(_get(stat, 'view'))}, 弹幕: {row(_get(stat, 'danmaku'))}\n"))
    segments.append(("image", _get(video, "pic", default="")))
    segments.append((
        "text",
        f"\n点赞: {row(_get(stat, 'like'))}, 投币: {row(_get(stat, 'coin'))}\n"
        f"收藏: {row(_get(stat, 'favorite'))}, 分享: {row(_get(stat, 'share'))}\n"
        f"{ORIGIN}{video_id}",
    ))
    return segments


def _get_json(session: Any, url: str) -> Any:
    response = session.get(url)
    response.raise_for_status()
    return response.json()


def parse(video_id: str, session: Any = None) -> list[Segment]:
    """Fetch a video's data (and its uploader's card) and format it."""
    session = session if session is not None else requests
    data = _get_json(session, video_query(video_id))
    fans = 0
    if _get(data, "data", "rights", "is_cooperation") != 1:
        mid = _get(data, "data", "owner", "mid")
        card = _get_json(session, CARD_API + "mid=" + str(mid))
        fans = _get(card, "data", "card", "fans")
    return format_video(data, video_id, fans)


def real_url(url: str, session: Any = None) -> str:
    """Follow redirects of a short link and return the final URL."""
    session = session if session is not None else requests
    response = session.head(url, allow_redirects=True)
    return response.url