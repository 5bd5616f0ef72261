"""Repository search on a code hosting site."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping
from urllib.parse import urlencode

import requests

SEARCH_API = "https://api.github.com/search/repositories"
PREVIEW_BASE = "https://opengraph.githubassets.com/0/"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/88.0.4324.182 Safari/537.36"
)

_COMMAND_RE = re.compile(r"^>github[\t\n\f\r ](-.{1,10}? )?(.*)$")


def notnull(text: str, default: str) -> str:
    """``text``, or ``default`` when it is empty."""
    return text if text else default


def parse_command(text: str) -> tuple[str, str] | None:
    """Split a search command into ``(flag, query)``; the flag keeps its trailing space."""
    match = _COMMAND_RE.match(text)
    if match is None:
        return None
    return match.group(1) or "", match.group(2)


def net_get(url: str, headers: Mapping[str, str] | None = None, session: Any = None) -> bytes:
    """GET ``url`` and return the body; any status other than 200 raises."""
    session = session if session is not None else requests
    response = session.get(url, headers=dict(headers or {}))
    body = response.content
    if response.status_code != 200:
        raise RuntimeError(f"code {response.status_code}")
    return body


def search_repo(query: str, session: Any = None) -> dict:
    """The best matching repository for ``query``."""
    url = SEARCH_API + "?" + urlencode({"q": query})
    body = net_get(url, {"User-Agent": USER_AGENT}, session)
    info = json.loads(body or b"{}")
    if not info.get("total_count"):
        raise LookupError("没有找到这样的仓库")
    items = info.get("items") or []
    if not items:
        raise LookupError("没有找到这样的仓库")
    return items[0]


def preview_url(full_name: str) -> str:
    """URL of the repository's preview card image."""
    return PREVIEW_BASE + full_name


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def format_repo(repo: Mapping[str, Any]) -> str:
    """The text summary of a repository."""
    license_key = _str((repo.get("license") or {}).get("key"))
    return "".join(
        (
            _str(repo.get("full_name")), "\n",
            "Description: ", _str(repo.get("description")), "\n",
            "Star/Fork/Issue: ",
            str(_int(repo.get("watchers"))), "/",
            str(_int(repo.get("forks"))), "/",
            str(_int(repo.get("open_issues"))), "\n",
            "Language: ", notnull(_str(repo.get("language")), "None"), "\n",
            "License: ", notnull(license_key.upper(), "None"), "\n",
            "Last pushed: ", _str(repo.get("pushed_at")), "\n",
            "Jump: ", _str(repo.get("html_url")), "\n",
        )
    )