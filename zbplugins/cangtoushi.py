"""Acrostic poem lookup on a poetry website."""

from __future__ import annotations

from typing import Any

import requests
from bs4 import BeautifulSoup

LOGIN_URL = "https://www.shicimingju.com/cangtoushi/"
SEARCH_URL = "https://www.shicimingju.com/cangtoushi/index.html"
REFERER = "https://www.shicimingju.com/cangtoushi/index.html"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/96.0.4664.110 Safari/537.36"
)

HEAD = "0"
TAIL = "2"


def parse_csrf(html: str) -> str:
    """Return the value of the ``_csrf`` input in a page."""
    soup = BeautifulSoup(html, "html.parser")
    tag = soup.find("input", attrs={"name": "_csrf"})
    if tag is None:
        raise ValueError("csrf token not found")
    return tag.get("value", "")


def _is_card(tag: Any) -> bool:
    return tag is not None and tag.name == "div" and " ".join(tag.get("class") or []) == "card"


def deal_html(data: str) -> str:
    """Extract the poem text from a result page."""
    soup = BeautifulSoup(data, "html.parser")
    found = next(
        (tag for tag in soup.find_all("div") if _is_card(tag) and _is_card(tag.parent)),
        None,
    )
    if found is None:
        raise ValueError("poem not found in page")
    text = found.get_text().replace(" ", "")
    return text.replace("\n", "", 1)


class CangtoushiClient:
    """Session-holding client for the acrostic poem form."""

    def __init__(self, session: Any = None) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.csrf = ""

    def login(self) -> str:
        """Start a fresh session and fetch the form's csrf token."""
        if self._owns_session:
            self.session = requests.Session()
        elif isinstance(self.session, requests.Session):
            self.session.cookies.clear()
        response = self.session.get(LOGIN_URL, headers={"User-Agent": USER_AGENT})
        self.csrf = parse_csrf(response.text)
        return self.csrf

    def search(self, keyword: str, zishu: str, position: str) -> str:
        """Submit the form and return the result page."""
        data = {"_csrf": self.csrf, "kw": keyword, "zishu": zishu, "position": position}
        headers = {
            "Referer": REFERER,
            "User-Agent": USER_AGENT,
            "Content-Type": "application/x-www-form-urlencoded",
        }
        response = self.session.post(SEARCH_URL, data=data, headers=headers)
        return response.text