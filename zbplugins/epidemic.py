"""City epidemic statistics lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

TX_URL = (
    "https://api.inews.qq.com/newsqa/v1/query/inner/publish/modules/list"
    "?modules=statisGradeCityDetail,diseaseh5Shelf"
)


@dataclass
class Area:
    """Statistics for one region and its sub-regions."""

    name: str = ""
    today_confirm: int = 0
    today_wzz_add: Any = None
    now_confirm: int = 0
    confirm: int = 0
    dead: int = 0
    heal: int = 0
    grade: str = ""
    wzz: int = 0
    children: list[Area] = field(default_factory=list)


def area_from_dict(data: Any) -> Area | None:
    """Build an area tree from its JSON form."""
    if data is None:
        return None
    today = data.get("today") or {}
    total = data.get("total") or {}
    return Area(
        name=data.get("name") or "",
        today_confirm=today.get("confirm") or 0,
        today_wzz_add=today.get("wzz_add"),
        now_confirm=total.get("nowConfirm") or 0,
        confirm=total.get("confirm") or 0,
        dead=total.get("dead") or 0,
        heal=total.get("heal") or 0,
        grade=total.get("grade") or "",
        wzz=total.get("wzz") or 0,
        children=[a for a in map(area_from_dict, data.get("children") or []) if a is not None],
    )


def find_city(area: Area | None, name: str) -> Area | None:
    """Find the region called ``name`` in the tree."""
    if area is None:
        return None
    if area.name == name:
        return area
    for child in area.children:
        if child.name == name:
            return child
        found = find_city(child, name)
        if found is not None:
            return found
    return None


def query(city: str, session: Any = None) -> tuple[Area | None, str]:
    """Fetch the statistics; return the city's area (or None) and the update time."""
    session = session if session is not None else requests
    response = session.get(TX_URL)
    response.raise_for_status()
    shelf = ((response.json() or {}).get("data") or {}).get("diseaseh5Shelf") or {}
    tree = shelf.get("areaTree") or []
    if not tree:
        raise ValueError("empty area tree")
    return find_city(area_from_dict(tree[0]), city), shelf.get("lastUpdateTime") or ""


def _show(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def format_area(area: Area, update_time: str) -> str:
    """The reply text for one region."""
    return (
        f"【{area.name}】疫情数据\n"
        f"新增人数：{area.today_confirm}\n"
        f"现有确诊：{area.now_confirm}\n"
        f"累计确诊：{area.confirm}\n"
        f"治愈人数：{area.heal}\n"
        f"死亡人数：{area.dead}\n"
        f"无症状人数：{area.wzz}\n"
        f"新增无症状：{_show(area.today_wzz_add)}\n"
        f"更新时间：\n『{update_time}』"
    )