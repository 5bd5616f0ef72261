import pytest

from zbplugins import epidemic as ep

TREE = {
    "name": "中国",
    "today": {"confirm": 1, "wzz_add": 2},
    "total": {"nowConfirm": 3, "confirm": 4, "dead": 5, "heal": 6, "grade": "", "wzz": 7},
    "children": [
        {"name": "A省", "children": [{"name": "B市", "today": {"confirm": 8}}]},
        {"name": "C省", "children": None},
    ],
}


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, payload):
        self.payload = payload
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        return FakeResponse(self.payload)


def test_area_from_dict():
    root = ep.area_from_dict(TREE)
    assert root.name == "中国"
    assert root.today_wzz_add == 2
    assert [c.name for c in root.children] == ["A省", "C省"]
    assert root.children[1].children == []


def test_find_city():
    root = ep.area_from_dict(TREE)
    assert ep.find_city(root, "中国") is root
    assert ep.find_city(root, "B市").today_confirm == 8
    assert ep.find_city(root, "无此地") is None
    assert ep.find_city(None, "B市") is None


def test_query():
    payload = {"data": {"diseaseh5Shelf": {"lastUpdateTime": "t0", "areaTree": [TREE]}}}
    session = FakeSession(payload)
    area, when = ep.query("C省", session)
    assert area.name == "C省"
    assert when == "t0"
    assert session.urls == [ep.TX_URL]


def test_query_empty_tree():
    payload = {"data": {"diseaseh5Shelf": {"areaTree": []}}}
    with pytest.raises(ValueError):
        ep.query("C省", FakeSession(payload))


def test_format_area():
    text = ep.format_area(ep.area_from_dict(TREE), "t0")
    assert text.startswith("【中国】疫情数据\n")
    assert "新增人数：1\n" in text
    assert "死亡人数：5\n" in text
    assert "新增无症状：2\n" in text
    assert text.endswith("更新时间：\n『t0』")


def test_format_missing_wzz_add():
    text = ep.format_area(ep.Area(name="X"), "t")
    assert "新增无症状：<nil>\n" in text