import pytest

from zbplugins import driftbottle as db


@pytest.fixture
def sea(tmp_path):
    with db.Sea(tmp_path / "sea.db") as s:
        s.create_channel("global")
        yield s


def test_crc64_check_value():
    assert db.crc64_iso(b"123456789") == 0xB90956C775A41001


def test_crc64_empty():
    assert db.crc64_iso(b"") == 0


def test_new_bottle_id_is_signed_and_stable():
    a = db.new_bottle(1, 2, "n", "m")
    b = db.new_bottle(1, 2, "n", "m")
    assert a.id == b.id
    assert -(2**63) <= a.id < 2**63
    assert (a.qq, a.grp, a.name, a.msg) == (1, 2, "n", "m")
    assert a.id % (1 << 64) == db.crc64_iso("1_2_n_m".encode())


def test_throw_fetch_destroy(sea):
    bottle = db.new_bottle(1, 0, "alice", "hello")
    sea.throw(bottle, "global")
    assert sea.count("global") == 1
    assert sea.fetch("global", 5) == bottle
    sea.destroy(bottle, "global")
    assert sea.count("global") == 0


def test_same_bottle_replaced(sea):
    bottle = db.new_bottle(1, 0, "alice", "hello")
    sea.throw(bottle, "global")
    sea.throw(bottle, "global")
    assert sea.count("global") == 1


def test_fetch_respects_group(sea):
    sea.throw(db.new_bottle(1, 5, "a", "only five"), "global")
    with pytest.raises(LookupError):
        sea.fetch("global", 6)
    assert sea.fetch("global", 5).msg == "only five"


def test_missing_channel(sea):
    with pytest.raises(LookupError):
        sea.count("nowhere")
    sea.create_channel("nowhere")
    assert sea.count("nowhere") == 0


def test_parse_throw_full():
    assert db.parse_throw("在群123丢漂流瓶到频道abc hello", 9) == (123, "abc", "hello")


def test_parse_throw_defaults():
    assert db.parse_throw("丢漂流瓶 hi", 9) == (9, "global", "hi")
    assert db.parse_throw("random text", 9) is None


def test_parse_throw_errors():
    with pytest.raises(ValueError, match="消息为空"):
        db.parse_throw("丢漂流瓶 ", 9)
    with pytest.raises(ValueError, match="群号非法"):
        db.parse_throw("在群99999999999999999999丢漂流瓶 x", 9)


def test_parse_pick():
    assert db.parse_pick("捡漂流瓶") == "global"
    assert db.parse_pick("从频道abc捡漂流瓶") == "abc"
    assert db.parse_pick("捡漂流瓶吧") is None