import pytest

from zbplugins import aireply


def test_conversation_id():
    assert aireply.conversation_id(123, 456) == 123
    assert aireply.conversation_id(0, 456) == -456


def test_mode_store_default_and_set():
    store = aireply.ModeStore()
    assert store.get(7) == 0
    store.set(7, 1)
    assert store.get(7) == 1


def test_reply_mode_round_trip():
    store = aireply.ModeStore()
    assert aireply.get_reply_mode(store, 1) == "青云客"
    aireply.set_reply_mode(store, 1, "小爱")
    assert aireply.get_reply_mode(store, 1) == "小爱"
    assert aireply.get_reply_mode(store, 2) == "青云客"


def test_reply_mode_invalid():
    with pytest.raises(ValueError):
        aireply.set_reply_mode(aireply.ModeStore(), 1, "unknown")


def test_reply_mode_without_store():
    with pytest.raises(LookupError):
        aireply.set_reply_mode(None, 1, "小爱")
    assert aireply.get_reply_mode(None, 1) == aireply.DEFAULT_REPLY_MODE


def test_reply_mode_out_of_range_index():
    store = aireply.ModeStore()
    store.set(1, len(aireply.REPLY_MODES))
    assert aireply.get_reply_mode(store, 1) == aireply.DEFAULT_REPLY_MODE


def test_tts_list_is_copy():
    modes = aireply.TTSModes()
    listed = modes.list()
    listed.clear()
    assert modes.list() == list(aireply.SOUND_MODES)


def test_sound_mode_round_trip():
    modes = aireply.TTSModes()
    store = aireply.ModeStore()
    assert modes.get_sound_mode(store, -5) == "拟声鸟阿梓"
    modes.set_sound_mode(store, -5, "百度男声")
    assert modes.get_sound_mode(store, -5) == "百度男声"


def test_sound_mode_invalid():
    with pytest.raises(ValueError):
        aireply.TTSModes().set_sound_mode(aireply.ModeStore(), 1, "nope")


def test_set_default_sound_mode_swaps():
    modes = aireply.TTSModes()
    modes.set_default_sound_mode("百度女声")
    listed = modes.list()
    assert listed[0] == "百度女声"
    assert listed[3] == "拟声鸟阿梓"
    assert sorted(listed) == sorted(aireply.SOUND_MODES)
    assert modes.get_sound_mode(aireply.ModeStore(), 1) == "百度女声"


def test_set_default_sound_mode_invalid():
    with pytest.raises(ValueError):
        aireply.TTSModes().set_default_sound_mode("nope")


def test_get_sound_mode_without_store():
    assert aireply.TTSModes().get_sound_mode(None, 1) == aireply.DEFAULT_SOUND_MODE