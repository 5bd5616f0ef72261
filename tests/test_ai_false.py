from types import SimpleNamespace
from unittest import mock

import pytest

from zbplugins.ai_false import (
    cpu_percent,
    disk_report,
    mem_percent,
    pack_limit,
    parse_limit_command,
    status_text,
    unpack_limit,
)


@pytest.mark.parametrize("seconds,burst", [(1, 1), (60, 5), (65535, 65535), (300, 8)])
def test_pack_round_trip(seconds, burst):
    assert unpack_limit(pack_limit(seconds, burst)) == (seconds, burst)


def test_unpack_zero():
    assert unpack_limit(0) == (0, 0)


def test_parse_seconds():
    assert parse_limit_command("设置默认限速为每 10 秒 3 次触发") == (10, 3)


def test_parse_minutes_multiplied():
    assert parse_limit_command("设置默认限速为每2分钟5次触发") == (2 * 60, 5)


@pytest.mark.parametrize("text,message", [
    ("设置默认限速为每0秒3次触发", "interval too big"),
    ("设置默认限速为每65536秒3次触发", "interval too big"),
    ("设置默认限速为每1093分钟3次触发", "interval too big"),
    ("设置默认限速为每10秒0次触发", "burst too big"),
    ("设置默认限速为每10秒65536次触发", "burst too big"),
])
def test_parse_limit_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_limit_command(text)


def test_parse_not_matching():
    with pytest.raises(ValueError):
        parse_limit_command("设置默认限速")


def test_cpu_error_is_minus_one():
    with mock.patch("psutil.cpu_percent", side_effect=OSError("x")):
        assert cpu_percent() == -1


def test_mem_percent_rounds():
    with mock.patch("psutil.virtual_memory", return_value=SimpleNamespace(percent=41.5)):
        assert mem_percent() == 42


def test_disk_report_lines():
    parts = [SimpleNamespace(mountpoint="/"), SimpleNamespace(mountpoint="/empty"),
             SimpleNamespace(mountpoint="/bad")]
    usages = {
        "/": SimpleNamespace(percent=42.4, total=2048 * 1024 * 1024),
        "/empty": SimpleNamespace(percent=0.2, total=1024 * 1024),
    }

    def usage(path):
        if path == "/bad":
            raise OSError("denied")
        return usages[path]

    with mock.patch("psutil.disk_partitions", return_value=parts), \
            mock.patch("psutil.disk_usage", side_effect=usage):
        assert disk_report() == "\n  - /(2048M) 42%\n  - denied"


def test_disk_report_partition_error():
    with mock.patch("psutil.disk_partitions", side_effect=OSError("boom")):
        assert disk_report() == "boom"


def test_status_text():
    with mock.patch("psutil.cpu_percent", return_value=12.0), \
            mock.patch("psutil.virtual_memory", return_value=SimpleNamespace(percent=34.0)), \
            mock.patch("psutil.disk_partitions", return_value=[]):
        assert status_text() == "* CPU占用: 12%\n* RAM占用: 34%\n* 硬盘使用: "