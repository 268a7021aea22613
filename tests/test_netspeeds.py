import pytest

from barstatus.netspeeds import NetSpeedMeter
from barstatus.util import fmt_human


def _counter(root, iface, direction, value):
    stats = root / iface / "statistics"
    stats.mkdir(parents=True, exist_ok=True)
    (stats / f"{direction}_bytes").write_text(f"{value}\n")


def test_first_read_is_none(tmp_path):
    _counter(tmp_path, "wlan0", "rx", 1000)
    meter = NetSpeedMeter("rx", 1000, tmp_path)
    assert meter.read("wlan0") is None


def test_second_read_reports_speed(tmp_path):
    meter = NetSpeedMeter("rx", 1000, tmp_path)
    _counter(tmp_path, "wlan0", "rx", 1000)
    meter.read("wlan0")
    _counter(tmp_path, "wlan0", "rx", 1000 + 2048)
    assert meter.read("wlan0") == fmt_human(2048, 1024)


def test_interval_scales_speed(tmp_path):
    meter = NetSpeedMeter("tx", 500, tmp_path)
    _counter(tmp_path, "eth0", "tx", 10)
    meter.read("eth0")
    _counter(tmp_path, "eth0", "tx", 10 + 1024)
    assert meter.read("eth0") == fmt_human(2048, 1024)


def test_zero_counter_is_not_a_baseline(tmp_path):
    meter = NetSpeedMeter("rx", 1000, tmp_path)
    _counter(tmp_path, "eth0", "rx", 0)
    assert meter.read("eth0") is None
    _counter(tmp_path, "eth0", "rx", 100)
    assert meter.read("eth0") is None


def test_missing_interface(tmp_path):
    meter = NetSpeedMeter("tx", 1000, tmp_path)
    assert meter.read("nope0") is None


def test_invalid_direction():
    with pytest.raises(ValueError):
        NetSpeedMeter("up")