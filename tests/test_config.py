from barstatus import battery, cpu, netspeeds, system
from barstatus.config import UNKNOWN_STR, StatusItem, default_items


def test_render_substitutes_unknown_for_missing_value():
    item = StatusItem(lambda: None, "[%s]")
    assert item.render("n/a") == "[n/a]"


def test_render_default_unknown_is_na():
    item = StatusItem(lambda: None, "%s")
    assert item.render() == UNKNOWN_STR == "n/a"


def test_render_passes_argument():
    item = StatusItem(lambda value: value.upper(), "<%s>", "abc")
    assert item.render() == "<ABC>"


def test_render_calls_without_argument_when_none():
    calls = []

    def reader(*args):
        calls.append(args)
        return "x"

    assert StatusItem(reader, "%s").render() == "x"
    assert calls == [()]


def test_render_width_pads_on_the_left():
    result = StatusItem(lambda: "ab", "%5s").render()
    assert len(result) == 5
    assert result.strip() == "ab"
    assert result.endswith("ab")


def test_render_percent_escape():
    assert StatusItem(lambda: "7", "%s%%").render() == "7%"


def test_default_items_order_of_readers():
    funcs = [item.func for item in default_items()]
    assert funcs[1] is cpu.cpu_perc
    assert funcs[3] is battery.battery_state
    assert funcs[4] is battery.battery_perc
    assert funcs[5] is system.datetime
    assert funcs[6] is netspeeds.netspeed_rx
    assert funcs[7] is netspeeds.netspeed_tx


def test_default_items_arguments():
    items = default_items()
    assert items[3].arg == "BAT0"
    assert items[5].arg == "%x|%I:%M"
    assert items[6].arg == items[7].arg == "wlp1s0"
    assert items[1].arg is None


def test_default_formats_take_one_value():
    for item in default_items():
        formatted = item.fmt % "VALUE"
        assert "VALUE" in formatted