import pytest

from barstatus.util import die, fmt_human, read_int, read_token, warn


def test_fmt_human_zero_uses_base_unit():
    assert fmt_human(0, 1000) == "0b"


def test_fmt_human_exact_kibibyte():
    assert fmt_human(1024, 1024) == "1Ki"


@pytest.mark.parametrize("base,suffix", [(1000, "M"), (1024, "Mi")])
def test_fmt_human_prefix_progression(base, suffix):
    assert fmt_human(base**2 * 3, base).endswith(suffix)
    assert fmt_human(base**2 * 3, base).startswith("3")


def test_fmt_human_below_base_keeps_value():
    assert fmt_human(999, 1000) == "999b"


def test_fmt_human_huge_value_caps_at_last_prefix():
    result = fmt_human(1024**10, 1024)
    assert result.endswith("Yi")


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_warn_prefixes_program_name(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/bin/barstatus"])
    warn("something happened")
    err = capsys.readouterr().err
    assert err == "barstatus: something happened\n"


def test_warn_usage_has_no_prefix(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/bin/barstatus"])
    warn("usage: barstatus [-s]")
    assert capsys.readouterr().err == "usage: barstatus [-s]\n"


def test_warn_colon_appends_current_error(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog"])
    try:
        raise OSError(2, "No such file or directory")
    except OSError:
        warn("open:")
    assert capsys.readouterr().err.strip().endswith("No such file or directory")


def test_die_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as info:
        die("fatal")
    assert info.value.code == 1
    assert "fatal" in capsys.readouterr().err


def test_read_token_first_word(tmp_path):
    path = tmp_path / "status"
    path.write_text("Discharging\nextra\n")
    assert read_token(path) == "Discharging"


def test_read_token_missing_file(tmp_path, capsys):
    assert read_token(tmp_path / "nope") is None
    assert "fopen" in capsys.readouterr().err


def test_read_token_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_text("   \n")
    assert read_token(path) is None


def test_read_int_round_trip(tmp_path):
    path = tmp_path / "value"
    path.write_text("42000\n")
    assert read_int(path) == 42000


def test_read_int_not_a_number(tmp_path):
    path = tmp_path / "value"
    path.write_text("abc\n")
    assert read_int(path) is None