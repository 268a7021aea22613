from barstatus.command import run_command


def test_echo():
    assert run_command("echo foo") == "foo"


def test_first_line_only():
    assert run_command("printf 'a\\nb\\n'") == "a"


def test_no_output_is_none():
    assert run_command("true") is None


def test_empty_first_line_is_none():
    assert run_command("printf '\\nrest\\n'") is None


def test_without_trailing_newline():
    assert run_command("printf 'value'") == "value"


def test_long_line_truncated():
    result = run_command("printf '%02000d' 0")
    assert len(result) == 1022
    assert set(result) == {"0"}