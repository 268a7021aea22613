import pytest

from barstatus.memory import (
    parse_meminfo,
    ram_free,
    ram_perc,
    ram_total,
    ram_used,
    swap_free,
    swap_perc,
    swap_total,
    swap_used,
)

MEMINFO = """MemTotal:        1048576 kB
MemFree:          262144 kB
MemAvailable:     524288 kB
Buffers:          131072 kB
Cached:           131072 kB
SwapCached:            0 kB
SwapTotal:       2097152 kB
SwapFree:        1048576 kB
"""

NO_SWAP = """MemTotal:        1048576 kB
MemFree:          262144 kB
MemAvailable:     524288 kB
Buffers:          131072 kB
Cached:           131072 kB
SwapCached:            0 kB
SwapTotal:             0 kB
SwapFree:              0 kB
"""


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return path


def test_parse_meminfo_reads_fields():
    info = parse_meminfo(MEMINFO)
    assert info["MemTotal"] == 1048576
    assert info["SwapFree"] == 1048576
    assert len(info) == 8


def test_parse_meminfo_skips_garbage():
    assert parse_meminfo("junk line\nName: notanumber kB\n") == {}


def test_ram_total_in_gibibytes(meminfo):
    assert ram_total(meminfo) == "1Gi"


def test_ram_free_uses_available(meminfo):
    assert ram_free(meminfo).endswith("Mi")
    assert ram_free(meminfo).startswith("512")


def test_ram_perc_is_a_percentage(meminfo):
    value = int(ram_perc(meminfo))
    assert 0 <= value <= 100


def test_ram_used_smaller_than_total(meminfo):
    used = ram_used(meminfo)
    assert used.endswith("Mi")
    assert ram_total(meminfo).endswith("Gi")


def test_swap_total_and_free(meminfo):
    assert swap_total(meminfo).endswith("Gi")
    assert swap_free(meminfo) == ram_total(meminfo)


def test_swap_perc_half(meminfo):
    assert swap_perc(meminfo) == "50"


def test_swap_used_matches_free_when_half(meminfo):
    assert swap_used(meminfo) == swap_free(meminfo)


def test_swap_perc_without_swap(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(NO_SWAP)
    assert swap_perc(path) is None


@pytest.mark.parametrize(
    "func",
    [ram_free, ram_perc, ram_total, ram_used, swap_free, swap_perc, swap_total, swap_used],
)
def test_missing_file_gives_none(tmp_path, func):
    assert func(tmp_path / "absent") is None


def test_missing_field_gives_none(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1024 kB\n")
    assert ram_perc(path) is None
    assert swap_total(path) is None