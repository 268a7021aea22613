from barstatus.volume import vol_perc


def test_missing_device(tmp_path, capsys):
    card = tmp_path / "mixer"
    assert vol_perc(card) is None
    assert f"open '{card}':" in capsys.readouterr().err


def test_regular_file_is_not_a_mixer(tmp_path, capsys):
    card = tmp_path / "mixer"
    card.write_bytes(b"")
    assert vol_perc(card) is None
    assert "SOUND_MIXER_READ_DEVMASK" in capsys.readouterr().err


def test_directory_is_not_a_mixer(tmp_path):
    assert vol_perc(tmp_path) is None