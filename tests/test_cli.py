import pytest

from chip8emu.cli import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.rom == "roms/pong.ch8"
    assert args.delay == 2


def test_long_options():
    args = parse_args(["--rom", "game.ch8", "--delay", "7"])
    assert args.rom == "game.ch8"
    assert args.delay == 7


def test_single_dash_options():
    args = parse_args(["-rom", "other.ch8", "-delay", "0"])
    assert args.rom == "other.ch8"
    assert args.delay == 0


def test_non_integer_delay_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--delay", "fast"])


def test_missing_rom_reports_error(tmp_path, capsys):
    missing = tmp_path / "absent.ch8"
    assert main(["--rom", str(missing)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error loading ROM:")


def test_oversized_rom_reports_error(tmp_path, capsys):
    big = tmp_path / "big.ch8"
    big.write_bytes(bytes(5000))
    assert main(["--rom", str(big)]) == 1
    assert "Error loading ROM:" in capsys.readouterr().out