import pytest

from chip8emu.rom import Rom


def test_load_reads_bytes(tmp_path):
    payload = bytes([0x00, 0xE0, 0xA2, 0x2A, 0x60, 0x0C])
    path = tmp_path / "game.ch8"
    path.write_bytes(payload)
    rom = Rom.load(path)
    assert rom.data == payload


def test_load_accepts_str_path(tmp_path):
    path = tmp_path / "empty.ch8"
    path.write_bytes(b"")
    assert Rom.load(str(path)).data == b""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Rom.load(tmp_path / "missing.ch8")