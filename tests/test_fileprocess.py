import pytest

from pancakechat.fileprocess import save_file


def test_round_trip(tmp_path):
    payload = b"\x89PNG\r\n\x1a\nrest"
    target = save_file(payload, tmp_path, "bob.png")
    assert target == tmp_path / "bob.png"
    assert target.read_bytes() == payload


def test_creates_missing_directories(tmp_path):
    nested = tmp_path / "alice" / "datas" / "avatar" / "original"
    target = save_file(b"abc", str(nested), "x.png")
    assert nested.is_dir()
    assert target.read_bytes() == b"abc"


def test_overwrites_existing_file(tmp_path):
    save_file(b"first", tmp_path, "f.bin")
    target = save_file(b"2nd", tmp_path, "f.bin")
    assert target.read_bytes() == b"2nd"


def test_accepts_bytearray(tmp_path):
    target = save_file(bytearray(b"xyz"), tmp_path, "f.bin")
    assert target.read_bytes() == b"xyz"


def test_directory_blocked_by_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    with pytest.raises(OSError):
        save_file(b"data", blocker, "f.bin")


def test_filename_is_a_directory(tmp_path):
    (tmp_path / "taken").mkdir()
    with pytest.raises(OSError):
        save_file(b"data", tmp_path, "taken")