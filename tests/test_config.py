from pathlib import Path

import pytest

from pancakechat.config import AvatarSize, Session


def test_defaults():
    session = Session()
    assert session.username == ""
    assert session.session_id == ""
    assert session.opened_viewers == []
    assert (session.main_window_x, session.main_window_y) == (0, 0)
    assert session.voice_chatting is False


def test_viewer_lists_are_independent():
    first, second = Session(), Session()
    first.opened_viewers.append("viewer")
    assert second.opened_viewers == []


def test_avatar_dir_layout(tmp_path):
    session = Session(username="alice")
    assert session.avatar_dir(tmp_path, AvatarSize.ORIGINAL) == (
        tmp_path / "alice" / "datas" / "avatar" / "original"
    )


@pytest.mark.parametrize(
    "size, folder",
    [(AvatarSize.ORIGINAL, "original"), (AvatarSize.SIZE_40, "40x40"), (AvatarSize.SIZE_34, "34x34")],
)
def test_avatar_path(tmp_path, size, folder):
    session = Session(username="alice")
    path = session.avatar_path(str(tmp_path), size, "bob")
    assert path == tmp_path / "alice" / "datas" / "avatar" / folder / "bob.png"
    assert path.parent == session.avatar_dir(tmp_path, size)


def test_avatar_path_accepts_enum_value(tmp_path):
    session = Session(username="carol")
    assert session.avatar_path(tmp_path, "40x40", "dave") == session.avatar_path(
        tmp_path, AvatarSize.SIZE_40, "dave"
    )


def test_unknown_size_rejected(tmp_path):
    with pytest.raises(ValueError):
        Session(username="x").avatar_dir(Path(tmp_path), "64x64")