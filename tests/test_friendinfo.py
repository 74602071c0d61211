import pytest

from pancakechat.config import AvatarSize, Session
from pancakechat.friendinfo import FriendInformation


@pytest.fixture
def panel(tmp_path):
    return FriendInformation(Session(username="me"), tmp_path)


def test_starts_in_default_view(panel):
    assert panel.showing_information is False
    with pytest.raises(RuntimeError):
        panel.send_message()


def test_show_friend_then_send_message(panel):
    panel.show_friend("bob")
    assert panel.showing_information is True
    assert panel.send_message() == "bob"


def test_deleting_shown_friend_resets_view(panel):
    panel.show_friend("bob")
    panel.friend_deleted("bob")
    assert panel.showing_information is False


def test_deleting_other_friend_keeps_view(panel):
    panel.show_friend("bob")
    panel.friend_deleted("carol")
    assert panel.showing_information is True
    assert panel.send_message() == "bob"


def test_avatar_path_uses_original_size(panel, tmp_path):
    panel.show_friend("bob")
    expected = Session(username="me").avatar_path(tmp_path, AvatarSize.ORIGINAL, "bob")
    assert panel.avatar_path() == expected
    assert panel.avatar_path() == tmp_path / "me" / "datas" / "avatar" / "original" / "bob.png"


def test_has_cached_avatar(panel):
    panel.show_friend("bob")
    assert panel.has_cached_avatar is False
    path = panel.avatar_path()
    path.parent.mkdir(parents=True)
    path.write_bytes(b"png")
    assert panel.has_cached_avatar is True