from pancakechat.config import Session
from pancakechat.mainwindow import MainWindow, View
from pancakechat.protocol import Packet, PacketType


def make(tmp_path):
    sent = []
    window = MainWindow(Session(username="me"), tmp_path, sent.append)
    return window, sent


def test_startup_requests(tmp_path):
    _window, sent = make(tmp_path)
    assert sent == [Packet(PacketType.GFI, b"1\r\n"), Packet(PacketType.RDY, b"")]


def test_friend_list_packet(tmp_path):
    window, _ = make(tmp_path)
    names = window.handle_packet(Packet(PacketType.GFI, b"bob\r\nalice\r\n"))
    assert names == ["bob", "alice"]
    assert list(window.friends) == ["alice", "bob"]
    assert {e.username for e in window.chat_list} == {"alice", "bob"}


def test_add_and_delete_friend(tmp_path):
    window, _ = make(tmp_path)
    window.handle_packet(Packet(PacketType.AFI, b"carol\r\n"))
    assert "carol" in window.friends
    window.friend_info.show_friend("carol")
    window.handle_packet(Packet(PacketType.DFI, b"carol\r\n"))
    assert "carol" not in window.friends
    assert window.friend_info.showing_information is False
    assert len(window.chat_list) == 0


def test_incoming_message_counts_unread(tmp_path):
    window, _ = make(tmp_path)
    window.handle_packet(Packet(PacketType.RMA, b"alice\r\n5\r\nhi\r\n"))
    assert window.unread_total == 1
    window.open_chat("alice")
    assert window.unread_total == 0
    assert window.chat_user_name == "alice"
    assert window.message_bar.messages("alice")[0].content == "hi"


def test_avatar_saved(tmp_path):
    window, _ = make(tmp_path)
    path = window.handle_packet(Packet(PacketType.RAV, b"alice\r\nPNGDATA"))
    assert path == tmp_path / "me" / "datas" / "avatar" / "original" / "alice.png"
    assert path.read_bytes() == b"PNGDATA"


def test_views_and_move(tmp_path):
    window, _ = make(tmp_path)
    window.switch_to_friends()
    assert window.view is View.FRIENDS
    window.open_chat("bob")
    assert window.view is View.CHAT
    window.moved(12, 34)
    assert (window.session.main_window_x, window.session.main_window_y) == (12, 34)


def test_close_closes_viewers(tmp_path):
    class Viewer:
        closed = False

        def close(self):
            self.closed = True

    window, _ = make(tmp_path)
    viewer = Viewer()
    window.session.opened_viewers.extend([viewer, None])
    window.close()
    assert viewer.closed is True
    assert window.closed is True