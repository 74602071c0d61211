import pytest

from pancakechat.friendlist import FriendList
from pancakechat.protocol import Packet, PacketType


def test_names_are_kept_sorted():
    friends = FriendList()
    for name in ["carol", "alice", "bob"]:
        friends.add(name)
    assert list(friends) == sorted(["carol", "alice", "bob"])
    assert len(friends) == 3


def test_add_returns_insert_position():
    friends = FriendList()
    assert friends.add("mike") == 0
    assert friends.add("alice") == 0
    assert friends.add("zed") == 2


def test_duplicate_names_are_both_kept():
    friends = FriendList()
    friends.add("bob")
    friends.add("bob")
    assert list(friends) == ["bob", "bob"]
    assert friends.remove("bob") is True
    assert list(friends) == ["bob"]


def test_remove_missing_name():
    friends = FriendList()
    friends.add("alice")
    assert friends.remove("nobody") is False
    assert list(friends) == ["alice"]


def test_contains():
    friends = FriendList()
    friends.add("alice")
    assert "alice" in friends
    assert "bob" not in friends


def test_clear_empties_list():
    friends = FriendList()
    friends.add("alice")
    friends.clear()
    assert len(friends) == 0
    assert list(friends) == []


def test_replace_all_discards_previous():
    friends = FriendList()
    friends.add("old")
    added = friends.replace_all(["zoe", "adam"])
    assert added == ["zoe", "adam"]
    assert list(friends) == ["adam", "zoe"]
    assert "old" not in friends


def test_delete_request_packet():
    friends = FriendList()
    friends.add("bob")
    assert friends.delete_request("bob") == Packet(PacketType.DEF, b"bob\r\n")
    assert "bob" in friends


def test_delete_request_unknown_friend():
    friends = FriendList()
    with pytest.raises(KeyError):
        friends.delete_request("ghost")