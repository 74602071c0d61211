# pancakechat

The client-side logic of a small chat service, kept apart from any GUI
toolkit and any network code. It parses what the server sends, builds the
requests the client sends, and holds the state behind each part of the client
window: the friend list, the chat list with unread counts, pending friend
requests, the add-friend dialog and the per-friend conversations.

It has no dependencies beyond the standard library.

## Install

```
pip install .
pip install ".[test]"   # adds pytest
```

## Modules

- `pancakechat.protocol`: `PacketType` (the three-letter packet codes),
  `Packet` (a type and raw `bytes` content) and `IncomingMessage`.
  Parsers for server payloads: `parse_friend_list`, `parse_friend_name`,
  `parse_avatar`, `parse_incoming_message`, `parse_send_ack`,
  `parse_call_request`, `parse_friend_request`. Request builders, each
  returning a `Packet`: `search_request`, `add_friend_request`,
  `delete_friend_request`, `friend_request_reply`, `friend_list_request`,
  `ready_request`.
- `pancakechat.config`: `Session` holds the logged-in user name, session id,
  open picture viewers, main-window position and whether a voice call is in
  progress. `Session.avatar_dir` and `Session.avatar_path` give where avatars
  are cached under an application directory, for each `AvatarSize`
  (`original`, `40x40`, `34x34`).
- `pancakechat.fileprocess`: `save_file(data, path, filename)` writes bytes,
  creating the directory if needed, and returns the path written.
- `pancakechat.wrap`: `wrap_text(text, width, char_width)` inserts `"\r\n"`
  wherever the next character would overflow `width`; `char_width` is a fixed
  width or a function of one character. It returns a `WrappedText` with the
  text, its line count and the width of the widest line. Empty lines are
  dropped.
- `pancakechat.titlebar`: `ButtonType`, `Geometry`, `TitleBar` (which buttons
  are visible, double-click and drag handling) and `Window` (minimise,
  maximise to the desktop with a 3-pixel overhang, restore, drag, close).
- `pancakechat.chatlist`: `ChatEntry` and `ChatList`, chats ordered newest
  first, with unread counters, hiding, selecting and deleting. Callbacks
  `on_read`, `on_save` and `on_delete` report changes in read counts, entries
  to store and chats to forget. `format_last_time` renders a chat's last
  activity as `hh:mm`, `昨天` or `yy/MM/dd` (in UTC+8).
- `pancakechat.friendlist`: `FriendList`, names kept in sorted order;
  `delete_request` builds the packet that ends a friendship.
- `pancakechat.friendrequests`: `FriendRequests`, pending requests in arrival
  order; `respond(username, accept)` returns the reply packet and drops the
  request.
- `pancakechat.addfriend`: `AddFriendDialog`, the search-then-add flow.
  `search` and `add_friend` return the packet to send (or `None` when
  offline or the name is empty); `handle_search_replies` and
  `handle_add_replies` turn the server's status codes into the tip text
  shown to the user.
- `pancakechat.friendinfo`: `FriendInformation`, which friend the details
  pane shows and where that friend's full-size avatar is cached.
- `pancakechat.messagebar`: `MessageBar` keeps one conversation per user,
  records incoming messages, delivery acknowledgements and incoming calls
  (only one call at a time). `call_closed` adds a note built by
  `call_summary` for a `CallOutcome`. `Message` is one entry in a
  conversation.
- `pancakechat.mainwindow`: `MainWindow` ties the friend list, friend pane,
  chat list and message bar together. On creation it sends a friend-list
  request and a ready packet through the `send` callable it is given.
  `handle_packet` applies `GFI`, `AFI`, `DFI`, `RAV`, `RMA`, `SMA` and `ROC`
  packets; other types are ignored there. `View` tells which side is showing.

## Example

```python
from pancakechat.config import Session
from pancakechat.mainwindow import MainWindow
from pancakechat.protocol import Packet, PacketType, parse_incoming_message

msg = parse_incoming_message(b"alice\r\n1700000000000\r\nhello\r\n")
print(msg.username, msg.time_ms, msg.content)   # alice 1700000000000 hello

sent = []
window = MainWindow(Session(username="bob"), "cache", sent.append)
window.handle_packet(Packet(PacketType.GFI, b"carol\r\nalice\r\n"))
print(list(window.friends))                      # ['alice', 'carol']

window.handle_packet(Packet(PacketType.RMA, b"alice\r\n1700000000000\r\nhi\r\n"))
print(window.unread_total)                       # 1
```

## What it does not do

- It opens no connection to a server and does not frame packets on a socket;
  the caller moves `Packet` objects to and from the network.
- It has no login or registration flow and no windows or widgets; `Window`,
  `TitleBar` and the other classes only hold state.
- Chats and messages live in memory. `ChatList` hands entries to `on_save`
  and `on_delete`, but nothing in the package stores them.
- Incoming avatars are saved as received; no scaled copies are made.
- Voice calls are only tracked and summarised; no audio is captured or played.

## Tests

```
pytest
```