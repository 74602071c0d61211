"""Per-login session state and the on-disk layout of cached avatars."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class AvatarSize(Enum):
    """The avatar variants kept in the local cache, named by their directory."""

    ORIGINAL = "original"
    SIZE_40 = "40x40"
    SIZE_34 = "34x34"


@dataclass
class Session:
    """State shared by the client for the user who is logged in."""

    username: str = ""
    session_id: str = ""
    opened_viewers: list[Any] = field(default_factory=list)
    main_window_x: int = 0
    main_window_y: int = 0
    voice_chatting: bool = False

    def avatar_dir(self, app_dir: str | Path, size: AvatarSize) -> Path:
        """Directory holding cached avatars of the given size for this user."""
        return Path(app_dir) / self.username / "datas" / "avatar" / AvatarSize(size).value

    def avatar_path(self, app_dir: str | Path, size: AvatarSize, username: str) -> Path:
        """Path of the cached avatar of ``username`` at the given size."""
        return self.avatar_dir(app_dir, size) / f"{username}.png"