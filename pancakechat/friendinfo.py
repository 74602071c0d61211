"""The panel showing the friend chosen in the friend list."""

from __future__ import annotations

from pathlib import Path

from .config import AvatarSize, Session


class FriendInformation:
    """Which friend the information panel shows, if any."""

    def __init__(self, session: Session, app_dir: str | Path) -> None:
        self.session = session
        self.app_dir = Path(app_dir)
        self.username = ""
        self.showing_information = False

    def show_friend(self, username: str) -> None:
        """Show the details of ``username``."""
        self.username = username
        self.showing_information = True

    def friend_deleted(self, username: str) -> None:
        """Return to the default view when the friend shown was deleted."""
        if username == self.username:
            self.showing_information = False

    def send_message(self) -> str:
        """Name of the friend whose chat should open.

        Raises ``RuntimeError`` when no friend is being shown.
        """
        if not self.showing_information:
            raise RuntimeError("no friend is being shown")
        return self.username

    def avatar_path(self) -> Path:
        """Path of the full-size cached avatar of the friend shown."""
        return self.session.avatar_path(self.app_dir, AvatarSize.ORIGINAL, self.username)

    @property
    def has_cached_avatar(self) -> bool:
        """Whether the friend's avatar is cached; otherwise the default is used."""
        return self.avatar_path().is_file()