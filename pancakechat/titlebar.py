"""Frameless window behaviour: title-bar buttons, maximise/restore and dragging."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

_BUTTONS = ("min", "restore", "max", "close")


class ButtonType(Enum):
    """Which buttons a title bar offers."""

    MIN_BUTTON = 0
    MIN_MAX_BUTTON = 1
    ONLY_CLOSE_BUTTON = 2


@dataclass(frozen=True)
class Geometry:
    """Position and size of a window."""

    x: int
    y: int
    width: int
    height: int


class TitleBar:
    """Button visibility and drag state of a window's title bar."""

    def __init__(self, button_type: ButtonType = ButtonType.MIN_MAX_BUTTON) -> None:
        self._visible = {name: True for name in _BUTTONS}
        self._pressed = False
        self._start: tuple[int, int] = (0, 0)
        self.restore_geometry: Geometry | None = None
        self.button_type = button_type
        self.set_button_type(button_type)

    def set_button_type(self, button_type: ButtonType) -> None:
        """Hide the buttons that the given type does not offer."""
        self.button_type = ButtonType(button_type)
        if self.button_type is ButtonType.MIN_BUTTON:
            hidden = ("restore", "max")
        elif self.button_type is ButtonType.MIN_MAX_BUTTON:
            hidden = ("restore",)
        else:
            hidden = ("min", "restore", "max")
        for name in hidden:
            self._visible[name] = False

    def visible_buttons(self) -> tuple[str, ...]:
        """Names of the visible buttons, in title-bar order."""
        return tuple(name for name in _BUTTONS if self._visible[name])

    def click_max(self) -> None:
        self._visible["max"] = False
        self._visible["restore"] = True

    def click_restore(self) -> None:
        self._visible["restore"] = False
        self._visible["max"] = True

    def double_click(self) -> str | None:
        """Toggle maximised state; returns ``"maximize"``, ``"restore"`` or None."""
        if self.button_type is not ButtonType.MIN_MAX_BUTTON:
            return None
        if self._visible["max"]:
            self.click_max()
            return "maximize"
        self.click_restore()
        return "restore"

    def press(self, x: int, y: int) -> None:
        """Start a drag, unless the window is maximised."""
        if self.button_type is ButtonType.MIN_MAX_BUTTON and not self._visible["max"]:
            return
        self._pressed = True
        self._start = (x, y)

    def drag(self, x: int, y: int) -> tuple[int, int] | None:
        """Offset moved since the last position, or None when not dragging."""
        if not self._pressed:
            return None
        dx, dy = x - self._start[0], y - self._start[1]
        self._start = (x, y)
        return dx, dy

    def release(self) -> None:
        self._pressed = False


class Window:
    """A frameless window driven by its title bar."""

    def __init__(
        self,
        geometry: Geometry,
        desktop: Geometry,
        button_type: ButtonType = ButtonType.MIN_MAX_BUTTON,
    ) -> None:
        self.geometry = geometry
        self.desktop = desktop
        self.title_bar = TitleBar(button_type)
        self.minimized = False
        self.closed = False

    def minimize(self) -> None:
        self.minimized = True

    def _apply_maximize(self) -> None:
        self.title_bar.restore_geometry = self.geometry
        d = self.desktop
        self.geometry = Geometry(d.x - 3, d.y - 3, d.width + 6, d.height + 6)

    def _apply_restore(self) -> None:
        if self.title_bar.restore_geometry is not None:
            self.geometry = self.title_bar.restore_geometry

    def maximize(self) -> None:
        """Fill the desktop, remembering the current geometry."""
        self.title_bar.click_max()
        self._apply_maximize()

    def restore(self) -> None:
        """Return to the geometry saved before maximising."""
        self.title_bar.click_restore()
        self._apply_restore()

    def double_click_title(self) -> None:
        action = self.title_bar.double_click()
        if action == "maximize":
            self._apply_maximize()
        elif action == "restore":
            self._apply_restore()

    def drag_title(self, start: tuple[int, int], end: tuple[int, int]) -> Geometry:
        """Drag the title bar from ``start`` to ``end``; returns the new geometry."""
        self.title_bar.press(*start)
        offset = self.title_bar.drag(*end)
        self.title_bar.release()
        if offset is not None:
            dx, dy = offset
            self.geometry = replace(self.geometry, x=self.geometry.x + dx, y=self.geometry.y + dy)
        return self.geometry

    def close(self) -> None:
        self.closed = True