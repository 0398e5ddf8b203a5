"""A pannable, zoomable view mapping screen coordinates to world coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .point import Point

SCALE = 20
ZOOM_SPEED = 0.05
MOVE_SPEED = 10.0


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Key(IntEnum):
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


@dataclass
class Camera:
    """View state driven by mouse, scroll and keyboard events."""

    zoom: float = 1.0
    position: Point = field(default_factory=Point)
    drag_origin: Point = field(default_factory=Point)
    drag_start: Point = field(default_factory=Point)
    dragging: bool = False

    def camera_to_world_x(self, x: float) -> float:
        """World X of a screen X."""
        return (x / self.zoom) / SCALE + self.position.x

    def camera_to_world_y(self, y: float) -> float:
        """World Y of a screen Y."""
        return (y / self.zoom) / SCALE - self.position.y

    def world_to_camera_x(self, x: float) -> float:
        """Screen X of a world X."""
        return SCALE * ((x - self.position.x) * self.zoom)

    def world_to_camera_y(self, y: float) -> float:
        """Screen Y of a world Y."""
        return SCALE * ((y + self.position.y) * self.zoom)

    def on_mouse_button(self, button: int, action: int, cursor_x: float, cursor_y: float) -> None:
        """Start dragging on a left press at the cursor, stop on a left release."""
        if button != MouseButton.LEFT:
            return
        if action == Action.PRESS:
            self.drag_origin = Point(cursor_x, cursor_y)
            self.drag_start = Point(self.position.x, self.position.y)
            self.dragging = True
        elif action == Action.RELEASE:
            self.dragging = False

    def on_cursor_move(self, x: float, y: float) -> None:
        """Pan the view while dragging."""
        if not self.dragging:
            return
        self.position.x = self.drag_start.x + ((self.drag_origin.x - x) / self.zoom) / SCALE
        self.position.y = self.drag_start.y + ((self.drag_origin.y - y) / self.zoom) / SCALE

    def on_scroll(self, x_offset: float, y_offset: float) -> None:
        """Zoom in or out by the vertical scroll offset."""
        self.zoom *= 1.0 + y_offset * ZOOM_SPEED

    def on_key(self, key: int, action: int) -> None:
        """Move the view with the arrow keys on press or repeat."""
        if action not in (Action.PRESS, Action.REPEAT):
            return
        speed = MOVE_SPEED / self.zoom
        if key == Key.LEFT:
            self.position.x -= speed
        elif key == Key.RIGHT:
            self.position.x += speed
        elif key == Key.UP:
            self.position.y += speed
        elif key == Key.DOWN:
            self.position.y -= speed