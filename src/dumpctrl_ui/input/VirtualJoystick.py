import math
from typing import Callable, Optional, Tuple


class VirtualJoystick:
    """
    Drag surface that maps a pointer offset from its center to a
    (linear, angular) pair in [-1, 1].

    Dragging up drives forward, dragging right turns right which is a
    negative angular velocity.
    """

    def __init__(
        self,
        center: Tuple[float, float],
        max_radius: float,
        on_move: Optional[Callable[[float, float], None]] = None
    ) -> None:
        if max_radius <= 0:
            raise ValueError(f"max_radius must be positive, got {max_radius}")

        self.center = center
        self.max_radius = max_radius
        self.on_move = on_move

        self.enabled = False
        self.dragging = False
        self.offset: Tuple[float, float] = (0.0, 0.0)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        if not enabled and self.dragging:
            self.end()

    def contains(self, x: float, y: float) -> bool:
        dx = x - self.center[0]
        dy = y - self.center[1]

        return math.hypot(dx, dy) <= self.max_radius

    def begin(self, x: float, y: float) -> bool:
        if not self.enabled:
            return False

        self.dragging = True
        self.update(x, y)

        return True

    def update(self, x: float, y: float) -> None:
        if not self.dragging:
            return

        dx = x - self.center[0]
        dy = y - self.center[1]

        distance = math.hypot(dx, dy)
        if distance > self.max_radius:
            # Keep the angle, cap the magnitude
            angle = math.atan2(dy, dx)
            dx = self.max_radius * math.cos(angle)
            dy = self.max_radius * math.sin(angle)

        self.offset = (dx, dy)
        self._emit()

    def end(self) -> None:
        self.dragging = False
        self.offset = (0.0, 0.0)
        self._emit()

    def velocity(self) -> Tuple[float, float]:
        offset_x, offset_y = self.offset
        linear = -offset_y / self.max_radius
        angular = -offset_x / self.max_radius

        # Avoid handing out -0.0
        return (linear + 0.0, angular + 0.0)

    def _emit(self) -> None:
        if self.on_move:
            self.on_move(*self.velocity())

    def __repr__(self) -> str:
        return (f"<VirtualJoystick(offset=({self.offset[0]:.1f}, {self.offset[1]:.1f}), "
                f"dragging={self.dragging}, max_radius={self.max_radius})>")
