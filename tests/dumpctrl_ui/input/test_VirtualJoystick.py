import math
from unittest.mock import MagicMock

import pytest

from dumpctrl_ui.input import VirtualJoystick


class TestVirtualJoystick:
    def setup_method(self):
        self.on_move = MagicMock()
        self.joystick = VirtualJoystick((200, 200), 100, on_move=self.on_move)
        self.joystick.set_enabled(True)

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            VirtualJoystick((0, 0), 0)

    def test_begin_requires_enabled(self):
        joystick = VirtualJoystick((0, 0), 50)

        assert joystick.begin(10, 10) is False
        assert joystick.dragging is False

    def test_drag_up_is_forward(self):
        self.joystick.begin(200, 150)

        assert self.joystick.velocity() == (0.5, 0.0)
        self.on_move.assert_called_with(0.5, 0.0)

    def test_drag_right_is_negative_angular(self):
        self.joystick.begin(200, 200)
        self.joystick.update(250, 200)

        assert self.joystick.velocity() == (0.0, -0.5)

    def test_center_has_no_negative_zero(self):
        self.joystick.begin(200, 200)

        linear, angular = self.joystick.velocity()
        assert math.copysign(1.0, linear) == 1.0
        assert math.copysign(1.0, angular) == 1.0

    def test_polar_clamp_keeps_angle(self):
        self.joystick.begin(200, 200)
        self.joystick.update(500, -100)

        dx, dy = self.joystick.offset
        assert math.hypot(dx, dy) == pytest.approx(100)
        assert math.atan2(dy, dx) == pytest.approx(math.atan2(-300, 300))

        linear, angular = self.joystick.velocity()
        assert linear == pytest.approx(math.sqrt(0.5))
        assert angular == pytest.approx(-math.sqrt(0.5))

    def test_clamp_along_axis(self):
        self.joystick.begin(200, 200)
        self.joystick.update(200, 1000)

        assert self.joystick.velocity()[0] == pytest.approx(-1.0)
        assert self.joystick.velocity()[1] == pytest.approx(0.0)

    def test_update_without_drag_is_ignored(self):
        self.joystick.update(250, 150)

        assert self.joystick.offset == (0.0, 0.0)
        self.on_move.assert_not_called()

    def test_end_returns_to_zero(self):
        self.joystick.begin(260, 130)
        self.joystick.end()

        assert self.joystick.dragging is False
        assert self.joystick.velocity() == (0.0, 0.0)
        self.on_move.assert_called_with(0.0, 0.0)

    def test_disable_ends_drag(self):
        self.joystick.begin(200, 150)

        self.joystick.set_enabled(False)

        assert self.joystick.dragging is False
        self.on_move.assert_called_with(0.0, 0.0)

    def test_contains(self):
        assert self.joystick.contains(250, 250)
        assert not self.joystick.contains(300, 300)
