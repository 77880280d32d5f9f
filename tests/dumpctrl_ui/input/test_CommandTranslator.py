from unittest.mock import MagicMock

import pytest

from dumpctrl_ui.input import ActuatorPosition, CommandTranslator, Directive


class TestCommandTranslator:
    def setup_method(self):
        self.publisher = MagicMock()
        self.actuator = ActuatorPosition(step=0.1)
        self.translator = CommandTranslator(
            self.publisher,
            self.actuator,
            move_speed=1.5,
            turn_speed=0.5,
            max_linear=2.0,
            max_angular=1.0
        )

    @pytest.mark.parametrize("directive, expected", [
        (Directive.FORWARD, (1.5, 0.0)),
        (Directive.BACKWARD, (-1.5, 0.0)),
        (Directive.LEFT, (0.0, 0.5)),
        (Directive.RIGHT, (0.0, -0.5)),
        (Directive.FORWARD_LEFT, (1.5, 0.5)),
        (Directive.FORWARD_RIGHT, (1.5, -0.5)),
        (Directive.BACKWARD_LEFT, (-1.5, 0.5)),
        (Directive.BACKWARD_RIGHT, (-1.5, -0.5)),
        (Directive.STOP, (0.0, 0.0)),
        (Directive.NONE, (0.0, 0.0)),
    ])
    def test_motion_directives(self, directive, expected):
        self.translator.apply_directive(directive)

        self.publisher.publish_twist.assert_called_once_with(*expected)
        self.publisher.publish_actuator.assert_not_called()
        assert (self.translator.linear, self.translator.angular) == expected

    def test_emergency_stop(self, caplog):
        self.translator.apply_directive(Directive.FORWARD)

        with caplog.at_level("WARNING"):
            self.translator.apply_directive(Directive.EMERGENCY_STOP)

        self.publisher.publish_twist.assert_called_with(0.0, 0.0)
        assert "Emergency stop" in caplog.text

    def test_actuator_directives(self):
        self.translator.apply_directive(Directive.ACTUATOR_UP)
        self.translator.apply_directive(Directive.ACTUATOR_UP)
        self.translator.apply_directive(Directive.ACTUATOR_DOWN)

        values = [c.args[0] for c in self.publisher.publish_actuator.call_args_list]
        assert values == pytest.approx([0.1, 0.2, 0.1])
        self.publisher.publish_twist.assert_not_called()

    def test_actuator_down_at_minimum(self):
        self.translator.apply_directive(Directive.ACTUATOR_DOWN)

        self.publisher.publish_actuator.assert_called_once_with(0.0)

    def test_joystick_scaling(self):
        self.translator.apply_joystick(0.5, -1.0)

        self.publisher.publish_twist.assert_called_once_with(1.0, -1.0)

    def test_joystick_release(self):
        self.translator.apply_joystick(0.0, 0.0)

        self.publisher.publish_twist.assert_called_once_with(0.0, 0.0)

    def test_default_actuator(self):
        translator = CommandTranslator(self.publisher)

        translator.actuator_up()

        self.publisher.publish_actuator.assert_called_once_with(pytest.approx(0.05))
