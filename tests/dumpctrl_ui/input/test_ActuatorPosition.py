import pytest

from dumpctrl_ui.input import ActuatorPosition


class TestActuatorPosition:
    def test_defaults(self):
        actuator = ActuatorPosition()

        assert actuator.value == 0.0
        assert actuator.min_pos == 0.0
        assert actuator.max_pos == 0.785

    def test_raise_and_lower(self):
        actuator = ActuatorPosition(step=0.1)

        assert actuator.raise_position() == pytest.approx(0.1)
        assert actuator.raise_position() == pytest.approx(0.2)
        assert actuator.lower_position() == pytest.approx(0.1)

    def test_stays_within_range(self):
        actuator = ActuatorPosition(step=0.3, min_pos=0.0, max_pos=0.785)

        for _ in range(10):
            actuator.raise_position()
        assert actuator.value == 0.785

        for _ in range(10):
            actuator.lower_position()
        assert actuator.value == 0.0

    def test_initial_is_clamped(self):
        assert ActuatorPosition(initial=5.0).value == 0.785

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            ActuatorPosition(min_pos=1.0, max_pos=0.0)
