import logging
from typing import Dict, Optional, Protocol, Tuple

from .ActuatorPosition import ActuatorPosition
from .Directive import Directive

# Directive -> (linear, angular) before scaling
DIRECTIVE_VECTORS: Dict[Directive, Tuple[float, float]] = {
    Directive.FORWARD: (1.0, 0.0),
    Directive.BACKWARD: (-1.0, 0.0),
    Directive.LEFT: (0.0, 1.0),
    Directive.RIGHT: (0.0, -1.0),
    Directive.FORWARD_LEFT: (1.0, 1.0),
    Directive.FORWARD_RIGHT: (1.0, -1.0),
    Directive.BACKWARD_LEFT: (-1.0, 1.0),
    Directive.BACKWARD_RIGHT: (-1.0, -1.0),
    Directive.STOP: (0.0, 0.0),
    Directive.NONE: (0.0, 0.0),
    Directive.EMERGENCY_STOP: (0.0, 0.0),
}


class CommandPublisher(Protocol):
    def publish_twist(self, linear_x: float, angular_z: float) -> bool: ...

    def publish_actuator(self, position: float) -> bool: ...


class CommandTranslator:
    """Maps directives and joystick vectors onto published commands."""

    def __init__(
        self,
        publisher: CommandPublisher,
        actuator: Optional[ActuatorPosition] = None,
        move_speed: float = 1.0,
        turn_speed: float = 1.0,
        max_linear: float = 2.0,
        max_angular: float = 2.0
    ) -> None:
        self.publisher = publisher
        self.actuator = actuator or ActuatorPosition()
        self.move_speed = move_speed
        self.turn_speed = turn_speed
        self.max_linear = max_linear
        self.max_angular = max_angular

        # Last commanded velocity, for the telemetry readout
        self.linear = 0.0
        self.angular = 0.0

    def apply_directive(self, directive: Directive) -> None:
        """Run exactly one action for the directive."""
        if directive is Directive.EMERGENCY_STOP:
            self.emergency_stop()
        elif directive in (Directive.STOP, Directive.NONE):
            self.stop()
        elif directive is Directive.ACTUATOR_UP:
            self.actuator_up()
        elif directive is Directive.ACTUATOR_DOWN:
            self.actuator_down()
        else:
            self.move(directive)

    def move(self, directive: Directive) -> None:
        linear, angular = DIRECTIVE_VECTORS[directive]
        self._send_twist(linear * self.move_speed, angular * self.turn_speed)

    def stop(self) -> None:
        self._send_twist(0.0, 0.0)

    def emergency_stop(self) -> None:
        logging.warning("Emergency stop")
        self._send_twist(0.0, 0.0)

    def actuator_up(self) -> None:
        self.publisher.publish_actuator(self.actuator.raise_position())

    def actuator_down(self) -> None:
        self.publisher.publish_actuator(self.actuator.lower_position())

    def apply_joystick(self, linear: float, angular: float) -> None:
        self._send_twist(linear * self.max_linear, angular * self.max_angular)

    def _send_twist(self, linear: float, angular: float) -> None:
        self.linear = linear
        self.angular = angular
        self.publisher.publish_twist(linear, angular)
