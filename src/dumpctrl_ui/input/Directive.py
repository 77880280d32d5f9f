from enum import Enum


class Directive(Enum):
    NONE = "none"
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    FORWARD_LEFT = "forward-left"
    FORWARD_RIGHT = "forward-right"
    BACKWARD_LEFT = "backward-left"
    BACKWARD_RIGHT = "backward-right"
    STOP = "stop"
    EMERGENCY_STOP = "emergencyStop"
    ACTUATOR_UP = "actuatorUp"
    ACTUATOR_DOWN = "actuatorDown"

    @property
    def label(self) -> str:
        """Operator facing description."""
        if self is Directive.NONE:
            return "idle"
        if self is Directive.STOP:
            return "stop pressed"
        if self is Directive.EMERGENCY_STOP:
            return "EMERGENCY STOP"

        return self.value

    def involves(self, control_name: str) -> bool:
        """True if the directive is (partly) driven by the given control."""
        if self is Directive.ACTUATOR_UP:
            return control_name == "lift"
        if self is Directive.ACTUATOR_DOWN:
            return control_name == "lower"
        if self is Directive.EMERGENCY_STOP:
            return control_name == "emergency_stop"

        return control_name in self.value.split("-")
