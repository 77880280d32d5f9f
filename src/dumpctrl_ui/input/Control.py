from enum import Enum


class Control(Enum):
    """Logical discrete controls. The value doubles as the on-screen button id."""
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"
    EMERGENCY_STOP = "emergency_stop"
    LIFT = "lift"
    LOWER = "lower"
