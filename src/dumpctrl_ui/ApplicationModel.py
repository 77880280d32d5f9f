from dataclasses import dataclass, field
from collections import deque

from dumpctrl_ui.input.Directive import Directive

MODE_KEYS = "keys"
MODE_JOYSTICK = "joystick"


@dataclass
class ApplicationModel:
    # Control
    mode: str = MODE_KEYS
    directive: Directive = Directive.NONE
    linear: float = 0.0
    angular: float = 0.0
    actuator_position: float = 0.0

    # Timing
    loop_history: deque[float] = field(default_factory=lambda: deque(maxlen=300))

    # Lifecycle
    running: bool = True
