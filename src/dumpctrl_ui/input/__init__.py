from .ActuatorPosition import ActuatorPosition
from .CommandTranslator import CommandTranslator, DIRECTIVE_VECTORS
from .Control import Control
from .Directive import Directive
from .DirectiveAggregator import DirectiveAggregator, resolve
from .VirtualJoystick import VirtualJoystick

__all__ = [
    "ActuatorPosition",
    "CommandTranslator",
    "DIRECTIVE_VECTORS",
    "Control",
    "Directive",
    "DirectiveAggregator",
    "resolve",
    "VirtualJoystick",
]
