from .BridgeConnection import BridgeConnection
from .ChannelRegistry import ACTUATOR_COMMAND, VELOCITY_COMMAND, ChannelRegistry
from .PublishChannel import PublishChannel
from .State import State
from .Subscription import Subscription

__all__ = [
    "ACTUATOR_COMMAND",
    "VELOCITY_COMMAND",
    "BridgeConnection",
    "ChannelRegistry",
    "PublishChannel",
    "State",
    "Subscription",
]
