"""
Messages map one-to-one onto ROS message types carried over rosbridge. The
payload is the plain dict rosbridge expects, subclasses only provide friendly
constructors and getters on top of it.
"""
import abc
import copy
from typing import Any, Dict


class Message(abc.ABC):
    """Abstract Base Class for all bridge messages."""

    ros_type: str = ""

    _registry: Dict[str, Any] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Automatically register subclasses using their ROS type."""
        super().__init_subclass__(**kwargs)
        if cls.ros_type:
            Message._registry[cls.ros_type] = cls

    def __init__(self, payload: Dict[str, Any]) -> None:
        self.payload = payload

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.payload)

    @classmethod
    def from_dict(cls, ros_type: str, data: Dict[str, Any]) -> "Message":
        """Wrap a received payload in the matching message subclass."""
        if not isinstance(data, dict):
            raise ValueError("Malformed message payload")

        if ros_type not in cls._registry:
            raise ValueError(f"Unknown message type: {ros_type}")

        return cls._registry[ros_type].from_payload(data)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Message":
        message = cls.__new__(cls)
        Message.__init__(message, data)

        return message

    @property
    def type(self) -> str:
        return self.ros_type

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(payload={self.payload})"
