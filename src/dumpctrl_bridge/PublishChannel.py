import logging
from typing import Any

import roslibpy

from .message import Message


class PublishChannel:
    """
    Outbound topic bound to one live connection. Once released, publishing
    is silently dropped.
    """

    def __init__(self, ros: Any, name: str, message_class: type[Message]) -> None:
        self.name = name
        self.message_class = message_class
        self.released = False

        self._topic = roslibpy.Topic(ros, name, message_class.ros_type)
        self._topic.advertise()

    def publish(self, message: Message) -> bool:
        if self.released:
            logging.debug(f"Dropped message on released channel {self.name}")
            return False

        if not isinstance(message, self.message_class):
            raise TypeError(
                f"Channel {self.name} expects {self.message_class.__name__}, "
                f"got {type(message).__name__}"
            )

        self._topic.publish(roslibpy.Message(message.to_dict()))

        return True

    def release(self) -> None:
        if self.released:
            return

        self.released = True
        try:
            self._topic.unadvertise()
        except Exception as e:
            logging.warning(f"Failed to unadvertise {self.name}: {e}")

    def __repr__(self) -> str:
        return (f"<PublishChannel(name={self.name}, "
                f"type={self.message_class.ros_type}, released={self.released})>")
