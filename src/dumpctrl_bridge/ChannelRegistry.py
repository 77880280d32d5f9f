"""
Per-connection set of channels. A registry is created for every successful
connect and released as a whole when that connection goes away; it is never
reused for a second connection.
"""
import logging
from typing import Any, Callable, Dict, Optional

import roslibpy

from .PublishChannel import PublishChannel
from .Subscription import Payload, Subscription
from .message import Float64MultiArray, Message, TwistStamped

VELOCITY_COMMAND = "velocity_command"
ACTUATOR_COMMAND = "actuator_command"

# Channel name -> message class. Topic names come from settings.
CATALOG: Dict[str, type[Message]] = {
    VELOCITY_COMMAND: TwistStamped,
    ACTUATOR_COMMAND: Float64MultiArray,
}

# Receives (subscription, payload) from the transport thread
DeliveryHook = Callable[[Subscription, Payload], None]


class ChannelRegistry:
    def __init__(self, ros: Any, topics: Dict[str, str]) -> None:
        self.ros = ros
        self.released = False
        self.publishers: Dict[str, PublishChannel] = {}
        self.subscriptions: Dict[str, Subscription] = {}

        try:
            for channel, message_class in CATALOG.items():
                topic_name = topics[channel]
                self.publishers[channel] = PublishChannel(ros, topic_name, message_class)
                logging.debug(f"Advertised {topic_name} ({message_class.ros_type})")
        except Exception:
            self.release()
            raise

    def publish(self, channel: str, message: Message) -> bool:
        publisher = self.publishers.get(channel)
        if self.released or publisher is None:
            return False

        return publisher.publish(message)

    def subscribe(
        self,
        topic_name: str,
        message_type: str,
        on_payload: Callable[[Payload], None],
        min_interval: float,
        on_delivery: DeliveryHook
    ) -> Optional[Subscription]:
        """
        Subscribe to `topic_name`, replacing any previous subscription to the
        same topic on this connection. Raw deliveries go to `on_delivery`,
        which is expected to forward them to `Subscription.deliver` on the
        owning thread.
        """
        if self.released:
            return None

        previous = self.subscriptions.get(topic_name)
        if previous:
            previous.dispose()

        throttle_ms = int(round(min_interval * 1000))
        topic = roslibpy.Topic(
            self.ros,
            topic_name,
            message_type,
            throttle_rate=throttle_ms,
        )

        subscription = Subscription(
            topic_name,
            topic,
            on_payload,
            min_interval,
            on_dispose=self._forget
        )
        self.subscriptions[topic_name] = subscription

        topic.subscribe(lambda payload: on_delivery(subscription, payload))
        logging.info(f"Subscribed to {topic_name}")

        return subscription

    def release(self) -> None:
        """Release every channel of this connection at once."""
        self.released = True

        for publisher in self.publishers.values():
            publisher.release()
        self.publishers = {}

        for subscription in list(self.subscriptions.values()):
            subscription.dispose()
        self.subscriptions = {}

    def _forget(self, subscription: Subscription) -> None:
        # Only drop the entry if it still points at this exact handle
        if self.subscriptions.get(subscription.name) is subscription:
            del self.subscriptions[subscription.name]
