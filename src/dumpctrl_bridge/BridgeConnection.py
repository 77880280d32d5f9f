"""
Owner of the one bridge connection of the console.

Everything that mutates state runs on the thread calling `process_events()`
(the UI loop). The handshake thread and the roslibpy reactor thread only post
events into a queue. Every event is tagged with the generation of the
connection that produced it, events from an older generation are dropped.
"""
from collections import defaultdict
import logging
import queue
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import roslibpy

from dumpctrl_helper import parse_endpoint
from dumpctrl_helper.exceptions import InvalidEndpointError

from .ChannelRegistry import ACTUATOR_COMMAND, VELOCITY_COMMAND, ChannelRegistry
from .State import State
from .Subscription import Payload, Subscription
from .message import CompressedImage, Float64MultiArray, Message, TwistStamped

EVENT_READY = "ready"
EVENT_FAILED = "failed"
EVENT_CLOSED = "closed"
EVENT_DELIVERY = "delivery"

Event = Tuple[int, str, Tuple[Any, ...]]


class BridgeConnection:
    DEFAULT_TOPICS = {
        VELOCITY_COMMAND: "/ackerman_controller/reference",
        ACTUATOR_COMMAND: "/dumper_box_controller/commands",
    }

    def __init__(
        self,
        topics: Optional[Dict[str, str]] = None,
        frame_id: str = "base_link",
        connect_timeout: float = 5.0
    ) -> None:
        self.topics = {**self.DEFAULT_TOPICS, **(topics or {})}
        self.frame_id = frame_id
        self.connect_timeout = connect_timeout

        self.state = State.DISCONNECTED
        self.error: Optional[str] = None
        self.url: Optional[str] = None

        self.messages_sent = 0
        self.last_message_time = 0.0

        self.state_handlers: Dict[State, List[Callable[[], None]]] = defaultdict(list)

        self._ros: Optional[Any] = None
        self._registry: Optional[ChannelRegistry] = None
        self._generation = 0
        self._handshake_thread: Optional[threading.Thread] = None
        self._events: queue.Queue[Event] = queue.Queue()

    @property
    def is_connected(self) -> bool:
        return self.state == State.CONNECTED

    def on(self, state: State, handler: Callable[[], None]) -> None:
        self.state_handlers[state].append(handler)

    def connect(self, url: str) -> None:
        if self._ros is not None or self.state in (State.CONNECTING, State.CONNECTED):
            self._teardown()

        self.url = url
        self.error = None

        try:
            endpoint = parse_endpoint(url)
        except InvalidEndpointError as e:
            self._fail(str(e))
            return

        self._generation += 1
        generation = self._generation

        self._ros = roslibpy.Ros(
            host=endpoint.host,
            port=endpoint.port,
            is_secure=endpoint.is_secure
        )
        self._ros.on("close", lambda *args: self._post(generation, EVENT_CLOSED))

        logging.info(f"Connecting to bridge at {url}")
        self._handle_state_change(State.CONNECTING)

        self._handshake_thread = threading.Thread(
            target=self._handshake,
            args=(generation, self._ros),
            daemon=True
        )
        self._handshake_thread.start()

    def disconnect(self) -> None:
        if self._ros is not None:
            logging.info(f"Disconnecting from bridge at {self.url}")

        self._teardown()
        self._handle_state_change(State.DISCONNECTED)

    def shutdown(self, timeout: float = 1.0) -> None:
        self.disconnect()

        if self._handshake_thread and self._handshake_thread.is_alive():
            self._handshake_thread.join(timeout)

    def process_events(self) -> None:
        """Apply pending transport events. Call from the owning thread only."""
        while True:
            try:
                generation, kind, args = self._events.get_nowait()
            except queue.Empty:
                break

            if generation != self._generation:
                logging.debug(f"Discarding stale '{kind}' event from connection #{generation}")
                continue

            if kind == EVENT_READY:
                self._on_ready()
            elif kind == EVENT_FAILED:
                self._on_failed(*args)
            elif kind == EVENT_CLOSED:
                self._on_closed()
            elif kind == EVENT_DELIVERY:
                subscription, payload = args
                subscription.deliver(payload)

        if self._registry is not None:
            for subscription in list(self._registry.subscriptions.values()):
                subscription.flush()

    def publish_twist(self, linear_x: float, angular_z: float) -> bool:
        return self._publish(
            VELOCITY_COMMAND,
            TwistStamped.planar(linear_x, angular_z, self.frame_id)
        )

    def publish_actuator(self, position: float) -> bool:
        return self._publish(ACTUATOR_COMMAND, Float64MultiArray([position]))

    def subscribe(
        self,
        topic_name: str,
        on_payload: Callable[[Payload], None],
        message_type: str = CompressedImage.ros_type,
        min_interval: float = 0.066
    ) -> Optional[Subscription]:
        """
        Subscribe to an inbound topic on the live connection. Returns None
        when not connected.
        """
        if not self.is_connected or self._registry is None:
            logging.debug(f"Not connected, can not subscribe to {topic_name}")
            return None

        generation = self._generation

        def on_delivery(subscription: Subscription, payload: Payload) -> None:
            self._post(generation, EVENT_DELIVERY, subscription, payload)

        try:
            return self._registry.subscribe(
                topic_name,
                message_type,
                on_payload,
                min_interval,
                on_delivery
            )
        except Exception as e:
            logging.error(f"Subscribing to {topic_name} failed: {e}")
            previous = self._registry.subscriptions.get(topic_name)
            if previous:
                previous.dispose()

            return None

    def _publish(self, channel: str, message: Message) -> bool:
        if not self.is_connected or self._registry is None:
            logging.debug(f"Not connected, dropping {message.type}")
            return False

        try:
            sent = self._registry.publish(channel, message)
        except Exception as e:
            logging.error(f"Publishing on {channel} failed: {e}")
            self._teardown()
            self._fail(f"Publish failed: {e}")
            return False

        if sent:
            self.messages_sent += 1
            self.last_message_time = time.time()

        return sent

    def _handshake(self, generation: int, ros: Any) -> None:
        """Runs in a background thread, must not touch state directly."""
        try:
            ros.run(timeout=self.connect_timeout)
            self._post(generation, EVENT_READY)
        except Exception as e:
            reason = str(e) or type(e).__name__
            self._post(generation, EVENT_FAILED, reason)

    def _post(self, generation: int, kind: str, *args: Any) -> None:
        self._events.put((generation, kind, args))

    def _on_ready(self) -> None:
        if self.state != State.CONNECTING or self._ros is None:
            return

        try:
            self._registry = ChannelRegistry(self._ros, self.topics)
        except Exception as e:
            logging.error(f"Creating channels failed: {e}")
            self._teardown()
            self._fail(f"Channel setup failed: {e}")
            return

        self.messages_sent = 0
        self.last_message_time = 0.0
        logging.info(f"Connected to bridge at {self.url}")
        self._handle_state_change(State.CONNECTED)

    def _on_failed(self, reason: str) -> None:
        logging.error(f"Connection to {self.url} failed: {reason}")
        self._teardown()
        self._fail(reason)

    def _on_closed(self) -> None:
        if self.state == State.CONNECTING:
            self._on_failed("Connection closed before handshake completed")
            return

        logging.warning(f"Bridge at {self.url} closed the connection")
        self._teardown()
        self._handle_state_change(State.DISCONNECTED)

    def _fail(self, reason: str) -> None:
        self.error = reason
        self._handle_state_change(State.FAILED)

    def _teardown(self) -> None:
        """Close transport and release channels. Safe to call repeatedly."""
        # Anything still in flight for the old connection is stale from here on
        self._generation += 1

        if self._registry is not None:
            self._registry.release()
            self._registry = None

        if self._ros is not None:
            ros = self._ros
            self._ros = None

            # The transport factory redials on its own, reconnecting is up to the operator
            try:
                ros.factory.stopTrying()
            except Exception as e:
                logging.warning(f"Error while stopping bridge reconnects: {e}")

            try:
                ros.close()
            except Exception as e:
                logging.warning(f"Error while closing bridge connection: {e}")

    def _handle_state_change(self, new_state: State) -> None:
        if new_state != State.FAILED:
            self.error = None

        logging.debug(f"State changed from '{self.state}' to '{new_state}'")
        self.state = new_state

        for fn in self.state_handlers.get(new_state, []):
            fn()
