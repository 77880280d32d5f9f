import io
import logging
from typing import Any, Dict, Optional

import pygame

from dumpctrl_bridge import BridgeConnection, Subscription
from dumpctrl_bridge.message import CompressedImage


class CameraView:
    """
    Keeps the camera subscription of the current connection and turns the
    latest payload into a pygame surface when asked to.
    """

    def __init__(
        self,
        bridge: BridgeConnection,
        topic: str,
        message_type: str = CompressedImage.ros_type,
        throttle_ms: int = 66
    ) -> None:
        self.bridge = bridge
        self.topic = topic
        self.message_type = message_type
        self.min_interval = throttle_ms / 1000.0

        self.subscription: Optional[Subscription] = None
        self.frames_received = 0

        self._pending: Optional[Dict[str, Any]] = None
        self._surface: Optional[pygame.Surface] = None

    def attach(self) -> None:
        self.detach()
        self.subscription = self.bridge.subscribe(
            self.topic,
            self._on_payload,
            self.message_type,
            self.min_interval
        )

    def detach(self) -> None:
        if self.subscription:
            self.subscription.dispose()
            self.subscription = None

        self._pending = None
        self._surface = None

    def get_surface(self) -> Optional[pygame.Surface]:
        if self._pending is not None:
            payload = self._pending
            self._pending = None

            try:
                image = CompressedImage.from_payload(payload)
                self._surface = pygame.image.load(io.BytesIO(image.get_bytes()))
            except (ValueError, pygame.error) as e:
                logging.warning(f"Dropping undecodable frame from {self.topic}: {e}")

        return self._surface

    def _on_payload(self, payload: Dict[str, Any]) -> None:
        self._pending = payload
        self.frames_received += 1
