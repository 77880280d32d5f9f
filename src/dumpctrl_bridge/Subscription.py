import logging
import time
from typing import Any, Callable, Dict, Optional

Payload = Dict[str, Any]


class Subscription:
    """
    Disposable handle for one inbound topic.

    Deliveries closer together than `min_interval` seconds are held back, so
    the consumer never sees more than 1 / min_interval payloads per second.
    Only the newest held back payload is kept, `flush()` hands it over once
    the interval has passed.
    """

    def __init__(
        self,
        name: str,
        topic: Any,
        on_payload: Callable[[Payload], None],
        min_interval: float,
        on_dispose: Optional[Callable[["Subscription"], None]] = None
    ) -> None:
        self.name = name
        self.on_payload = on_payload
        self.min_interval = min_interval
        self.disposed = False

        self._topic = topic
        self._on_dispose = on_dispose
        self._last_delivery: Optional[float] = None
        self._pending: Optional[Payload] = None

    def deliver(self, payload: Payload) -> bool:
        """Hand a payload to the consumer. Returns False if it was held back."""
        if self.disposed:
            return False

        now = time.monotonic()
        if not self._due(now):
            self._pending = payload
            return False

        self._hand_over(payload, now)

        return True

    def flush(self) -> bool:
        """Deliver the held back payload if its slot has come."""
        if self.disposed or self._pending is None:
            return False

        now = time.monotonic()
        if not self._due(now):
            return False

        self._hand_over(self._pending, now)

        return True

    def dispose(self) -> None:
        if self.disposed:
            return

        self.disposed = True
        self._pending = None
        try:
            self._topic.unsubscribe()
        except Exception as e:
            logging.warning(f"Failed to unsubscribe from {self.name}: {e}")

        if self._on_dispose:
            self._on_dispose(self)

        logging.debug(f"Unsubscribed from {self.name}")

    def _due(self, now: float) -> bool:
        return (
            self._last_delivery is None or
            now - self._last_delivery >= self.min_interval
        )

    def _hand_over(self, payload: Payload, now: float) -> None:
        self._pending = None
        self._last_delivery = now
        self.on_payload(payload)

    def __repr__(self) -> str:
        return f"<Subscription(name={self.name}, disposed={self.disposed})>"
