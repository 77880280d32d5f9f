import time
from typing import Optional
from urllib.parse import urlparse

from dumpctrl_helper.custom_types import Endpoint, Stamp
from dumpctrl_helper.exceptions import InvalidEndpointError

DEFAULT_BRIDGE_PORT = 9090


def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def ros_stamp(now: Optional[float] = None) -> Stamp:
    """Split a wall clock timestamp into ROS 2 style seconds/nanoseconds."""
    if now is None:
        now = time.time()

    sec = int(now)
    nanosec = int((now - sec) * 1_000_000_000)

    return {"sec": sec, "nanosec": nanosec}


def parse_endpoint(url: str) -> Endpoint:
    """
    Turn a bridge address like "ws://localhost:9090" into an Endpoint.
    A bare "host:port" is accepted and treated as plain ws.
    """
    url = (url or "").strip()
    if not url:
        raise InvalidEndpointError("Bridge URL is empty")

    if "://" not in url:
        url = f"ws://{url}"

    parsed = urlparse(url)
    if parsed.scheme not in ("ws", "wss"):
        raise InvalidEndpointError(f"Unsupported scheme '{parsed.scheme}' in {url}")

    if not parsed.hostname:
        raise InvalidEndpointError(f"No host in bridge URL: {url}")

    try:
        port = parsed.port
    except ValueError as e:
        raise InvalidEndpointError(f"Invalid port in bridge URL: {url}") from e

    return Endpoint(
        host=parsed.hostname,
        port=port if port is not None else DEFAULT_BRIDGE_PORT,
        is_secure=parsed.scheme == "wss",
    )
