from dumpctrl_helper.helper import (
  clamp,
  parse_endpoint,
  ros_stamp,
)
from dumpctrl_helper.custom_types import (
  Endpoint,
  Stamp,
  Vector3,
)

__all__ = [
  "clamp",
  "parse_endpoint",
  "ros_stamp",
  "Endpoint",
  "Stamp",
  "Vector3",
]
