from .Message import Message
from .TwistStamped import TwistStamped
from .Float64MultiArray import Float64MultiArray
from .CompressedImage import CompressedImage

__all__ = [
  "Message",
  "TwistStamped",
  "Float64MultiArray",
  "CompressedImage",
]
