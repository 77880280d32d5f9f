import base64
import binascii

from .Message import Message


class CompressedImage(Message):
    """
    Camera frame as delivered by rosbridge. The image bytes arrive base64
    encoded in "data".
    """
    ros_type = "sensor_msgs/CompressedImage"

    def __init__(self, data: bytes = b"", format: str = "jpeg") -> None:
        super().__init__({
            "format": format,
            "data": base64.b64encode(data).decode("ascii"),
        })

    def get_format(self) -> str:
        return self.payload.get("format", "")

    def get_bytes(self) -> bytes:
        data = self.payload.get("data", "")
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)

        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("Image payload is not valid base64") from e
