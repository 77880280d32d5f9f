from typing import Optional

from dumpctrl_helper import Vector3, ros_stamp

from .Message import Message


class TwistStamped(Message):
    """Velocity command with header, published on the velocity channel."""
    ros_type = "geometry_msgs/TwistStamped"

    def __init__(
        self,
        linear: Vector3 = (0.0, 0.0, 0.0),
        angular: Vector3 = (0.0, 0.0, 0.0),
        frame_id: str = "base_link",
        timestamp: Optional[float] = None
    ) -> None:
        super().__init__({
            "header": {
                "stamp": ros_stamp(timestamp),
                "frame_id": frame_id,
            },
            "twist": {
                "linear": self._vector(linear),
                "angular": self._vector(angular),
            },
        })

    @classmethod
    def planar(
        cls,
        linear_x: float,
        angular_z: float,
        frame_id: str = "base_link",
        timestamp: Optional[float] = None
    ) -> "TwistStamped":
        return cls((linear_x, 0.0, 0.0), (0.0, 0.0, angular_z), frame_id, timestamp)

    def get_linear(self) -> Vector3:
        v = self.payload["twist"]["linear"]
        return (v["x"], v["y"], v["z"])

    def get_angular(self) -> Vector3:
        v = self.payload["twist"]["angular"]
        return (v["x"], v["y"], v["z"])

    def get_frame_id(self) -> str:
        return self.payload["header"]["frame_id"]

    @staticmethod
    def _vector(values: Vector3) -> dict:
        x, y, z = values
        return {"x": float(x), "y": float(y), "z": float(z)}
