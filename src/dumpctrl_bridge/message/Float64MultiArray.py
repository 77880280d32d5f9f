from typing import Iterable, List

from .Message import Message


class Float64MultiArray(Message):
    """Flat float array without layout, used for the actuator command."""
    ros_type = "std_msgs/Float64MultiArray"

    def __init__(self, data: Iterable[float] = ()) -> None:
        super().__init__({
            "layout": {"dim": [], "data_offset": 0},
            "data": [float(value) for value in data],
        })

    def get_data(self) -> List[float]:
        return list(self.payload["data"])
