import pytest

from dumpctrl_bridge.message import (
    CompressedImage,
    Float64MultiArray,
    Message,
    TwistStamped,
)


class TestMessageRegistry:
    def test_subclasses_register_by_ros_type(self):
        assert Message._registry["geometry_msgs/TwistStamped"] is TwistStamped
        assert Message._registry["std_msgs/Float64MultiArray"] is Float64MultiArray
        assert Message._registry["sensor_msgs/CompressedImage"] is CompressedImage

    def test_from_dict_builds_matching_class(self):
        message = Message.from_dict(
            "std_msgs/Float64MultiArray",
            {"layout": {"dim": [], "data_offset": 0}, "data": [0.25]}
        )

        assert isinstance(message, Float64MultiArray)
        assert message.get_data() == [0.25]

    def test_from_dict_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown message type"):
            Message.from_dict("nav_msgs/Odometry", {})

    def test_from_dict_rejects_non_dict(self):
        with pytest.raises(ValueError, match="Malformed"):
            Message.from_dict("std_msgs/Float64MultiArray", ["not", "a", "dict"])

    def test_to_dict_is_a_copy(self):
        message = Float64MultiArray([1.0])
        data = message.to_dict()
        data["data"].append(2.0)

        assert message.get_data() == [1.0]

    def test_type_property(self):
        assert TwistStamped().type == "geometry_msgs/TwistStamped"
