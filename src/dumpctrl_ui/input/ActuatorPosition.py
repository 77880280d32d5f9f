from dumpctrl_helper import clamp


class ActuatorPosition:
    """
    Cumulative position of the dump box actuator. Lives for the whole
    session, independent of the bridge connection.
    """

    def __init__(
        self,
        step: float = 0.05,
        min_pos: float = 0.0,
        max_pos: float = 0.785,
        initial: float = 0.0
    ) -> None:
        if min_pos > max_pos:
            raise ValueError(f"min_pos ({min_pos}) must not exceed max_pos ({max_pos})")

        self.step = step
        self.min_pos = min_pos
        self.max_pos = max_pos
        self.value = clamp(initial, min_pos, max_pos)

    def raise_position(self) -> float:
        self.value = clamp(self.value + self.step, self.min_pos, self.max_pos)
        return self.value

    def lower_position(self) -> float:
        self.value = clamp(self.value - self.step, self.min_pos, self.max_pos)
        return self.value

    def __repr__(self) -> str:
        return (f"<ActuatorPosition(value={self.value:.4f}, "
                f"range=[{self.min_pos}, {self.max_pos}], step={self.step})>")
