"""
On-screen buttons. Each button is identified by its control name and feeds
the same press/release entry points as the keyboard.
"""
from typing import Dict, Optional, Tuple

from pygame import Rect

from dumpctrl_ui.input.Control import Control
from dumpctrl_ui.input.DirectiveAggregator import DirectiveAggregator


class ControlPad:
    BUTTON_SIZE = (64, 48)
    GAP = 8

    def __init__(
        self,
        aggregator: DirectiveAggregator,
        origin: Tuple[int, int]
    ) -> None:
        self.aggregator = aggregator
        self.origin = origin
        self.buttons: Dict[str, Rect] = self._layout(origin)
        self.held: Optional[str] = None

    def hit(self, pos: Tuple[int, int]) -> Optional[str]:
        for button_id, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return button_id

        return None

    def pointer_down(self, pos: Tuple[int, int]) -> bool:
        """Returns True if the pointer went down on a button."""
        button_id = self.hit(pos)
        if button_id is None:
            return False

        if self.held and self.held != button_id:
            self.aggregator.release(self.held)

        self.held = button_id
        self.aggregator.press(button_id)

        return True

    def pointer_up(self) -> None:
        if self.held:
            self.aggregator.release(self.held)
            self.held = None

    def pointer_move(self, pos: Tuple[int, int]) -> None:
        if self.held and self.hit(pos) != self.held:
            self.aggregator.pointer_leave(self.held)
            self.held = None

    def reset(self) -> None:
        self.held = None

    def _layout(self, origin: Tuple[int, int]) -> Dict[str, Rect]:
        width, height = self.BUTTON_SIZE
        x0, y0 = origin
        col = width + self.GAP
        row = height + self.GAP

        def cell(column: int, line: int, span: int = 1) -> Rect:
            return Rect(x0 + column * col, y0 + line * row, width * span + self.GAP * (span - 1), height)

        return {
            Control.FORWARD.value: cell(1, 0),
            Control.LEFT.value: cell(0, 1),
            Control.RIGHT.value: cell(2, 1),
            Control.BACKWARD.value: cell(1, 2),
            Control.STOP.value: cell(0, 3),
            Control.EMERGENCY_STOP.value: cell(1, 3, span=2),
            Control.LIFT.value: cell(0, 4),
            Control.LOWER.value: cell(1, 4),
        }
