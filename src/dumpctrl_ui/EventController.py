"""Event handling controller for pygame events."""
from typing import Callable, Tuple

import pygame

from dumpctrl_ui.ApplicationModel import MODE_JOYSTICK, MODE_KEYS, ApplicationModel
from dumpctrl_ui.ControlPad import ControlPad
from dumpctrl_ui.Settings import Settings
from dumpctrl_ui.input.Control import Control
from dumpctrl_ui.input.Directive import Directive
from dumpctrl_ui.input.DirectiveAggregator import DirectiveAggregator
from dumpctrl_ui.input.VirtualJoystick import VirtualJoystick

JOYSTICK_MODE_CONTROLS = {
    Control.STOP,
    Control.EMERGENCY_STOP,
    Control.LIFT,
    Control.LOWER,
}
HALT_CONTROLS = {Control.STOP, Control.EMERGENCY_STOP}
HALT_DIRECTIVES = {Directive.STOP, Directive.EMERGENCY_STOP}


class EventController:
    def __init__(
        self,
        aggregator: DirectiveAggregator,
        joystick: VirtualJoystick,
        control_pad: ControlPad,
        model: ApplicationModel,
        settings: Settings,
        on_quit: Callable[[], None],
        on_connect_toggle: Callable[[], None],
        on_mode_toggle: Callable[[], None],
        screen_size: Tuple[int, int]
    ):
        self.aggregator = aggregator
        self.joystick = joystick
        self.control_pad = control_pad
        self.model = model
        self.settings = settings
        self.on_quit = on_quit
        self.on_connect_toggle = on_connect_toggle
        self.on_mode_toggle = on_mode_toggle
        self.screen_size = screen_size

        self._load_keyboard_controls()

    def handle_events(self) -> bool:
        """Returns False if application should quit."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False

        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            self.on_quit()
            return False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.on_quit()
                return False

            if event.key in self.connect_toggle_keys:
                self.on_connect_toggle()
            elif event.key in self.mode_toggle_keys:
                self.on_mode_toggle()
            elif self.model.mode == MODE_KEYS:
                self.aggregator.press(event.key)
            else:
                self._joystick_mode_key(event.key)

        elif event.type == pygame.KEYUP:
            # Always honor releases, a key may have gone down before a mode switch
            self.aggregator.release(event.key)

        elif event.type == pygame.WINDOWFOCUSLOST:
            self.release_all()

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer_down(event.pos)

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer_up()

        elif event.type == pygame.MOUSEMOTION:
            self._pointer_move(event.pos)

        elif event.type == pygame.FINGERDOWN:
            self._pointer_down(self._finger_pos(event))

        elif event.type == pygame.FINGERUP:
            self._pointer_up()

        elif event.type == pygame.FINGERMOTION:
            self._pointer_move(self._finger_pos(event))

        return True

    def release_all(self) -> None:
        """Drop every held input, used on focus loss and mode changes."""
        self.aggregator.clear()
        self.control_pad.reset()
        if self.joystick.dragging:
            self.joystick.end()

    def update_settings(self, settings: Settings) -> None:
        self.settings = settings
        self._load_keyboard_controls()

    def _joystick_mode_key(self, key: int) -> None:
        """Only non-driving keys stay live while the joystick steers."""
        control = self.aggregator.control_for(key)
        if control not in JOYSTICK_MODE_CONTROLS:
            return

        # A held drag would otherwise keep publishing over the stop
        if control in HALT_CONTROLS and self.joystick.dragging:
            self.joystick.end()

        self.aggregator.press(key)

    def _pointer_down(self, pos: Tuple[int, int]) -> None:
        if self.model.mode == MODE_KEYS:
            self.control_pad.pointer_down(pos)
        elif self.model.mode == MODE_JOYSTICK and self.joystick.contains(*pos):
            if self.aggregator.directive in HALT_DIRECTIVES:
                return

            self.joystick.begin(*pos)

    def _pointer_up(self) -> None:
        self.control_pad.pointer_up()
        if self.joystick.dragging:
            self.joystick.end()

    def _pointer_move(self, pos: Tuple[int, int]) -> None:
        if self.joystick.dragging:
            self.joystick.update(*pos)

        self.control_pad.pointer_move(pos)

    def _finger_pos(self, event: pygame.event.Event) -> Tuple[int, int]:
        # Touch coordinates are normalized to [0, 1]
        return (
            int(event.x * self.screen_size[0]),
            int(event.y * self.screen_size[1])
        )

    def _load_keyboard_controls(self) -> None:
        keyboard_controls = self.settings.get("controls", {}).get("keyboard", {})

        self.connect_toggle_keys = set(keyboard_controls.get("connect_toggle", []))
        self.mode_toggle_keys = set(keyboard_controls.get("mode_toggle", []))
