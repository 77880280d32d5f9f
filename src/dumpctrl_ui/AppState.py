import logging
import time
from typing import Dict, List, Optional

import pygame

from dumpctrl_bridge import ACTUATOR_COMMAND, VELOCITY_COMMAND, BridgeConnection, State
from dumpctrl_ui.ApplicationModel import MODE_JOYSTICK, MODE_KEYS, ApplicationModel
from dumpctrl_ui.CameraView import CameraView
from dumpctrl_ui.ControlPad import ControlPad
from dumpctrl_ui.EventController import EventController
from dumpctrl_ui.Init import Init
from dumpctrl_ui.Renderer import Renderer
from dumpctrl_ui.Settings import Settings
from dumpctrl_ui.input import (
    ActuatorPosition,
    CommandTranslator,
    Control,
    Directive,
    DirectiveAggregator,
    VirtualJoystick,
)


class AppState:
    def __init__(self, settings: Settings, url: Optional[str] = None) -> None:
        self.settings = settings
        self.model = ApplicationModel()

        video = settings.get("video")
        self.size = (video.get("width"), video.get("height"))
        self.title = settings.get("settings").get("title")

        bridge_settings = settings.get("bridge", {})
        topics = settings.get("topics", {})
        self.url = url or bridge_settings.get("url")

        self.bridge = BridgeConnection(
            topics={
                VELOCITY_COMMAND: topics.get(VELOCITY_COMMAND),
                ACTUATOR_COMMAND: topics.get(ACTUATOR_COMMAND),
            },
            frame_id=bridge_settings.get("frame_id", "base_link"),
            connect_timeout=bridge_settings.get("connect_timeout", 5.0)
        )

        # Survives reconnects, owned by the session
        self.actuator = ActuatorPosition(**settings.get("actuator", {}))
        self.model.actuator_position = self.actuator.value

        self.translator = CommandTranslator(
            self.bridge,
            self.actuator,
            **settings.get("motion", {})
        )

        self.aggregator = DirectiveAggregator(
            self._keyboard_bindings(),
            on_directive=self._on_directive
        )

        max_radius = settings.get("joystick", {}).get("max_radius", 100)
        self.joystick = VirtualJoystick(
            center=(self.size[0] - max_radius - 60, self.size[1] - max_radius - 80),
            max_radius=max_radius,
            on_move=self._on_joystick_move
        )
        self.control_pad = ControlPad(
            self.aggregator,
            origin=(self.size[0] - 260, self.size[1] - 320)
        )

        camera = topics.get("camera", {})
        self.camera = CameraView(
            self.bridge,
            camera.get("name"),
            camera.get("type"),
            camera.get("throttle_ms", 66)
        )

        self.bridge.on(State.CONNECTED, self._on_connected)
        self.bridge.on(State.CONNECTING, self._on_connection_lost)
        self.bridge.on(State.DISCONNECTED, self._on_connection_lost)
        self.bridge.on(State.FAILED, self._on_connection_lost)

        self.screen, self.clock = Init.ui(self.size, self.title)
        self.renderer = Renderer(self.size)

        self.event_controller = EventController(
            aggregator=self.aggregator,
            joystick=self.joystick,
            control_pad=self.control_pad,
            model=self.model,
            settings=self.settings,
            on_quit=self._on_quit,
            on_connect_toggle=self.toggle_connection,
            on_mode_toggle=self.toggle_mode,
            screen_size=self.size
        )

    @property
    def running(self) -> bool:
        return self.model.running

    def connect(self) -> None:
        self.bridge.connect(self.url)

    def toggle_connection(self) -> None:
        if self.bridge.state in (State.CONNECTING, State.CONNECTED):
            self.bridge.disconnect()
        else:
            self.connect()

    def toggle_mode(self) -> None:
        self.event_controller.release_all()
        self.model.mode = MODE_JOYSTICK if self.model.mode == MODE_KEYS else MODE_KEYS
        logging.info(f"Control mode: {self.model.mode}")

    def handle_events(self) -> bool:
        """
        Handle pygame events. Returns False if application should quit.
        """
        return self.event_controller.handle_events()

    def update(self) -> None:
        self.bridge.process_events()
        self.model.loop_history.append(time.monotonic())

    def render(self) -> None:
        self.renderer.render_all(
            self.screen,
            self.model,
            self.bridge,
            self.camera,
            self.control_pad,
            self.joystick
        )

    def tick(self) -> None:
        self.clock.tick(self.settings.get("timing", {}).get("main_loop_fps", 60))

    def shutdown(self) -> None:
        logging.info("Shutting down...")

        start = time.monotonic()
        self.bridge.shutdown()
        pygame.quit()

        delta = round(time.monotonic() - start)
        logging.info(f"Shutdown took {delta}s")

    def _keyboard_bindings(self) -> Dict[Control, List[int]]:
        keyboard = self.settings.get("controls", {}).get("keyboard", {})
        return {
            control: keyboard.get(control.value, [])
            for control in Control
        }

    def _on_directive(self, directive: Directive) -> None:
        self.model.directive = directive
        self.translator.apply_directive(directive)
        self._sync_model()

    def _on_joystick_move(self, linear: float, angular: float) -> None:
        self.translator.apply_joystick(linear, angular)
        self._sync_model()

    def _on_connected(self) -> None:
        self.aggregator.set_enabled(True)
        self.joystick.set_enabled(True)
        self.camera.attach()

    def _on_connection_lost(self) -> None:
        self.aggregator.set_enabled(False)
        self.joystick.set_enabled(False)
        self.control_pad.reset()
        self.camera.detach()

    def _on_quit(self) -> None:
        self.model.running = False

    def _sync_model(self) -> None:
        self.model.linear = self.translator.linear
        self.model.angular = self.translator.angular
        self.model.actuator_position = self.actuator.value
