from datetime import datetime
from typing import Tuple

import pygame
import pygame.freetype

from dumpctrl_bridge import BridgeConnection, State
from dumpctrl_ui.ApplicationModel import MODE_JOYSTICK, ApplicationModel
from dumpctrl_ui.CameraView import CameraView
from dumpctrl_ui.ControlPad import ControlPad
from dumpctrl_ui.colors import BLACK, BLUE, DARK_GREY, GREEN, GREY, RED, WHITE, YELLOW
from dumpctrl_ui.input.VirtualJoystick import VirtualJoystick

BUTTON_LABELS = {
    "forward": "W",
    "backward": "S",
    "left": "A",
    "right": "D",
    "stop": "STOP",
    "emergency_stop": "E-STOP",
    "lift": "LIFT",
    "lower": "LOWER",
}

STATE_COLORS = {
    State.DISCONNECTED: GREY,
    State.CONNECTING: YELLOW,
    State.CONNECTED: GREEN,
    State.FAILED: RED,
}


class Renderer:
    def __init__(self, size: Tuple[int, int]) -> None:
        self.width, self.height = size

        pygame.freetype.init()
        self.font = pygame.freetype.Font(None, 16)
        self.big_font = pygame.freetype.Font(None, 32)

    def render_all(
        self,
        screen: pygame.Surface,
        model: ApplicationModel,
        bridge: BridgeConnection,
        camera: CameraView,
        control_pad: ControlPad,
        joystick: VirtualJoystick
    ) -> None:
        self._render_camera(screen, camera, bridge)
        self._render_status(screen, model, bridge)

        if model.mode == MODE_JOYSTICK:
            self._render_joystick(screen, joystick, bridge.is_connected)
        else:
            self._render_control_pad(screen, model, control_pad, bridge.is_connected)

        pygame.display.flip()

    def _render_camera(
        self,
        screen: pygame.Surface,
        camera: CameraView,
        bridge: BridgeConnection
    ) -> None:
        screen.fill(BLACK)

        frame = camera.get_surface()
        if frame is not None:
            frame = pygame.transform.scale(frame, (self.width, self.height))
            screen.blit(frame, (0, 0))
            return

        message = "No Video Signal" if bridge.is_connected else "Not Connected"
        surface, rect = self.big_font.render(message, RED)
        rect.center = (self.width // 2, self.height // 2 - 40)
        screen.blit(surface, rect)

    def _render_status(
        self,
        screen: pygame.Surface,
        model: ApplicationModel,
        bridge: BridgeConnection
    ) -> None:
        last = "-"
        if bridge.last_message_time:
            last = datetime.fromtimestamp(bridge.last_message_time).strftime("%H:%M:%S")

        lines = [
            (f"{bridge.state.value.upper()}  {bridge.url or ''}", STATE_COLORS[bridge.state]),
            (f"Sent: {bridge.messages_sent}  Last: {last}", WHITE),
            (f"Mode: {model.mode}  Directive: {model.directive.label}", WHITE),
            (f"Linear: {model.linear:+.2f}  Angular: {model.angular:+.2f}", WHITE),
            (f"Dump box: {model.actuator_position:.3f}", WHITE),
        ]

        if bridge.state == State.FAILED and bridge.error:
            lines.append((f"Error: {bridge.error}", RED))

        y = 10
        for text, color in lines:
            surface, rect = self.font.render(text, color)
            screen.blit(surface, (10, y))
            y += rect.height + 6

    def _render_control_pad(
        self,
        screen: pygame.Surface,
        model: ApplicationModel,
        control_pad: ControlPad,
        enabled: bool
    ) -> None:
        for button_id, rect in control_pad.buttons.items():
            if not enabled:
                color = DARK_GREY
            elif button_id == "emergency_stop":
                color = RED
            elif model.directive.involves(button_id):
                color = BLUE
            else:
                color = GREY

            pygame.draw.rect(screen, color, rect, border_radius=6)

            surface, label_rect = self.font.render(BUTTON_LABELS[button_id], WHITE)
            label_rect.center = rect.center
            screen.blit(surface, label_rect)

    def _render_joystick(
        self,
        screen: pygame.Surface,
        joystick: VirtualJoystick,
        enabled: bool
    ) -> None:
        center = (int(joystick.center[0]), int(joystick.center[1]))
        radius = int(joystick.max_radius)

        pygame.draw.circle(screen, DARK_GREY, center, radius + 16)
        pygame.draw.circle(screen, GREY, center, radius + 16, width=2)

        knob = (
            int(center[0] + joystick.offset[0]),
            int(center[1] + joystick.offset[1])
        )
        color = BLUE if joystick.dragging else (GREY if enabled else DARK_GREY)
        pygame.draw.circle(screen, color, knob, 16)

        linear, angular = joystick.velocity()
        surface, rect = self.font.render(f"{linear:+.2f} / {angular:+.2f}", WHITE)
        rect.midtop = (center[0], center[1] + radius + 24)
        screen.blit(surface, rect)
