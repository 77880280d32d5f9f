from typing import Dict, List, Any
from pathlib import Path
import copy

import tomllib

import pygame


class Settings:
    """
    Read-only console configuration. Values from the TOML file are merged over
    DEFAULTS, nothing is ever written back.
    """
    DEFAULTS: Dict[str, Any] = {
        "bridge": {
            "url": "ws://localhost:9090",
            "connect_timeout": 5.0,
            "frame_id": "base_link",
        },
        "topics": {
            "velocity_command": "/ackerman_controller/reference",
            "actuator_command": "/dumper_box_controller/commands",
            "camera": {
                "name": "/camera/image_raw/compressed",
                "type": "sensor_msgs/CompressedImage",
                "throttle_ms": 66,
            },
        },
        "motion": {
            "move_speed": 1.0,
            "turn_speed": 1.0,
            "max_linear": 2.0,
            "max_angular": 2.0,
        },
        "actuator": {
            "step": 0.05,
            "min_pos": 0.0,
            "max_pos": 0.785,
            "initial": 0.0,
        },
        "joystick": {
            "max_radius": 100,
        },
        "controls": {
            "keyboard": {
                "forward": [pygame.K_w, pygame.K_UP],
                "backward": [pygame.K_s, pygame.K_DOWN],
                "left": [pygame.K_a, pygame.K_LEFT],
                "right": [pygame.K_d, pygame.K_RIGHT],
                "stop": [pygame.K_SPACE],
                "emergency_stop": [pygame.K_e],
                "lift": [pygame.K_l],
                "lower": [pygame.K_k],
                "connect_toggle": [pygame.K_F5],
                "mode_toggle": [pygame.K_TAB],
            }
        },
        "video": {
            "width": 1280,
            "height": 720,
        },
        "timing": {
            "main_loop_fps": 60,
        },
        "settings": {
            "title": "DUMPCTRL",
        },
    }

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.settings = {}
        self.load()

    def load(self) -> None:
        if self.path.exists():
            with self.path.open("rb") as file:
                raw = tomllib.load(file)
                loaded = self._deserialize(raw)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _deserialize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if "controls" in data:
            data = data.copy()
            data["controls"] = self._deserialize_controls(data["controls"])

        return data

    def _deserialize_controls(self, controls: Dict[str, Any]) -> Dict[str, Any]:
        return {
            device: {k: self._string_to_keys(v) for k, v in bindings.items()}
            for device, bindings in controls.items()
        }

    def _string_to_keys(self, value: str | List[str]) -> List[int]:
        # A single key name is accepted as shorthand for a one element list
        names = [value] if isinstance(value, str) else value
        return [self._string_to_key(name) for name in names]

    def _string_to_key(self, keyname: str) -> int:
        if not keyname.startswith("K_"):
            raise ValueError(f"Invalid key name in config: {keyname}")

        try:
            return getattr(pygame, keyname)
        except AttributeError:
            raise ValueError(f"Invalid key name in config: {keyname}")
