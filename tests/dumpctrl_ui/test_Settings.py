import pygame
import pytest

from dumpctrl_ui.Settings import Settings


class TestSettings:
    def test_defaults_without_file(self, tmp_path):
        settings = Settings(str(tmp_path / "missing.toml"))

        assert settings.get("bridge")["url"] == "ws://localhost:9090"
        assert settings.get("topics")["velocity_command"] == "/ackerman_controller/reference"
        assert settings.get("controls")["keyboard"]["forward"] == [pygame.K_w, pygame.K_UP]

    def test_defaults_are_not_shared(self, tmp_path):
        first = Settings(str(tmp_path / "missing.toml"))
        first.get("bridge")["url"] = "ws://changed:1"

        second = Settings(str(tmp_path / "missing.toml"))

        assert second.get("bridge")["url"] == "ws://localhost:9090"

    def test_file_overrides_are_merged(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text(
            '[bridge]\n'
            'url = "wss://robot:9443"\n'
            '\n'
            '[topics.camera]\n'
            'name = "/front/compressed"\n'
            '\n'
            '[motion]\n'
            'move_speed = 0.5\n'
        )

        settings = Settings(str(path))

        assert settings.get("bridge")["url"] == "wss://robot:9443"
        assert settings.get("bridge")["connect_timeout"] == 5.0
        assert settings.get("topics")["camera"]["name"] == "/front/compressed"
        assert settings.get("topics")["camera"]["throttle_ms"] == 66
        assert settings.get("motion")["move_speed"] == 0.5
        assert settings.get("motion")["turn_speed"] == 1.0

    def test_key_names_are_converted(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text(
            '[controls.keyboard]\n'
            'forward = ["K_i", "K_UP"]\n'
            'emergency_stop = "K_x"\n'
        )

        keyboard = Settings(str(path)).get("controls")["keyboard"]

        assert keyboard["forward"] == [pygame.K_i, pygame.K_UP]
        assert keyboard["emergency_stop"] == [pygame.K_x]
        assert keyboard["backward"] == [pygame.K_s, pygame.K_DOWN]

    @pytest.mark.parametrize("name", ["w", "K_NOT_A_KEY"])
    def test_invalid_key_name(self, tmp_path, name):
        path = tmp_path / "settings.toml"
        path.write_text(f'[controls.keyboard]\nforward = "{name}"\n')

        with pytest.raises(ValueError, match="Invalid key name"):
            Settings(str(path))

    def test_get_with_default_and_set(self, tmp_path):
        settings = Settings(str(tmp_path / "missing.toml"))

        assert settings.get("unknown", {}) == {}
        settings.set("video", {"width": 640, "height": 480})
        assert settings.get("video")["width"] == 640
