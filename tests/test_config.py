"""
Tests for environment-driven settings.
"""

from pathlib import Path

from pterobanner.config import Settings, load_settings


class TestLoadSettings:
    def test_defaults(self, tmp_path):
        s = load_settings(env_path=tmp_path / ".env")
        assert s.timezone == "Asia/Jakarta"
        assert s.mode == "shell"
        assert s.clear is True
        assert s.node_packages == []
        assert s.ip_timeout == 5.0

    def test_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PTERO_TZ", "Europe/Berlin")
        monkeypatch.setenv("PTERO_MODE", "APP")
        monkeypatch.setenv("PTERO_NODE_PACKAGES", "axios  discord.js")
        monkeypatch.setenv("PTERO_FORCE_INSTALL", "yes")
        monkeypatch.setenv("PTERO_CLEAR", "0")
        monkeypatch.setenv("PTERO_IP_TIMEOUT", "2.5")

        s = load_settings(env_path=tmp_path / ".env")

        assert s.timezone == "Europe/Berlin"
        assert s.mode == "app"
        assert s.node_packages == ["axios", "discord.js"]
        assert s.force_install is True
        assert s.clear is False
        assert s.ip_timeout == 2.5
        assert s.log_dir == tmp_path / "logs"

    def test_invalid_values_fall_back(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PTERO_MODE", "daemon")
        monkeypatch.setenv("PTERO_IP_TIMEOUT", "soon")

        s = load_settings(env_path=tmp_path / ".env")

        assert s.mode == "shell"
        assert s.ip_timeout == 5.0

    def test_dotenv_file(self, tmp_path, monkeypatch):
        env = tmp_path / ".env"
        env.write_text("PTERO_PANEL_NAME=ACME PANEL\n")
        monkeypatch.delenv("PTERO_PANEL_NAME", raising=False)

        s = load_settings(env_path=env)

        assert s.panel_name == "ACME PANEL"


class TestOverride:
    def test_none_values_ignored(self):
        s = Settings().override(mode=None, timezone="UTC", app_dir=Path("/srv"))
        assert s.mode == "shell"
        assert s.timezone == "UTC"
        assert s.app_dir == Path("/srv")
