import os
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from dotenv import load_dotenv

log = logging.getLogger(__name__)

ENV_PATH = Path.cwd() / ".env"

DEFAULT_TZ = "Asia/Jakarta"
DEFAULT_IP_URL = "https://ipapi.co/json/"
DEFAULT_LOG_DIR = Path.home() / ".pterobanner" / "logs"
MODES = ("shell", "app", "none")


def _env_bool(name, default=False):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name, default):
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw.strip() else default
    except ValueError:
        log.warning("%s=%r is not a number, using %s", name, raw, default)
        return default


@dataclass
class Settings:
    timezone: str = DEFAULT_TZ
    panel_name: str = "PTERODACTYL PANEL"
    ready_message: str = "System Ready - Silahkan ketik perintah anda ..."
    prompt_user: str = "Premiumapps"
    prompt_host: str = "users"
    shell_user: str = "container"
    home: str = "/home/container"
    app_dir: str = "/home/container"
    main_file: str = ""
    node_packages: list = field(default_factory=list)
    force_install: bool = False
    mode: str = "shell"
    ip_url: str = DEFAULT_IP_URL
    ip_timeout: float = 5.0
    clear: bool = True
    log_dir: Path = DEFAULT_LOG_DIR

    def override(self, **changes):
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(env_path=None):
    """Read settings from the environment (and a .env file, if present)."""
    path = Path(env_path) if env_path else ENV_PATH
    load_dotenv(dotenv_path=path, override=False)
    log.debug("ENV_PATH=%s exists=%s", path, path.exists())

    defaults = Settings()
    mode = os.getenv("PTERO_MODE", defaults.mode).strip().lower()
    if mode not in MODES:
        log.warning("PTERO_MODE=%r is not one of %s, using %s", mode, MODES, defaults.mode)
        mode = defaults.mode

    settings = Settings(
        timezone=os.getenv("PTERO_TZ", defaults.timezone),
        panel_name=os.getenv("PTERO_PANEL_NAME", defaults.panel_name),
        ready_message=os.getenv("PTERO_READY_MESSAGE", defaults.ready_message),
        prompt_user=os.getenv("PTERO_PROMPT_USER", defaults.prompt_user),
        prompt_host=os.getenv("PTERO_PROMPT_HOST", defaults.prompt_host),
        shell_user=os.getenv("PTERO_SHELL_USER", defaults.shell_user),
        home=os.getenv("PTERO_HOME", defaults.home),
        app_dir=os.getenv("PTERO_APP_DIR", defaults.app_dir),
        main_file=os.getenv("PTERO_MAIN_FILE", defaults.main_file),
        node_packages=os.getenv("PTERO_NODE_PACKAGES", "").split(),
        force_install=_env_bool("PTERO_FORCE_INSTALL"),
        mode=mode,
        ip_url=os.getenv("PTERO_IP_URL", defaults.ip_url),
        ip_timeout=_env_float("PTERO_IP_TIMEOUT", defaults.ip_timeout),
        clear=_env_bool("PTERO_CLEAR", True),
        log_dir=Path(os.getenv("PTERO_LOG_DIR", str(defaults.log_dir))).expanduser(),
    )
    log.debug("settings=%s", settings)
    return settings
