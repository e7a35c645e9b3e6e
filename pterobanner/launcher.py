"""
Hand-off targets after the banner: an interactive bash shell or a Node app.
"""

import json
import logging
from pathlib import Path

from pterobanner.safety import SafeExecutionError, run_interactive

log = logging.getLogger(__name__)

PROMPT_TEMPLATE = "\\[\\033[1;36m\\]{user}@{host}\\[\\033[0m\\]:\\w\\$ "


def build_prompt(user, host):
    return PROMPT_TEMPLATE.format(user=user, host=host)


def start_shell(settings):
    """Run `bash --noprofile --norc` with the panel prompt; returns the exit code."""
    env = {
        "USER": settings.shell_user,
        "HOME": settings.home,
        "PS1": build_prompt(settings.prompt_user, settings.prompt_host),
    }
    try:
        code = run_interactive(["bash", "--noprofile", "--norc"], env=env)
    except SafeExecutionError as e:
        log.error("Error starting process: %s", e)
        return 1
    if code != 0:
        log.warning("Process exited with code: %s", code)
    return code


def _read_package_json(app_dir):
    path = Path(app_dir) / "package.json"
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("could not read %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("%s is not a JSON object, ignoring it", path)
        return {}
    return data


def needs_install(app_dir):
    """True when package.json exists and node_modules is missing or stale."""
    app = Path(app_dir)
    pkg = app / "package.json"
    modules = app / "node_modules"
    if not pkg.is_file():
        return False
    if not modules.is_dir():
        return True
    return modules.stat().st_mtime < pkg.stat().st_mtime


def install_dependencies(app_dir, packages=()):
    cmd = ["npm", "install", *packages]
    log.info("installing dependencies in %s: %s", app_dir, " ".join(cmd))
    try:
        code = run_interactive(cmd, cwd=str(app_dir))
    except SafeExecutionError as e:
        log.error("npm install failed to start: %s", e)
        return False
    if code != 0:
        log.error("npm install exited with code %s", code)
        return False
    return True


def resolve_start_command(app_dir, main_file=None):
    """
    Pick how to start the app:
    an explicit main file wins, then `npm start` if package.json defines it,
    then `node` on package.json's "main", then index.js.
    Returns None when the chosen entry point does not exist.
    """
    pkg = _read_package_json(app_dir)
    if main_file:
        entry = main_file
    elif pkg and isinstance(pkg.get("scripts"), dict) and pkg["scripts"].get("start"):
        return ["npm", "start"]
    else:
        main = (pkg or {}).get("main")
        entry = main if isinstance(main, str) and main else "index.js"

    if not (Path(app_dir) / entry).is_file():
        log.error("entry point %s not found in %s", entry, app_dir)
        return None
    return ["node", entry]


def start_app(settings):
    """Install dependencies if needed, then run the app; returns its exit code."""
    app_dir = Path(settings.app_dir)
    if not app_dir.is_dir():
        log.error("app directory %s does not exist", app_dir)
        return 1

    if settings.force_install or settings.node_packages or needs_install(app_dir):
        if not install_dependencies(app_dir, settings.node_packages):
            return 1

    cmd = resolve_start_command(app_dir, settings.main_file or None)
    if cmd is None:
        return 1
    try:
        code = run_interactive(cmd, cwd=str(app_dir))
    except SafeExecutionError as e:
        log.error("Error starting process: %s", e)
        return 1
    if code != 0:
        log.warning("Process exited with code: %s", code)
    return code
