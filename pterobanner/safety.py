"""
Command execution helpers for pterobanner.

Responsibilities:
- Whitelist check on the executable basename
- Captured execution with timeout and output caps (metric probes)
- Interactive execution with inherited stdio (shell / app hand-off)
- Logging of every command and its outcome
"""

import logging
import os
import shlex
import signal
import subprocess
import threading

log = logging.getLogger(__name__)

# Executables the banner is allowed to run (basenames only)
DEFAULT_WHITELIST = {"vmstat", "top", "free", "df", "uname", "node", "npm", "bash"}


class SafeExecutionError(Exception):
    pass


def _split(cmd):
    if isinstance(cmd, (list, tuple)):
        parts = [str(x) for x in cmd]
    else:
        parts = shlex.split(str(cmd))
    if not parts:
        raise SafeExecutionError("Empty command")
    return parts


def _check_whitelist(parts, whitelist):
    exe = os.path.basename(parts[0])
    allowed = set(DEFAULT_WHITELIST) if whitelist is None else set(whitelist)
    if exe not in allowed:
        raise SafeExecutionError(f"Executable '{exe}' not allowed by whitelist")
    return exe


def run_safe_command(cmd, whitelist=None, timeout=20, max_output_bytes=10000, cwd=None):
    """
    Execute an external command and capture its output.
    - cmd: string or list
    - whitelist: set of allowed executable basenames (overrides default)
    - timeout: seconds
    - max_output_bytes: truncate output to this many characters

    Returns a dict: {ok: bool, returncode: int, stdout: str, stderr: str, cmd: str}
    """
    parts = _split(cmd)
    _check_whitelist(parts, whitelist)
    cmd_str = " ".join(shlex.quote(p) for p in parts)
    log.debug("run %s (timeout=%ss)", cmd_str, timeout)

    try:
        p = subprocess.Popen(
            parts,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            cwd=cwd,
        )
    except OSError as e:
        log.warning("failed to start %s: %s", cmd_str, e)
        raise SafeExecutionError(str(e)) from e

    try:
        out, err = p.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        p.kill()
        out, err = p.communicate()
        log.warning("timed out after %ss: %s", timeout, cmd_str)
        return {
            "ok": False,
            "returncode": None,
            "stdout": (out or "")[:max_output_bytes],
            "stderr": "Timed out",
            "cmd": cmd_str,
        }

    out = (out or "")[:max_output_bytes]
    err = (err or "")[:max_output_bytes]
    log.debug("%s exited with %s", cmd_str, p.returncode)
    return {"ok": p.returncode == 0, "returncode": p.returncode, "stdout": out, "stderr": err, "cmd": cmd_str}


def run_interactive(cmd, env=None, cwd=None, whitelist=None):
    """
    Run a command attached to the current terminal and wait for it.
    `env` entries are merged over the current environment.
    Returns the exit code.
    """
    parts = _split(cmd)
    _check_whitelist(parts, whitelist)
    cmd_str = " ".join(shlex.quote(p) for p in parts)

    child_env = os.environ.copy()
    if env:
        child_env.update(env)

    log.info("handing off to %s (cwd=%s)", cmd_str, cwd or os.getcwd())
    try:
        p = subprocess.Popen(parts, env=child_env, cwd=cwd)
    except OSError as e:
        log.error("failed to start %s: %s", cmd_str, e)
        raise SafeExecutionError(str(e)) from e

    # the child shares our terminal and handles Ctrl-C itself
    if threading.current_thread() is not threading.main_thread():
        return p.wait()
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        return p.wait()
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)


__all__ = [
    "DEFAULT_WHITELIST",
    "SafeExecutionError",
    "run_safe_command",
    "run_interactive",
]
