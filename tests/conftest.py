"""
Shared pytest fixtures for pterobanner tests.
"""

import pytest

from pterobanner.config import Settings
from pterobanner.parsers import IPInfo
from pterobanner.sysinfo import SystemInfo, UsagePair


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep PTERO_* variables from the host out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("PTERO_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PTERO_LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def settings(tmp_path):
    return Settings(app_dir=str(tmp_path), home=str(tmp_path), clear=False, log_dir=tmp_path / "logs")


@pytest.fixture
def sample_info():
    return SystemInfo(
        ip=IPInfo(ip="203.0.113.7", country="Indonesia", region="Jakarta", isp="AS64500 Example Net"),
        os_type="Linux",
        uptime="2 days 3 hours",
        node_version="20.11.1",
        python_version="3.12.1",
        memory=UsagePair("7.8G", "2.1G"),
        swap=UsagePair("0B", "0B"),
        disk=UsagePair("49.1G", "12.3G"),
        cpu_count="4",
        cpu_model="Intel(R) Xeon(R) CPU @ 2.20GHz",
        arch="x86_64",
        kernel="6.1.0-18-amd64",
        cpu_usage="12.5",
        current_time="2024-05-01 10:00:00",
    )


@pytest.fixture
def fake_run(mocker):
    """Patch run_safe_command in sysinfo with a table of canned outputs keyed by executable."""
    outputs = {}

    def _run(cmd, timeout=20, **kwargs):
        exe = cmd[0]
        if exe not in outputs:
            from pterobanner.safety import SafeExecutionError

            raise SafeExecutionError(f"{exe}: not found")
        out = outputs[exe]
        return {"ok": out is not None, "returncode": 0 if out is not None else 1,
                "stdout": out or "", "stderr": "", "cmd": " ".join(cmd)}

    mocker.patch("pterobanner.sysinfo.run_safe_command", side_effect=_run)
    return outputs
