import logging
import os
import platform
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import psutil

from pterobanner.formatting import format_bytes, format_percent, format_uptime
from pterobanner.nettools import get_public_ip_info
from pterobanner.parsers import (
    NA,
    IPInfo,
    parse_cpuinfo_model,
    parse_df_root,
    parse_free_swap,
    parse_top_usage,
    parse_vmstat_usage,
)
from pterobanner.safety import SafeExecutionError, run_safe_command

log = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class UsagePair:
    total: str
    used: str

    def __str__(self):
        return f"{self.total} ({self.used} Used)"


@dataclass
class SystemInfo:
    ip: IPInfo = field(default_factory=IPInfo)
    os_type: str = NA
    uptime: str = "0 minutes"
    node_version: str = NA
    python_version: str = NA
    memory: UsagePair = field(default_factory=lambda: UsagePair(NA, NA))
    swap: UsagePair = field(default_factory=lambda: UsagePair("0B", "0B"))
    disk: UsagePair = field(default_factory=lambda: UsagePair(NA, NA))
    cpu_count: str = NA
    cpu_model: str = NA
    arch: str = NA
    kernel: str = NA
    cpu_usage: str = NA
    current_time: str = ""

    def to_dict(self):
        return asdict(self)


def _probe(cmd, timeout=10):
    """stdout of a successful command, or None."""
    try:
        result = run_safe_command(cmd, timeout=timeout)
    except SafeExecutionError as e:
        log.debug("probe %r unavailable: %s", cmd, e)
        return None
    if not result["ok"]:
        log.debug("probe %r failed: rc=%s stderr=%s", cmd, result["returncode"], result["stderr"].strip())
        return None
    return result["stdout"]


def get_cpu_usage():
    """CPU usage in percent via vmstat, then top; None if neither works."""
    usage = parse_vmstat_usage(_probe(["vmstat", "1", "2"]))
    if usage is None:
        usage = parse_top_usage(_probe(["top", "-bn1"]))
    return usage


def get_memory_info():
    try:
        mem = psutil.virtual_memory()
    except (OSError, RuntimeError) as e:
        log.warning("memory info unavailable: %s", e)
        return UsagePair(NA, NA)
    return UsagePair(format_bytes(mem.total), format_bytes(mem.total - mem.available))


def get_swap_info():
    parsed = parse_free_swap(_probe(["free", "-b"]))
    if parsed is None:
        return UsagePair("0B", "0B")
    total, used = parsed
    return UsagePair(format_bytes(total), format_bytes(used))


def get_disk_info(path="/"):
    parsed = parse_df_root(_probe(["df", "-B1", path]))
    if parsed is None:
        try:
            usage = psutil.disk_usage(path)
        except OSError as e:
            log.warning("disk info unavailable for %s: %s", path, e)
            return UsagePair(NA, NA)
        parsed = (usage.total, usage.used)
    total, used = parsed
    return UsagePair(format_bytes(total), format_bytes(used))


def get_cpu_model(path=CPUINFO_PATH):
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            model = parse_cpuinfo_model(f.read())
    except OSError:
        model = None
    return model or platform.processor() or NA


def get_cpu_count():
    count = psutil.cpu_count(logical=True) or os.cpu_count()
    return str(count) if count else NA


def get_kernel_version():
    out = _probe(["uname", "-r"])
    if out and out.strip():
        return out.strip()
    return platform.release() or NA


def get_os_type():
    return platform.system() or NA


def get_node_version():
    out = _probe(["node", "--version"], timeout=5)
    if not out or not out.strip():
        return NA
    return out.strip().lstrip("v")


def get_uptime():
    try:
        return format_uptime(time.time() - psutil.boot_time())
    except (OSError, RuntimeError) as e:
        log.warning("uptime unavailable: %s", e)
        return format_uptime(0)


def get_current_time(tz_name, now=None):
    """Wall-clock time in `tz_name` as YYYY-MM-DD HH:MM:SS (UTC if unknown)."""
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        log.warning("unknown timezone %r, falling back to UTC", tz_name)
        tz = timezone.utc
    now = now or datetime.now(timezone.utc)
    return now.astimezone(tz).strftime(TIME_FORMAT)


def collect_system_info(settings):
    """Gather every metric shown on the banner into one snapshot."""
    ip = get_public_ip_info(settings.ip_url, timeout=settings.ip_timeout)
    info = SystemInfo(
        ip=ip,
        os_type=get_os_type(),
        uptime=get_uptime(),
        node_version=get_node_version(),
        python_version=platform.python_version(),
        memory=get_memory_info(),
        swap=get_swap_info(),
        disk=get_disk_info(),
        cpu_count=get_cpu_count(),
        cpu_model=get_cpu_model(),
        arch=platform.machine() or NA,
        kernel=get_kernel_version(),
        cpu_usage=format_percent(get_cpu_usage()),
        current_time=get_current_time(settings.timezone),
    )
    log.debug("collected %s", info)
    return info


if __name__ == "__main__":
    from pterobanner.config import load_settings

    print(collect_system_info(load_settings()).to_dict())
