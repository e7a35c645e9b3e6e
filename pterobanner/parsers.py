"""
Pure parsers for the output of the shell commands the banner runs.

Every parser returns ``None`` when the text is unusable; callers decide
which fallback constant to show.
"""

import re
from dataclasses import dataclass

NA = "N/A"

TOP_IDLE_RE = re.compile(r"([0-9.]+)\s*%?\s*id")


@dataclass
class IPInfo:
    ip: str = NA
    country: str = NA
    region: str = NA
    isp: str = NA


def _last_line(text):
    lines = [ln for ln in (text or "").splitlines() if ln.strip()]
    return lines[-1] if lines else ""


def parse_vmstat_usage(text):
    """CPU usage from ``vmstat 1 2``: 100 minus the idle column of the last sample."""
    cols = _last_line(text).split()
    if len(cols) < 15:
        return None
    try:
        usage = 100 - float(cols[14])
    except ValueError:
        return None
    if usage < 0 or usage > 100:
        return None
    return usage


def parse_top_usage(text):
    """CPU usage from the ``Cpu(s)`` line of ``top -bn1``."""
    for line in (text or "").splitlines():
        if "Cpu(s)" not in line:
            continue
        m = TOP_IDLE_RE.search(line)
        if not m:
            return None
        try:
            usage = 100 - float(m.group(1))
        except ValueError:
            return None
        return usage if usage >= 0 else None
    return None


def parse_free_swap(text):
    """Return (total, used) bytes from the ``Swap:`` row of ``free -b``."""
    for line in (text or "").splitlines():
        if line.startswith("Swap:"):
            parts = line.split()[1:3]
            if len(parts) < 2:
                return None
            try:
                return int(parts[0]), int(parts[1])
            except ValueError:
                return None
    return None


def parse_df_root(text):
    """Return (total, used) bytes from the last line of ``df -B1 /``."""
    cols = _last_line(text).split()
    if len(cols) < 3:
        return None
    try:
        return int(cols[1]), int(cols[2])
    except ValueError:
        return None


def parse_cpuinfo_model(text):
    for line in (text or "").splitlines():
        if line.startswith("model name"):
            _, _, value = line.partition(":")
            value = value.lstrip(" \t").strip()
            return value or None
    return None


def parse_ip_info(payload):
    """Build an IPInfo from the JSON mapping returned by the geolocation service."""
    if not isinstance(payload, dict):
        return IPInfo()
    return IPInfo(
        ip=payload.get("ip") or NA,
        country=payload.get("country_name") or NA,
        region=payload.get("region") or NA,
        isp=payload.get("org") or NA,
    )
