import math
from decimal import ROUND_HALF_UP, Decimal

UNITS = ["B", "K", "M", "G", "T"]


def format_bytes(value, decimals=1):
    """Format a byte count as a short human-readable string (1536 -> '1.5K')."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return "0B"
    if value <= 0 or math.isnan(value) or math.isinf(value):
        return "0B"

    dm = max(int(decimals), 0)
    i = int(math.floor(math.log(value) / math.log(1024)))
    i = min(max(i, 0), len(UNITS) - 1)
    # half-up on the exact binary value, like JS toFixed
    scaled = Decimal(value / (1024 ** i)).quantize(Decimal(1).scaleb(-dm), rounding=ROUND_HALF_UP)
    text = f"{scaled:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text + UNITS[i]


def _plural(n, word):
    return f"{n} {word}{'s' if n > 1 else ''}"


def format_uptime(seconds):
    """Format seconds as 'N days N hours N minutes', skipping zero parts."""
    try:
        seconds = int(math.floor(float(seconds)))
    except (TypeError, ValueError):
        seconds = 0
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60

    parts = []
    if days > 0:
        parts.append(_plural(days, "day"))
    if hours > 0:
        parts.append(_plural(hours, "hour"))
    if minutes > 0:
        parts.append(_plural(minutes, "minute"))
    return " ".join(parts) or "0 minutes"


def format_percent(value):
    if value is None:
        return "N/A"
    return f"{value:.1f}"
