import logging

import requests

from pterobanner.config import DEFAULT_IP_URL
from pterobanner.parsers import IPInfo, parse_ip_info

log = logging.getLogger(__name__)


def get_public_ip_info(url=DEFAULT_IP_URL, timeout=5):
    """Return public IP, country, region and ISP; all 'N/A' when unreachable."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as e:
        log.warning("public IP lookup failed: %s", e)
        return IPInfo()
    except ValueError as e:
        log.warning("public IP lookup returned invalid JSON: %s", e)
        return IPInfo()
    return parse_ip_info(payload)
