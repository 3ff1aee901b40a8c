"""Best-effort network reachability check based on interface link state."""
from __future__ import annotations

from typing import Mapping, Optional

import psutil

from errorlogger.core.utils.logging import get_logger

logger = get_logger("errorlogger.connectivity")

ETHERNET = "ethernet"
MOBILE = "mobile"
WIFI = "wifi"
VPN = "vpn"
LOOPBACK = "loopback"
OTHER = "other"

CONNECTED_KINDS = frozenset({ETHERNET, MOBILE, WIFI, VPN})

_PREFIXES = (
    (("lo",), LOOPBACK),
    (("wlan", "wlp", "wl", "wifi", "ath"), WIFI),
    (("wwan", "rmnet", "ccmni", "pdp_ip", "ppp0"), MOBILE),
    (("tun", "tap", "wg", "utun", "ipsec", "ppp"), VPN),
    (("eth", "en", "em", "eno", "ens", "enp", "bond", "br"), ETHERNET),
)


def interface_kind(name: str) -> str:
    lowered = name.lower()
    for prefixes, kind in _PREFIXES:
        if lowered.startswith(prefixes):
            return kind
    return OTHER


def interface_states() -> dict[str, bool]:
    """Map each network interface to whether its link is up."""
    return {name: stats.isup for name, stats in psutil.net_if_stats().items()}


def is_connected(interfaces: Optional[Mapping[str, bool]] = None) -> bool:
    """True when an ethernet, mobile, wifi or VPN interface has its link up.

    ``interfaces`` maps interface names to their up/down state; it defaults
    to what the host reports through psutil.
    """
    if interfaces is None:
        try:
            interfaces = interface_states()
        except (psutil.Error, OSError) as exc:
            logger.warning("Could not read network interfaces: %s", exc)
            return False
    return any(is_up and interface_kind(name) in CONNECTED_KINDS for name, is_up in interfaces.items())
