"""
Network Connectivity Checker

Reports whether a usable network transport (cellular, VPN or WiFi by default)
is currently active, and runs actions only when one is.

Capabilities are re-read on every check: connectivity can change between
two calls, so nothing is cached.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, FrozenSet, Iterable, Optional, Tuple, TypeVar

from config.settings import SYSFS_NET_PATH, TASKIE_USABLE_TRANSPORTS

T = TypeVar("T")


class Transport(Enum):
    """Kinds of network link"""

    CELLULAR = "cellular"
    VPN = "vpn"
    WIFI = "wifi"
    ETHERNET = "ethernet"


DEFAULT_USABLE_TRANSPORTS = frozenset(
    {Transport.CELLULAR, Transport.VPN, Transport.WIFI}
)

# Interface name prefixes (Linux naming, classic and predictable)
VPN_PREFIXES = ("tun", "tap", "wg", "ppp", "ipsec")
CELLULAR_PREFIXES = ("wwan", "ww", "rmnet", "ccmni")


@dataclass(frozen=True)
class NetworkCapabilities:
    """Transports of the currently active network(s)"""

    transports: FrozenSet[Transport]

    def has_transport(self, transport: Transport) -> bool:
        return transport in self.transports


class ConnectivityManagerInterface(ABC):
    """Source of the current network state"""

    @abstractmethod
    def get_active_capabilities(self) -> Optional[NetworkCapabilities]:
        """
        Read current network state.

        Returns:
            Capabilities of the active network, or None if there is none
        """


class SysfsConnectivityManager(ConnectivityManagerInterface):
    """
    Linux implementation reading /sys/class/net.

    An interface is active when its operstate is "up". Tunnel devices
    usually report "unknown" while carrying traffic, so VPNs also count then.
    """

    def __init__(self, sysfs_path: Path = SYSFS_NET_PATH):
        self.logger = logging.getLogger(__name__)
        self.sysfs_path = Path(sysfs_path)

    def get_active_capabilities(self) -> Optional[NetworkCapabilities]:
        try:
            interfaces = sorted(self.sysfs_path.iterdir())
        except OSError as e:
            self.logger.debug(f"Cannot read {self.sysfs_path}: {e}")
            return None

        transports = set()
        for iface in interfaces:
            if iface.name == "lo":
                continue

            transport = self._classify(iface)
            state = self._read_operstate(iface)

            if state == "up" or (state == "unknown" and transport is Transport.VPN):
                transports.add(transport)

        if not transports:
            return None

        return NetworkCapabilities(frozenset(transports))

    def _classify(self, iface: Path) -> Transport:
        name = iface.name
        if (iface / "wireless").exists() or (iface / "phy80211").exists():
            return Transport.WIFI
        if (iface / "tun_flags").exists() or name.startswith(VPN_PREFIXES):
            return Transport.VPN
        if name.startswith(CELLULAR_PREFIXES):
            return Transport.CELLULAR
        return Transport.ETHERNET

    def _read_operstate(self, iface: Path) -> str:
        try:
            return (iface / "operstate").read_text().strip().lower()
        except OSError:
            return "down"


class MockConnectivityManager(ConnectivityManagerInterface):
    """
    Settable network state for tests and offline development.

    Example:
        manager = MockConnectivityManager([Transport.WIFI])
        manager.set_offline()
    """

    def __init__(self, transports: Iterable[Transport] = (Transport.WIFI,)):
        self.logger = logging.getLogger(__name__)
        self._transports = frozenset(transports)
        self.check_count = 0

    def get_active_capabilities(self) -> Optional[NetworkCapabilities]:
        self.check_count += 1
        if not self._transports:
            return None
        return NetworkCapabilities(self._transports)

    def set_transports(self, transports: Iterable[Transport]) -> None:
        self._transports = frozenset(transports)
        self.logger.debug(f"[MOCK] Transports: {sorted(t.value for t in self._transports)}")

    def set_offline(self) -> None:
        self.set_transports(())


class NetworkStatusChecker:
    """
    Gatekeeper for network calls.

    Usage:
        checker = create_network_status_checker()
        checker.perform_if_connected_to_internet(lambda: api.get_tasks())
    """

    def __init__(
        self,
        connectivity_manager: ConnectivityManagerInterface,
        usable_transports: Optional[Iterable[Transport]] = None,
    ):
        """
        Initialize checker.

        Args:
            connectivity_manager: Where network state is read from
            usable_transports: Transports that count as connected
                (None = cellular, VPN and WiFi)
        """
        self.logger = logging.getLogger(__name__)
        self.connectivity_manager = connectivity_manager
        self.usable_transports = (
            frozenset(usable_transports)
            if usable_transports is not None
            else DEFAULT_USABLE_TRANSPORTS
        )

    def has_internet_connection(self) -> bool:
        """
        Check if a usable transport is active right now.

        Returns:
            True if connected, False otherwise (never raises)
        """
        capabilities = self.connectivity_manager.get_active_capabilities()
        if capabilities is None:
            return False
        return any(capabilities.has_transport(t) for t in self.usable_transports)

    def perform_if_connected_to_internet(self, action: Callable[[], T]) -> Optional[T]:
        """
        Run `action` only when connected.

        Returns:
            The action's return value, or None when offline (action not run)
        """
        if self.has_internet_connection():
            return action()

        self.logger.debug("No usable network, action skipped")
        return None


def parse_transports(names: Iterable[str]) -> FrozenSet[Transport]:
    """
    Convert names like "wifi" into Transports.

    Raises:
        ValueError: On an unknown transport name
    """
    return frozenset(Transport(name.strip().lower()) for name in names)


def get_network_status(checker: NetworkStatusChecker) -> Tuple[bool, str]:
    """
    Get human-readable network status.

    Returns:
        Tuple of (is_connected, status_string)

    Example:
        is_connected, status = get_network_status(checker)
        if is_connected:
            print(f"✓ {status}")  # Output: ✓ Internet available
        else:
            print(f"✗ {status}")  # Output: ✗ No internet connection
    """
    is_connected = checker.has_internet_connection()
    status = "Internet available" if is_connected else "No internet connection"
    return is_connected, status


def create_network_status_checker(force_mock: bool = False) -> NetworkStatusChecker:
    """
    Build a checker for this machine.

    Uses /sys/class/net on Linux, otherwise a mock that reports WiFi.
    Usable transports come from TASKIE_USABLE_TRANSPORTS.
    """
    logger = logging.getLogger(__name__)
    usable = parse_transports(TASKIE_USABLE_TRANSPORTS)

    if not force_mock and SYSFS_NET_PATH.is_dir():
        logger.debug("Using sysfs connectivity manager")
        return NetworkStatusChecker(SysfsConnectivityManager(), usable)

    logger.info("Using mock connectivity manager (always online)")
    return NetworkStatusChecker(MockConnectivityManager(), usable)
