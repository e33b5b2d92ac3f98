"""
Network Status Tests

Tests for connectivity checking showing:
- Which transports count as "connected"
- No caching between checks
- Conditional execution of actions
- Linux sysfs interface classification

To run these tests:
    pytest tests/core/test_network.py -v
"""

import pytest

from core.network import (
    MockConnectivityManager,
    NetworkStatusChecker,
    SysfsConnectivityManager,
    Transport,
    create_network_status_checker,
    get_network_status,
    parse_transports,
)

# =============================================================================
# CHECKER TESTS
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("transport", [Transport.CELLULAR, Transport.VPN, Transport.WIFI])
def test_usable_transports_are_connected(transport):
    checker = NetworkStatusChecker(MockConnectivityManager([transport]))

    assert checker.has_internet_connection() is True


@pytest.mark.unit
def test_ethernet_alone_is_not_usable_by_default():
    checker = NetworkStatusChecker(MockConnectivityManager([Transport.ETHERNET]))

    assert checker.has_internet_connection() is False


@pytest.mark.unit
def test_usable_transports_can_be_widened():
    checker = NetworkStatusChecker(
        MockConnectivityManager([Transport.ETHERNET]),
        usable_transports=[Transport.ETHERNET, Transport.WIFI],
    )

    assert checker.has_internet_connection() is True


@pytest.mark.unit
def test_no_active_network_is_not_connected(mock_manager, checker):
    mock_manager.set_offline()

    assert checker.has_internet_connection() is False


@pytest.mark.unit
def test_every_check_requeries(mock_manager, checker):
    assert checker.has_internet_connection() is True

    mock_manager.set_offline()
    assert checker.has_internet_connection() is False

    mock_manager.set_transports([Transport.CELLULAR])
    assert checker.has_internet_connection() is True
    assert mock_manager.check_count == 3


@pytest.mark.unit
def test_perform_if_connected_runs_action(checker):
    calls = []

    value = checker.perform_if_connected_to_internet(lambda: calls.append("ran") or 42)

    assert value == 42
    assert calls == ["ran"]


@pytest.mark.unit
def test_perform_if_connected_skips_when_offline(mock_manager, checker):
    mock_manager.set_offline()
    calls = []

    value = checker.perform_if_connected_to_internet(lambda: calls.append("ran"))

    assert value is None
    assert calls == []


@pytest.mark.unit
def test_get_network_status(mock_manager, checker):
    assert get_network_status(checker) == (True, "Internet available")

    mock_manager.set_offline()
    assert get_network_status(checker) == (False, "No internet connection")


@pytest.mark.unit
def test_parse_transports():
    assert parse_transports([" WiFi", "vpn"]) == {Transport.WIFI, Transport.VPN}

    with pytest.raises(ValueError):
        parse_transports(["carrier-pigeon"])


@pytest.mark.unit
def test_factory_mock_is_online():
    checker = create_network_status_checker(force_mock=True)

    assert isinstance(checker.connectivity_manager, MockConnectivityManager)
    assert checker.has_internet_connection() is True


# =============================================================================
# SYSFS TESTS
# =============================================================================


@pytest.mark.unit
def test_sysfs_wifi_up(fake_sysfs):
    root = fake_sysfs(
        lo={"operstate": "unknown"},
        wlan0={"operstate": "up", "wireless": None},
    )

    capabilities = SysfsConnectivityManager(root).get_active_capabilities()

    assert capabilities.transports == {Transport.WIFI}


@pytest.mark.unit
def test_sysfs_down_interfaces_ignored(fake_sysfs):
    root = fake_sysfs(
        wlan0={"operstate": "down", "phy80211": None},
        eth0={"operstate": "down"},
    )

    assert SysfsConnectivityManager(root).get_active_capabilities() is None


@pytest.mark.unit
def test_sysfs_loopback_only_is_offline(fake_sysfs):
    root = fake_sysfs(lo={"operstate": "up"})

    checker = NetworkStatusChecker(SysfsConnectivityManager(root))

    assert checker.has_internet_connection() is False


@pytest.mark.unit
def test_sysfs_vpn_with_unknown_state(fake_sysfs):
    root = fake_sysfs(
        tun0={"operstate": "unknown", "tun_flags": "0x1001"},
        eth0={"operstate": "unknown"},
    )

    capabilities = SysfsConnectivityManager(root).get_active_capabilities()

    assert capabilities.transports == {Transport.VPN}


@pytest.mark.unit
def test_sysfs_classifies_by_name(fake_sysfs):
    root = fake_sysfs(
        wg0={"operstate": "up"},
        wwan0={"operstate": "up"},
        enp3s0={"operstate": "up"},
    )

    capabilities = SysfsConnectivityManager(root).get_active_capabilities()

    assert capabilities.transports == {Transport.VPN, Transport.CELLULAR, Transport.ETHERNET}


@pytest.mark.unit
def test_sysfs_missing_operstate_counts_as_down(fake_sysfs):
    root = fake_sysfs(wlan0={"wireless": None})

    assert SysfsConnectivityManager(root).get_active_capabilities() is None


@pytest.mark.unit
def test_sysfs_missing_directory_is_offline(tmp_path):
    manager = SysfsConnectivityManager(tmp_path / "does-not-exist")

    assert manager.get_active_capabilities() is None
