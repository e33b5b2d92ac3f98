"""
Core Test Configuration and Fixtures

To use pytest:
    pip install -e ".[test]"
    pytest tests/core/
"""

import pytest

from core.network import MockConnectivityManager, NetworkStatusChecker, Transport


# =============================================================================
# NETWORK FIXTURES
# =============================================================================

@pytest.fixture
def mock_manager():
    """Provide a MockConnectivityManager that starts on WiFi"""
    return MockConnectivityManager([Transport.WIFI])


@pytest.fixture
def checker(mock_manager):
    """NetworkStatusChecker with default usable transports"""
    return NetworkStatusChecker(mock_manager)


@pytest.fixture
def fake_sysfs(tmp_path):
    """
    Build a fake /sys/class/net tree.

    Usage:
        def test_x(fake_sysfs):
            root = fake_sysfs(wlan0={"operstate": "up", "wireless": None})
    """
    def _build(**interfaces):
        root = tmp_path / "net"
        root.mkdir()
        for name, entries in interfaces.items():
            iface = root / name
            iface.mkdir()
            for entry, content in entries.items():
                if content is None:
                    (iface / entry).mkdir()
                else:
                    (iface / entry).write_text(content + "\n")
        return root

    return _build


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
