"""
Core utilities and modules.

Public API:
    - NetworkStatusChecker: Is a usable network transport active?
    - create_network_status_checker: Build a checker for this machine
    - get_network_status: Get human-readable network status
    - setup_logging: Console + rotating file logging

Usage:
    from core.network import create_network_status_checker

    checker = create_network_status_checker()
    if checker.has_internet_connection():
        print("Internet available")
"""

from core.logging_setup import setup_logging
from core.network import (
    NetworkStatusChecker,
    Transport,
    create_network_status_checker,
    get_network_status,
)

__all__ = [
    "NetworkStatusChecker",
    "Transport",
    "create_network_status_checker",
    "get_network_status",
    "setup_logging",
]
