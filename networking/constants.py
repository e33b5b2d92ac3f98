"""
Networking Constants

Centralized configuration for the Taskie API client.
Following the same pattern as core and config modules for consistency.
"""

from enum import Enum

# =============================================================================
# BACKEND ENDPOINTS
# =============================================================================

REGISTER_PATH = "/api/register"
LOGIN_PATH = "/api/login"
NOTES_PATH = "/api/note"
COMPLETE_TASK_PATH = "/api/note/complete"
USER_PROFILE_PATH = "/api/user/profile"

# =============================================================================
# HTTP CONFIGURATION
# =============================================================================

# Fixed for every call, never retried
CONNECT_TIMEOUT = 10.0  # seconds
READ_TIMEOUT = 10.0  # seconds

JSON_CONTENT_TYPE = "application/json"

DEFAULT_HEADERS = {
    "Content-Type": JSON_CONTENT_TYPE,
    "Accept": JSON_CONTENT_TYPE,
}

# Raw token goes in this header, no "Bearer" prefix
AUTHORIZATION_HEADER = "Authorization"

# =============================================================================
# CLIENT MODES
# =============================================================================

API_MODES = ("auto", "http", "mock")

# =============================================================================
# MOCK BACKEND DEMO ACCOUNT
# =============================================================================

# Seeded by `taskie --mock` so single commands work against a fresh mock
DEMO_NAME = "Demo"
DEMO_EMAIL = "demo@taskie.test"
DEMO_PASSWORD = "demo"
DEMO_TOKEN = "demo-token"
DEMO_TASK_ID = "demo-1"

# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(Enum):
    """API failure classification"""

    TRANSPORT = "transport"
    DECODE = "decode"
    VALIDATION = "validation"
    EMPTY_RESULT = "empty_result"
    UNEXPECTED = "unexpected"
