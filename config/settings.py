"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (session tokens, passwords) should be in .env, NOT here
- Import these settings in modules: from config.settings import DEFAULT_BASE_URL
- Per-install overrides of the API client go in config/client.yaml
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# BACKEND CONFIGURATION
# =============================================================================

# Remote backend the client talks to
DEFAULT_BASE_URL = "https://taskie-rw.herokuapp.com"

# Which service implementation to build: "auto", "http" or "mock"
DEFAULT_API_MODE = "auto"

# Path used by the raw-socket lesson variant is "/api/note"
DEFAULT_ADD_TASK_PATH = "/api/note/add"

# YAML overrides for the API client
CLIENT_CONFIG_PATH = Path(os.getenv("TASKIE_CLIENT_CONFIG", "config/client.yaml"))

# Environment variables that beat config/client.yaml when set.
# Read when ClientConfig loads, not at import.
CLIENT_ENV_OVERRIDES = {
    "base_url": "TASKIE_BASE_URL",
    "api_mode": "TASKIE_API_MODE",
    "add_task_path": "TASKIE_ADD_TASK_PATH",
    "max_workers": "TASKIE_MAX_WORKERS",
}

# =============================================================================
# CONCURRENCY CONFIGURATION
# =============================================================================

# Background workers for AsyncRemoteApi (env: TASKIE_MAX_WORKERS)
DEFAULT_MAX_WORKERS = 4

# =============================================================================
# NETWORK CONNECTIVITY
# =============================================================================

# Transports that count as "connected" (comma separated)
# Add "ethernet" for wired desktops/servers
TASKIE_USABLE_TRANSPORTS = [
    name.strip().lower()
    for name in os.getenv("TASKIE_USABLE_TRANSPORTS", "cellular,vpn,wifi").split(",")
    if name.strip()
]

# Linux network interface directory
SYSFS_NET_PATH = Path("/sys/class/net")

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_DIR = os.getenv("TASKIE_LOG_DIR", "/var/log/taskie")
LOG_CLIENT_FILE = "client.log"
LOG_FALLBACK_DIR = "logs"
LOG_BACKUP_COUNT = 7  # days
LOG_LEVEL = os.getenv("TASKIE_LOG_LEVEL", "INFO")

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: These should NEVER be committed to version control!

# Session token from a previous `taskie login`
TASKIE_TOKEN = os.getenv("TASKIE_TOKEN", "")
