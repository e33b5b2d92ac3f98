"""Project configuration (see config.settings)."""
