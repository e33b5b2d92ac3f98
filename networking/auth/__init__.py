"""Session handling for authenticated calls."""

from networking.auth.session import Session

__all__ = ["Session"]
