"""
Session

Holds the token returned by a successful login.

Flow:
1. RemoteApi.login_user() stores the server token here
2. Every authenticated call reads it and sends it in the Authorization header
3. clear() logs the user out (the token is otherwise kept for the process lifetime)

There is no expiry and no refresh: the backend issues long-lived tokens.
"""

import logging
import threading


class Session:
    """
    Thread-safe holder for the current session token.

    One Session is created by the caller and passed into RemoteApi, so
    several independent clients can live in one process.
    """

    def __init__(self, token: str = ""):
        """
        Initialize session.

        Args:
            token: Token from an earlier login (empty = logged out)

        Example:
            session = Session(os.getenv("TASKIE_TOKEN", ""))
            api = RemoteApi(service, session)
        """
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._token = token or ""

    def set_token(self, token: str) -> None:
        """Replace the current token"""
        with self._lock:
            self._token = token or ""
        self.logger.debug("Session token updated")

    def get_token(self) -> str:
        """
        Get the current token.

        Returns:
            Token string, or "" when logged out
        """
        with self._lock:
            return self._token

    def clear(self) -> None:
        """Forget the token (logout)"""
        with self._lock:
            self._token = ""
        self.logger.info("Session cleared")

    @property
    def is_authenticated(self) -> bool:
        """True when a non-blank token is held"""
        return bool(self.get_token().strip())

    def __repr__(self) -> str:
        state = "authenticated" if self.is_authenticated else "anonymous"
        return f"Session({state})"
