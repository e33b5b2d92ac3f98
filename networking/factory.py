"""
Remote API Factory

Factory pattern for creating RemoteApiService implementations.
Follows same pattern as core.network.create_network_status_checker.

Automatically configures from config/client.yaml and environment variables.
"""

import logging
from typing import Literal, Optional

from networking.auth.session import Session
from networking.config import ClientConfig
from networking.implementations.http_api_service import HttpRemoteApiService
from networking.implementations.mock_api_service import MockRemoteApiService
from networking.interfaces.api_service_interface import RemoteApiServiceInterface
from networking.remote_api import RemoteApi

# Type alias
ApiMode = Literal["auto", "http", "mock"]


class RemoteApiFactory:
    """
    Factory for creating backend service implementations.

    Reads configuration from ClientConfig:
    - base_url: Backend root URL
    - api_mode: "auto", "http" or "mock"
    - add_task_path: Task creation endpoint

    Usage:
        # From config
        service = RemoteApiFactory.create_service()

        # Force mock for testing
        service = RemoteApiFactory.create_service(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_service(
        cls,
        mode: Optional[ApiMode] = None,
        config: Optional[ClientConfig] = None,
    ) -> RemoteApiServiceInterface:
        """
        Create a backend service instance.

        Args:
            mode: "auto", "http" or "mock" (None = config.api_mode)
            config: Client configuration (None = load default)

        Returns:
            RemoteApiServiceInterface implementation

        Raises:
            RuntimeError: If mode="http" but no base URL is configured
        """
        config = config or ClientConfig()
        mode = mode or config.api_mode

        if mode == "mock":
            cls._logger.info("Creating Mock API service (forced)")
            return MockRemoteApiService()

        if mode == "http":
            if not config.base_url:
                raise RuntimeError("HTTP API service requested but base_url is not set")
            cls._logger.info("Creating HTTP API service (forced)")
            return cls._create_http_service(config)

        # mode == "auto" - HTTP when a backend is configured, mock otherwise
        if config.base_url:
            cls._logger.info("Creating HTTP API service (auto-detected)")
            return cls._create_http_service(config)

        cls._logger.warning("No base_url configured, using Mock API service")
        return MockRemoteApiService()

    @classmethod
    def _create_http_service(cls, config: ClientConfig) -> HttpRemoteApiService:
        return HttpRemoteApiService(
            base_url=config.base_url,
            add_task_path=config.add_task_path,
        )


# Convenience function for quick creation
def create_remote_api(
    session: Optional[Session] = None,
    force_mock: bool = False,
    config: Optional[ClientConfig] = None,
) -> RemoteApi:
    """
    Quick RemoteApi creation with simple mock override.

    Args:
        session: Session to use (None = new anonymous session)
        force_mock: If True, always use the in-memory backend
        config: Client configuration (None = load default)

    Returns:
        RemoteApi

    Example:
        api = create_remote_api(Session(os.getenv("TASKIE_TOKEN", "")))
    """
    mode = "mock" if force_mock else None
    service = RemoteApiFactory.create_service(mode=mode, config=config)
    return RemoteApi(service, session or Session())
