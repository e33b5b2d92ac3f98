"""Backend implementations: real HTTP and in-memory mock."""

from networking.implementations.http_api_service import HttpRemoteApiService
from networking.implementations.mock_api_service import MockRemoteApiService

__all__ = ["HttpRemoteApiService", "MockRemoteApiService"]
