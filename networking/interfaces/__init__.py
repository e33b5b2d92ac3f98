"""Abstract backend contract."""

from networking.interfaces.api_service_interface import RemoteApiServiceInterface

__all__ = ["RemoteApiServiceInterface"]
