"""Exceptions raised by the endpoint registry."""
from __future__ import annotations


class EndpointsError(Exception):
    """Base class for endpoint registry errors."""


class ConfigurationError(EndpointsError, ValueError):
    """Configuration is invalid or incomplete."""


class MissingConnectionError(ConfigurationError, LookupError):
    """No connection is registered under the requested name."""

    def __init__(self, message: str, *, connection_name: str | None = None):
        super().__init__(message)
        self.connection_name = connection_name


class EndpointContractError(EndpointsError, TypeError):
    """An object stored in or produced for the registry is not an Endpoint."""
