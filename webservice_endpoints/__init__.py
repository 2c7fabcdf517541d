"""webservice-endpoints: lazy, aliased registry of connection-bound endpoints."""
from __future__ import annotations

from .aliases import split_alias
from .classes import EndpointClassResolver
from .config import EndpointsConfig, build_locator, load_config
from .connections import Connection, ConnectionConfig, ConnectionManager
from .endpoint import DEFAULT_CONNECTION_NAME, Endpoint, EndpointOptions
from .errors import (
    ConfigurationError,
    EndpointContractError,
    EndpointsError,
    MissingConnectionError,
)
from .inflector import camelize, underscore
from .locator import EndpointLocator
from .registry import InstanceRegistry

__all__ = [
    "DEFAULT_CONNECTION_NAME",
    "ConfigurationError",
    "Connection",
    "ConnectionConfig",
    "ConnectionManager",
    "Endpoint",
    "EndpointClassResolver",
    "EndpointContractError",
    "EndpointLocator",
    "EndpointOptions",
    "EndpointsConfig",
    "EndpointsError",
    "InstanceRegistry",
    "MissingConnectionError",
    "build_locator",
    "camelize",
    "load_config",
    "split_alias",
    "underscore",
]
