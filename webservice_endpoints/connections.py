"""Named connection catalog.

Connections are configured by name and built on first ``get``. A
connection may name a driver class (``module:Class``); the driver is the
transport to the backend and is only constructed when first used.
"""
from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigurationError, MissingConnectionError

logger = logging.getLogger(__name__)


class ConnectionConfig(BaseModel):
    """Settings for one connection. Keys other than ``driver`` go to the driver."""

    model_config = ConfigDict(extra="allow")

    driver: str | None = None
    timeout: float | None = None

    def driver_kwargs(self) -> dict[str, Any]:
        return self.model_dump(exclude={"driver"}, exclude_none=True)


def _import_driver(class_path: str) -> type:
    module_path, _, class_name = class_path.partition(":")
    if not module_path or not class_name:
        raise ConfigurationError(
            f"Connection driver must look like 'package.module:ClassName', got: {class_path!r}"
        )
    module = importlib.import_module(module_path)
    value = getattr(module, class_name)
    if not isinstance(value, type):
        raise ConfigurationError(f"{class_path!r} did not resolve to a class (got {type(value)})")
    return value


class Connection:
    """A named backend connection."""

    def __init__(self, name: str, config: ConnectionConfig | None = None):
        self.name = name
        self.config = config or ConnectionConfig()
        self._driver: Any = None
        self._lock = threading.Lock()

    @property
    def driver(self) -> Any:
        """Driver instance, built on first access. None when no driver is configured."""
        if self.config.driver is None:
            return None
        with self._lock:
            if self._driver is None:
                driver_cls = _import_driver(self.config.driver)
                self._driver = driver_cls(**self.config.driver_kwargs())
                logger.debug("Connection %r built driver %s", self.name, self.config.driver)
            return self._driver

    def close(self) -> None:
        with self._lock:
            driver, self._driver = self._driver, None
        close = getattr(driver, "close", None)
        if callable(close):
            close()

    def __repr__(self) -> str:
        return f"Connection({self.name!r})"


ConnectionSource = Mapping[str, Any] | ConnectionConfig | Connection


class ConnectionManager:
    """Thread-safe catalog mapping connection names to connections."""

    def __init__(self, configs: Mapping[str, ConnectionSource] | None = None):
        self._lock = threading.Lock()
        self._configs: dict[str, ConnectionConfig] = {}
        self._connections: dict[str, Connection] = {}
        for name, config in (configs or {}).items():
            self.set_config(name, config)

    def set_config(self, name: str, config: ConnectionSource) -> None:
        """Register a connection under ``name``. Names can only be configured once."""
        if not name:
            raise ConfigurationError("Connection name must be non-empty.")
        connection: Connection | None = None
        if isinstance(config, Connection):
            connection = config
            parsed = config.config
        elif isinstance(config, ConnectionConfig):
            parsed = config
        else:
            try:
                parsed = ConnectionConfig.model_validate(dict(config))
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid configuration for connection {name!r}: {exc}") from exc
        with self._lock:
            if name in self._configs:
                raise ValueError(f"Cannot reconfigure existing connection {name!r}.")
            self._configs[name] = parsed
            if connection is not None:
                self._connections[name] = connection

    def get(self, name: str) -> Connection:
        with self._lock:
            connection = self._connections.get(name)
            if connection is not None:
                return connection
            config = self._configs.get(name)
            if config is None:
                raise MissingConnectionError(
                    f'The datasource configuration "{name}" was not found.',
                    connection_name=name,
                )
            connection = Connection(name, config)
            self._connections[name] = connection
        logger.debug("Created connection %r", name)
        return connection

    def configured(self) -> list[str]:
        with self._lock:
            return sorted(self._configs)

    def is_configured(self, name: str) -> bool:
        with self._lock:
            return name in self._configs

    def drop(self, name: str) -> bool:
        """Forget a connection, closing it if it was built. Returns False when unknown."""
        with self._lock:
            known = self._configs.pop(name, None) is not None
            connection = self._connections.pop(name, None)
        if connection is not None:
            connection.close()
        return known

    def close_all(self) -> None:
        with self._lock:
            connections = list(self._connections.values())
        for connection in connections:
            try:
                connection.close()
            except Exception:
                logger.exception("Connection close failed for %r", connection)
