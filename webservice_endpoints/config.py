"""Configuration loading for webservice-endpoints.

Reads an optional TOML file from a base directory describing connections,
endpoint class registrations, and locator settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib

from .classes import EndpointClassResolver, import_class
from .connections import ConnectionManager
from .endpoint import DEFAULT_CONNECTION_NAME
from .errors import ConfigurationError
from .locator import EndpointLocator

CONFIG_FILENAMES = ("webservice-endpoints.toml",)


@dataclass
class LocatorSettings:
    default_connection: str = DEFAULT_CONNECTION_NAME
    close_evicted: bool = False


@dataclass
class EndpointsConfig:
    locator: LocatorSettings = field(default_factory=LocatorSettings)
    connections: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    endpoints: Dict[str, str] = field(default_factory=dict)
    path: Optional[Path] = None


def load_config(base_dir: Path) -> EndpointsConfig:
    """Load config from the first matching file in ``base_dir``."""

    for filename in CONFIG_FILENAMES:
        candidate = base_dir / filename
        if not candidate.exists():
            continue
        with candidate.open("rb") as f:
            data = tomllib.load(f)
        return EndpointsConfig(
            locator=_parse_locator(data.get("locator", {})),
            connections=_parse_connections(data.get("connections", {})),
            endpoints=_parse_endpoints(data.get("endpoints", {})),
            path=candidate,
        )

    return EndpointsConfig()


def _parse_locator(raw: dict) -> LocatorSettings:
    default_connection = raw.get("default_connection") or DEFAULT_CONNECTION_NAME
    return LocatorSettings(
        default_connection=str(default_connection),
        close_evicted=bool(raw.get("close_evicted", False)),
    )


def _parse_connections(raw: dict) -> Dict[str, Dict[str, Any]]:
    connections: Dict[str, Dict[str, Any]] = {}
    for name, settings in raw.items():
        if not isinstance(settings, dict):
            raise ConfigurationError(f"[connections.{name}] must be a table")
        connections[name] = dict(settings)
    return connections


def _parse_endpoints(raw: dict) -> Dict[str, str]:
    endpoints: Dict[str, str] = {}
    for alias, class_path in raw.items():
        if not isinstance(class_path, str) or not class_path.strip():
            raise ConfigurationError(f"[endpoints] {alias!r} must map to a 'module:Class' string")
        endpoints[alias] = class_path
    return endpoints


def build_locator(config: EndpointsConfig) -> EndpointLocator:
    """Create a locator with the connections and endpoint classes from ``config``."""
    connections = ConnectionManager(config.connections)
    classes = EndpointClassResolver()
    for name, class_path in config.endpoints.items():
        classes.register(name, import_class(class_path))
    return EndpointLocator(
        connections,
        classes,
        default_connection=config.locator.default_connection,
        close_evicted=config.locator.close_evicted,
    )
