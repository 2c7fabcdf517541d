"""Endpoint base class and its construction options."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from .inflector import underscore

DEFAULT_CONNECTION_NAME = "webservice"


class EndpointOptions(BaseModel):
    """Options bag an endpoint is built from.

    Unknown keys are kept so endpoint subclasses can read their own
    settings from ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    alias: str
    registry_alias: str | None = None
    class_name: Any = None
    connection: Any = None
    endpoint: str | None = None


class Endpoint:
    """Access point for one logical remote resource behind a connection.

    Used directly as the generic implementation when no specific class is
    registered for an alias. Subclasses pin their connection by setting
    ``connection_name`` or overriding ``default_connection_name``.
    """

    connection_name: ClassVar[str | None] = None

    def __init__(self, options: Mapping[str, Any] | EndpointOptions):
        if isinstance(options, EndpointOptions):
            self._options = options
        else:
            self._options = EndpointOptions.model_validate(dict(options))

    @classmethod
    def default_connection_name(cls) -> str:
        return cls.connection_name or DEFAULT_CONNECTION_NAME

    @property
    def options(self) -> EndpointOptions:
        return self._options

    @property
    def alias(self) -> str:
        return self._options.alias

    @property
    def registry_alias(self) -> str:
        return self._options.registry_alias or self._options.alias

    @property
    def connection(self) -> Any:
        return self._options.connection

    @property
    def endpoint(self) -> str:
        """Conventional name of the remote resource (``Articles`` -> ``articles``)."""
        if self._options.endpoint:
            return self._options.endpoint
        return underscore(self.alias)

    def close(self) -> None:
        """Release resources held by the endpoint. The base class holds none."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(registry_alias={self.registry_alias!r}, "
            f"endpoint={self.endpoint!r})"
        )
