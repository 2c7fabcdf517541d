"""Endpoint locator: resolves aliases to configured endpoint instances."""
from __future__ import annotations

import logging
from typing import Any, ClassVar

from .aliases import namespace_segments, split_alias
from .classes import EndpointClassResolver, is_class_path
from .connections import Connection, ConnectionManager
from .endpoint import DEFAULT_CONNECTION_NAME, Endpoint
from .errors import MissingConnectionError
from .inflector import camelize, underscore
from .registry import InstanceRegistry

logger = logging.getLogger(__name__)

CONNECTION_OVERRIDE_HINT = (
    " You can override Endpoint.default_connection_name() to return the connection name you want."
)


class EndpointLocator(InstanceRegistry[Endpoint]):
    """Registry of Endpoint instances keyed by alias.

    On a miss the endpoint class is looked up by the camelized alias; when
    no class is registered the generic ``Endpoint`` is used and pointed at
    the remote resource named after the alias. The connection comes from
    the ``connection`` option, the class default, or the alias namespace,
    in that order.
    """

    instance_type: ClassVar[type] = Endpoint

    def __init__(
        self,
        connections: ConnectionManager,
        classes: EndpointClassResolver | None = None,
        *,
        default_connection: str = DEFAULT_CONNECTION_NAME,
        close_evicted: bool = False,
    ):
        super().__init__(close_evicted=close_evicted)
        self.connections = connections
        self.classes = classes if classes is not None else EndpointClassResolver()
        self.default_connection = default_connection

    def create_instance(self, alias: str, options: dict[str, Any]) -> Endpoint:
        namespace, name = split_alias(alias)
        options = {"alias": name, **options}

        if not options.get("class_name"):
            options["class_name"] = camelize(alias)
        requested = options["class_name"]
        endpoint_class = self.classes.resolve(requested)
        if endpoint_class is not None:
            options["class_name"] = endpoint_class
        else:
            if "endpoint" not in options and not is_class_path(requested):
                options["endpoint"] = underscore(split_alias(requested)[1])
            endpoint_class = Endpoint
            options["class_name"] = Endpoint

        connection = options.get("connection")
        if not connection:
            if endpoint_class is not Endpoint:
                connection_name = endpoint_class.default_connection_name()
            elif not namespace:
                connection_name = self.default_connection
            else:
                connection_name = underscore(namespace_segments(namespace)[-1])
            options["connection"] = self.get_connection(connection_name)
        elif isinstance(connection, str):
            options["connection"] = self.get_connection(connection)

        options["registry_alias"] = alias

        logger.debug(
            "Creating %s for %r on connection %r",
            endpoint_class.__name__,
            alias,
            getattr(options["connection"], "name", options["connection"]),
        )
        return endpoint_class(options)

    def get_connection(self, connection_name: str) -> Connection:
        try:
            return self.connections.get(connection_name)
        except MissingConnectionError as exc:
            raise MissingConnectionError(
                str(exc) + CONNECTION_OVERRIDE_HINT,
                connection_name=connection_name,
            ) from exc
