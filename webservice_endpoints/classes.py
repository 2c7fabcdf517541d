"""Name-keyed lookup table for endpoint classes.

Endpoint classes are registered up front, either one by one or by
discovering every ``Endpoint`` subclass a module defines. Lookups accept:

- a registered name (``Articles``, ``Blog.Articles``), with or without the
  ``Endpoint`` suffix
- a class path (``myapp.endpoints:ArticlesEndpoint``), imported on demand
- an ``Endpoint`` subclass, returned unchanged
"""
from __future__ import annotations

import importlib
import inspect
import logging
import threading
from types import ModuleType
from typing import Any

from .endpoint import Endpoint

logger = logging.getLogger(__name__)

CLASS_SUFFIX = "Endpoint"
CLASS_PATH_SEPARATOR = ":"


def is_class_path(name: str) -> bool:
    """Return True for fully-qualified ``module:Class`` references."""
    return CLASS_PATH_SEPARATOR in name


def _strip_suffix(name: str) -> str:
    if name.endswith(CLASS_SUFFIX) and name != CLASS_SUFFIX:
        return name[: -len(CLASS_SUFFIX)]
    return name


def _check_endpoint_class(value: Any, source: str) -> type[Endpoint]:
    if not isinstance(value, type):
        raise TypeError(f"{source!r} did not resolve to a class (got {type(value)})")
    if not issubclass(value, Endpoint):
        raise TypeError(f"{source!r} is not a subclass of Endpoint")
    return value


def import_class(class_path: str) -> type[Endpoint]:
    """Import an endpoint class from ``package.module:ClassName``."""
    module_path, _, class_name = class_path.partition(CLASS_PATH_SEPARATOR)
    if not module_path or not class_name:
        raise ValueError(
            f"Endpoint class path must look like 'package.module:ClassName', got: {class_path!r}"
        )
    module = importlib.import_module(module_path)
    value = getattr(module, class_name)
    return _check_endpoint_class(value, class_path)


class EndpointClassResolver:
    """Registry of concrete endpoint classes keyed by alias-style names."""

    def __init__(self, classes: dict[str, type[Endpoint]] | None = None):
        self._lock = threading.Lock()
        self._classes: dict[str, type[Endpoint]] = {}
        for name, cls in (classes or {}).items():
            self.register(name, cls)

    def register(self, name: str, cls: type[Endpoint], *, replace: bool = False) -> None:
        name = name.strip()
        if not name:
            raise ValueError("Endpoint class name must be non-empty.")
        _check_endpoint_class(cls, name)
        if cls is Endpoint:
            raise ValueError("The generic Endpoint is the fallback; register a subclass instead.")
        with self._lock:
            if name in self._classes and not replace:
                raise ValueError(f"Endpoint class already registered for {name!r}.")
            self._classes[name] = cls

    def unregister(self, name: str) -> None:
        with self._lock:
            self._classes.pop(name, None)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._classes)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._classes

    def discover(self, module: ModuleType, *, namespace: str = "", replace: bool = False) -> list[str]:
        """Register every public Endpoint subclass defined in ``module``.

        ``ArticlesEndpoint`` is registered as ``Articles`` (or
        ``<namespace>.Articles``). Classes merely imported into the module
        are skipped.
        """
        registered: list[str] = []
        for attr, obj in inspect.getmembers(module, inspect.isclass):
            if attr.startswith("_") or obj is Endpoint:
                continue
            if not issubclass(obj, Endpoint) or obj.__module__ != module.__name__:
                continue
            name = _strip_suffix(attr)
            if namespace:
                name = f"{namespace}.{name}"
            self.register(name, obj, replace=replace)
            registered.append(name)
        logger.debug("Discovered endpoint classes in %s: %s", module.__name__, registered)
        return registered

    def resolve(self, hint: str | type[Endpoint]) -> type[Endpoint] | None:
        """Return the concrete class for ``hint``, or None when nothing matches."""
        if isinstance(hint, type):
            return _check_endpoint_class(hint, hint.__qualname__)
        if is_class_path(hint):
            try:
                return import_class(hint)
            except (ImportError, AttributeError, ValueError) as exc:
                logger.debug("Endpoint class %r not importable: %s", hint, exc)
                return None
        with self._lock:
            cls = self._classes.get(hint)
            if cls is None:
                cls = self._classes.get(_strip_suffix(hint))
        return cls
