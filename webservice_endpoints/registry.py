"""Alias-keyed cache of constructed instances."""
from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from .errors import EndpointContractError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InstanceRegistry(ABC, Generic[T]):
    """Holds at most one instance per alias, building missing ones on demand.

    Concurrent ``get`` calls for the same missing alias build it once; the
    other callers wait and receive the same object. Different aliases are
    built independently.
    """

    instance_type: ClassVar[type]

    def __init__(self, *, close_evicted: bool = False):
        self._instances: dict[str, T] = {}
        self._lock = threading.Lock()
        self._alias_locks: dict[str, threading.RLock] = {}
        self.close_evicted = close_evicted

    @abstractmethod
    def create_instance(self, alias: str, options: dict[str, Any]) -> T:
        """Build the instance for ``alias`` on a cache miss."""

    def validate_instance(self, alias: str, instance: Any) -> T:
        if not isinstance(instance, self.instance_type):
            raise EndpointContractError(
                f"Registry entry {alias!r} must be a {self.instance_type.__name__}, "
                f"got {type(instance).__name__}"
            )
        return instance

    def _alias_lock(self, alias: str) -> threading.RLock:
        with self._lock:
            lock = self._alias_locks.get(alias)
            if lock is None:
                lock = self._alias_locks[alias] = threading.RLock()
            return lock

    def get(self, alias: str, options: Mapping[str, Any] | None = None) -> T:
        """Return the instance for ``alias``; ``options`` only matter on a miss."""
        with self._lock:
            instance = self._instances.get(alias)
        if instance is not None:
            return instance
        with self._alias_lock(alias):
            with self._lock:
                instance = self._instances.get(alias)
            if instance is not None:
                return instance
            logger.debug("Registry miss for %r, creating instance", alias)
            instance = self.validate_instance(alias, self.create_instance(alias, dict(options or {})))
            with self._lock:
                self._instances[alias] = instance
            return instance

    def set(self, alias: str, instance: T) -> T:
        """Store ``instance`` under ``alias``, replacing any previous one."""
        instance = self.validate_instance(alias, instance)
        with self._lock:
            previous = self._instances.get(alias)
            self._instances[alias] = instance
        if previous is not None and previous is not instance:
            self._evicted(alias, previous)
        return instance

    def has(self, alias: str) -> bool:
        with self._lock:
            return alias in self._instances

    def __contains__(self, alias: object) -> bool:
        with self._lock:
            return alias in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def aliases(self) -> list[str]:
        with self._lock:
            return list(self._instances)

    def remove(self, alias: str) -> None:
        with self._lock:
            previous = self._instances.pop(alias, None)
        if previous is not None:
            self._evicted(alias, previous)

    def clear(self) -> None:
        with self._lock:
            evicted = list(self._instances.items())
            self._instances.clear()
        for alias, instance in evicted:
            self._evicted(alias, instance)

    def _evicted(self, alias: str, instance: T) -> None:
        if not self.close_evicted:
            return
        close = getattr(instance, "close", None)
        if close is None:
            return
        try:
            close()
        except Exception:
            logger.exception("Close hook failed for registry entry %r", alias)
