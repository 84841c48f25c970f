"""In-process directory for resolving named resources such as data sources."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Protocol

from dbutil.db.errors import DbRuntimeError


class NamingError(DbRuntimeError):
    """Raised when a naming operation cannot be completed."""


class NameNotBoundError(NamingError):
    """Raised when a looked-up name has no bound object."""


class NamingContext(Protocol):
    """Anything able to resolve a name to an object."""

    def lookup(self, name: str) -> Any:
        """Return the object bound to ``name`` or raise :class:`NamingError`."""


class InitialContext:
    """Thread-safe name-to-object directory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bindings: Dict[str, Any] = {}

    def bind(self, name: str, obj: Any) -> None:
        """Bind ``obj`` under ``name``; the name must not already be bound."""

        key = _normalise_name(name)
        with self._lock:
            if key in self._bindings:
                raise NamingError(f"Name [{key}] is already bound")
            self._bindings[key] = obj

    def rebind(self, name: str, obj: Any) -> None:
        """Bind ``obj`` under ``name``, replacing any existing binding."""

        key = _normalise_name(name)
        with self._lock:
            self._bindings[key] = obj

    def unbind(self, name: str) -> None:
        key = _normalise_name(name)
        with self._lock:
            self._bindings.pop(key, None)

    def lookup(self, name: str) -> Any:
        key = _normalise_name(name)
        with self._lock:
            try:
                return self._bindings[key]
            except KeyError:
                raise NameNotBoundError(f"Name [{key}] is not bound") from None

    def list(self) -> List[str]:
        """Return the bound names in sorted order."""

        with self._lock:
            return sorted(self._bindings)


def _normalise_name(name: str) -> str:
    key = (name or "").strip()
    if not key:
        raise NamingError("Name must not be empty")
    return key


initial_context = InitialContext()


__all__ = ["InitialContext", "NameNotBoundError", "NamingContext", "NamingError", "initial_context"]
