from __future__ import annotations

import threading
from typing import Any, TypeVar, overload

from beanwire.container import Container

T = TypeVar("T")


class ContainerContext:
    """Process-wide holder of one shared container.

    The binding is global for this ``ContainerContext`` instance, not
    thread-local. When nothing was bound, the first access creates a container
    configured from ``BEANWIRE_*`` environment variables.
    """

    def __init__(self) -> None:
        self._container: Container | None = None
        self._lock = threading.Lock()

    def set_current(self, container: Container) -> None:
        """Bind ``container`` as the shared one; expected once during startup."""
        with self._lock:
            self._container = container

    def get_current(self) -> Container:
        container = self._container
        if container is not None:
            return container
        with self._lock:
            if self._container is None:
                self._container = Container()
            return self._container

    def reset(self) -> None:
        """Drop the bound container, mainly for tests."""
        with self._lock:
            self._container = None

    @overload
    def get(self, name: str) -> Any: ...

    @overload
    def get(self, name: str, kind: type[T]) -> T: ...

    def get(self, name: str, kind: type[T] | None = None) -> Any:
        return self.get_current().get(name, kind)  # type: ignore[arg-type]


container_context = ContainerContext()

__all__ = ["ContainerContext", "container_context"]
