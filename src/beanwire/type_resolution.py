from __future__ import annotations

import importlib
import threading
from collections.abc import Callable
from typing import Any

from beanwire.exceptions import BeanwireTypeResolutionError


class TypeResolver:
    """Turn type identifier strings into constructible callables.

    Identifiers are looked up in an explicit alias table first, then imported.
    Both ``package.module.Class`` and ``package.module:Class`` are accepted;
    the colon form allows nested attributes such as ``module:Outer.Inner``.
    """

    def __init__(self, aliases: dict[str, Callable[..., Any]] | None = None) -> None:
        self._aliases: dict[str, Callable[..., Any]] = dict(aliases or {})
        self._cache: dict[str, Callable[..., Any]] = {}
        self._lock = threading.Lock()

    def register(self, identifier: str, factory: Callable[..., Any]) -> None:
        """Bind ``identifier`` to ``factory`` without going through imports."""
        if not callable(factory):
            raise BeanwireTypeResolutionError(identifier, "alias target is not callable")
        with self._lock:
            self._aliases[identifier] = factory
            self._cache.pop(identifier, None)

    def resolve(self, identifier: str, *, name: str | None = None) -> Callable[..., Any]:
        """Return the callable behind ``identifier``.

        Raises:
            BeanwireTypeResolutionError: If the identifier is empty, cannot be
                imported, or does not point at a callable.

        """
        alias = self._aliases.get(identifier)
        if alias is not None:
            return alias

        cached = self._cache.get(identifier)
        if cached is not None:
            return cached

        target = self._import(identifier, name=name)
        if not callable(target):
            raise BeanwireTypeResolutionError(identifier, "object is not callable", name=name)

        with self._lock:
            self._cache[identifier] = target
        return target

    def _import(self, identifier: str, *, name: str | None) -> Any:
        identifier = identifier.strip()
        if not identifier:
            raise BeanwireTypeResolutionError(identifier, "empty type identifier", name=name)

        if ":" in identifier:
            module_name, _, attribute_path = identifier.partition(":")
            return self._load_attribute(identifier, module_name, attribute_path, name=name)

        module_name, dot, attribute_path = identifier.rpartition(".")
        if not dot:
            raise BeanwireTypeResolutionError(
                identifier,
                "expected a dotted path such as 'package.module.Class'",
                name=name,
            )
        return self._load_attribute(identifier, module_name, attribute_path, name=name)

    def _load_attribute(
        self,
        identifier: str,
        module_name: str,
        attribute_path: str,
        *,
        name: str | None,
    ) -> Any:
        if not module_name or not attribute_path:
            raise BeanwireTypeResolutionError(identifier, "incomplete type identifier", name=name)
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as exc:
            raise BeanwireTypeResolutionError(
                identifier,
                f"cannot import module {module_name!r} ({exc})",
                name=name,
            ) from exc

        for part in attribute_path.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as exc:
                raise BeanwireTypeResolutionError(
                    identifier,
                    f"{module_name!r} has no attribute {attribute_path!r}",
                    name=name,
                ) from exc
        return target


def type_identifier(target: Callable[..., Any]) -> str:
    """Return the ``module:qualname`` identifier of a class or function."""
    return f"{target.__module__}:{target.__qualname__}"


__all__ = ["TypeResolver", "type_identifier"]
