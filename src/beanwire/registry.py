from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from beanwire.descriptors import ComponentDescriptor
from beanwire.exceptions import (
    BeanwireCyclicDependencyError,
    BeanwireDuplicateNameError,
    BeanwireRegistryFrozenError,
    BeanwireUnknownComponentError,
)


class Registry:
    """Map logical component names to their descriptors.

    Populated once at startup and frozen when a container takes ownership of
    it. Iteration follows insertion order, which resolution never relies on.
    """

    __slots__ = ("_descriptors", "_frozen")

    def __init__(self, descriptors: list[ComponentDescriptor] | None = None) -> None:
        self._descriptors: dict[str, ComponentDescriptor] = {}
        self._frozen = False
        for descriptor in descriptors or ():
            self.add(descriptor)

    def register(self, name: str, descriptor: ComponentDescriptor) -> None:
        """Register ``descriptor`` under ``name``.

        Raises:
            BeanwireDuplicateNameError: If ``name`` is already registered.
            BeanwireRegistryFrozenError: If the registry was frozen.

        """
        if self._frozen:
            raise BeanwireRegistryFrozenError(name)
        if name in self._descriptors:
            raise BeanwireDuplicateNameError(name)
        if descriptor.name != name:
            descriptor = dataclasses.replace(descriptor, name=name)
        self._descriptors[name] = descriptor

    def add(self, descriptor: ComponentDescriptor) -> None:
        """Register ``descriptor`` under its own name."""
        self.register(descriptor.name, descriptor)

    def lookup(self, name: str) -> ComponentDescriptor:
        """Return the descriptor for ``name``.

        Raises:
            BeanwireUnknownComponentError: If ``name`` is not registered.

        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise BeanwireUnknownComponentError(name) from None

    def merge(self, other: Registry) -> None:
        for descriptor in other:
            self.add(descriptor)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def names(self) -> list[str]:
        return list(self._descriptors)

    def validate(self) -> None:
        """Check explicit references for dangling names and cycles.

        Autowired dependencies are only known once types are resolved, so they
        are checked by the resolver instead.

        Raises:
            BeanwireUnknownComponentError: If a dependency names an unknown component.
            BeanwireCyclicDependencyError: If explicit dependencies form a cycle.

        """
        for descriptor in self._descriptors.values():
            for ref in descriptor.dependency_names:
                if ref not in self._descriptors:
                    raise BeanwireUnknownComponentError(ref, referrer=descriptor.name)

        done: set[str] = set()
        for name in self._descriptors:
            self._check_cycles(name, [], done)

    def _check_cycles(self, name: str, path: list[str], done: set[str]) -> None:
        if name in done:
            return
        if name in path:
            cycle = [*path[path.index(name) :], name]
            raise BeanwireCyclicDependencyError(name, cycle)
        path.append(name)
        for ref in self._descriptors[name].dependency_names:
            self._check_cycles(ref, path, done)
        path.pop()
        done.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __iter__(self) -> Iterator[ComponentDescriptor]:
        return iter(list(self._descriptors.values()))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"Registry({self.names()!r}, frozen={self._frozen})"


__all__ = ["Registry"]
