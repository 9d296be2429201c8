"""Annotation-driven registration.

Mark classes (or factory functions) with ``@component`` and collect them
with ``scan``::

    @component("dao")
    class DaoImpl(IDao): ...

    @component
    class MetierImpl(IMetier):
        def __init__(self, dao: IDao) -> None: ...

    registry = scan("myapp")

Scanned components are autowired by type unless told otherwise.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType
from typing import Any, TypeVar, overload

from beanwire.descriptors import Autowire, ComponentDescriptor, Injection, Lifetime
from beanwire.exceptions import BeanwireTypeResolutionError
from beanwire.registry import Registry
from beanwire.type_resolution import type_identifier

C = TypeVar("C", bound=Callable[..., Any])

COMPONENT_MARKER = "__beanwire_component__"


@dataclass(frozen=True, slots=True)
class ComponentMarker:
    """Registration options attached to a decorated class or function."""

    name: str
    lifetime: Lifetime
    autowire: Autowire
    injection: Injection

    def descriptor_for(self, target: Callable[..., Any]) -> ComponentDescriptor:
        return ComponentDescriptor(
            name=self.name,
            type_identifier=type_identifier(target),
            lifetime=self.lifetime,
            autowire=self.autowire,
            default_injection=self.injection,
            target=target,
        )


def default_component_name(target: Callable[..., Any]) -> str:
    """Return the name a component gets when none is given: ``DaoImpl`` -> ``daoImpl``."""
    name = target.__name__
    return name[:1].lower() + name[1:]


@overload
def component(target: C, /) -> C: ...


@overload
def component(
    name: str | None = None,
    /,
    *,
    lifetime: Lifetime = Lifetime.SINGLETON,
    autowire: Autowire = Autowire.BY_TYPE,
    injection: Injection = Injection.CONSTRUCTOR,
) -> Callable[[C], C]: ...


def component(
    target_or_name: Any = None,
    /,
    *,
    lifetime: Lifetime = Lifetime.SINGLETON,
    autowire: Autowire = Autowire.BY_TYPE,
    injection: Injection = Injection.CONSTRUCTOR,
) -> Any:
    """Mark a class or factory function for discovery by ``scan``.

    Usable bare (``@component``), with a name (``@component("dao")``) or with
    keyword options only (``@component(lifetime=Lifetime.TRANSIENT)``).
    """

    def decorator(target: C, name: str | None = None) -> C:
        marker = ComponentMarker(
            name=name or default_component_name(target),
            lifetime=lifetime,
            autowire=autowire,
            injection=injection,
        )
        setattr(target, COMPONENT_MARKER, marker)
        return target

    if callable(target_or_name):
        return decorator(target_or_name)
    return lambda target: decorator(target, target_or_name)


def marker_of(target: object) -> ComponentMarker | None:
    # Read from the object's own namespace so subclasses of a component are not components.
    if inspect.isclass(target):
        marker = vars(target).get(COMPONENT_MARKER)
    else:
        marker = getattr(target, COMPONENT_MARKER, None)
    return marker if isinstance(marker, ComponentMarker) else None


def scan(*packages: str | ModuleType, registry: Registry | None = None) -> Registry:
    """Import every module of ``packages`` and register the marked components.

    Objects re-exported by several modules are registered once, under the
    module that defines them.

    Raises:
        BeanwireTypeResolutionError: If a package or one of its modules cannot be imported.
        BeanwireDuplicateNameError: If two components share a name.

    """
    registry = registry if registry is not None else Registry()
    seen: set[int] = set()
    for package in packages:
        for module in _walk(package):
            for _, member in inspect.getmembers(module):
                marker = marker_of(member)
                if marker is None or id(member) in seen:
                    continue
                if getattr(member, "__module__", None) != module.__name__:
                    continue
                seen.add(id(member))
                registry.add(marker.descriptor_for(member))
    return registry


def _walk(package: str | ModuleType) -> list[ModuleType]:
    root = _import(package) if isinstance(package, str) else package
    modules = [root]
    search_path = getattr(root, "__path__", None)
    if search_path is None:
        return modules
    for info in pkgutil.walk_packages(search_path, prefix=f"{root.__name__}."):
        modules.append(_import(info.name))
    return modules


def _import(module_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        raise BeanwireTypeResolutionError(module_name, f"cannot import module ({exc})") from exc


__all__ = [
    "COMPONENT_MARKER",
    "ComponentMarker",
    "component",
    "default_component_name",
    "marker_of",
    "scan",
]
