from __future__ import annotations

import inspect
import logging
import threading
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeGuard, get_type_hints

from beanwire.descriptors import Autowire, ComponentDescriptor, Dependency, Injection, Lifetime
from beanwire.exceptions import (
    BeanwireAmbiguousDependencyError,
    BeanwireCyclicDependencyError,
    BeanwireInstantiationError,
    BeanwireTypeResolutionError,
    BeanwireUnknownComponentError,
)
from beanwire.registry import Registry
from beanwire.type_resolution import TypeResolver

logger = logging.getLogger(__name__)

SETTER_PREFIX = "set_"


@dataclass(frozen=True, slots=True)
class InjectionPoint:
    """A constructor parameter or setter method that can receive a component."""

    argument: str
    annotation: Any
    required: bool


class Resolver:
    """Build components from registry descriptors.

    Dependencies are resolved depth-first. The names currently being built
    form the visiting path; meeting one of them again means the graph has a
    cycle. Singleton instances are cached per name.
    """

    def __init__(self, registry: Registry, type_resolver: TypeResolver | None = None) -> None:
        self._registry = registry
        self._type_resolver = type_resolver or TypeResolver()
        self._instances: dict[str, Any] = {}
        self._plans: dict[str, tuple[Dependency, ...]] = {}
        # Reentrant: resolution recurses into dependencies while holding it.
        self._lock = threading.RLock()

    @property
    def registry(self) -> Registry:
        return self._registry

    def resolve(self, name: str) -> Any:
        """Return the fully wired instance registered under ``name``.

        Raises:
            BeanwireUnknownComponentError: If ``name`` or one of its dependencies
                is not registered.
            BeanwireTypeResolutionError: If a type identifier cannot be resolved.
            BeanwireCyclicDependencyError: If the dependency graph has a cycle.
            BeanwireInstantiationError: If construction or wiring fails structurally.

        """
        if name in self._instances:
            return self._instances[name]
        with self._lock:
            return self._resolve(name, [], referrer=None)

    def resolve_type(self, name: str) -> Callable[..., Any]:
        """Return the class or factory behind ``name`` without building it."""
        descriptor = self._registry.lookup(name)
        return self._target_of(descriptor)

    def is_cached(self, name: str) -> bool:
        return name in self._instances

    def plan(self, name: str) -> tuple[Dependency, ...]:
        """Return the dependencies ``name`` will be built with, autowired ones included."""
        with self._lock:
            descriptor = self._registry.lookup(name)
            return self._plan(descriptor, self._target_of(descriptor))

    def _resolve(self, name: str, path: list[str], *, referrer: str | None) -> Any:
        if name in path:
            raise BeanwireCyclicDependencyError(name, [*path[path.index(name) :], name])
        if name in self._instances:
            return self._instances[name]

        try:
            descriptor = self._registry.lookup(name)
        except BeanwireUnknownComponentError:
            if referrer is None:
                raise
            raise BeanwireUnknownComponentError(name, referrer=referrer) from None

        target = self._target_of(descriptor)
        dependencies = self._plan(descriptor, target)

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        setters: list[tuple[str, Any]] = []
        path.append(name)
        try:
            for dependency in dependencies:
                value = self._resolve(dependency.ref, path, referrer=name)
                if dependency.injection is Injection.SETTER:
                    setters.append((dependency.argument or dependency.ref, value))
                elif dependency.argument is None:
                    args.append(value)
                else:
                    kwargs[dependency.argument] = value
        finally:
            path.pop()

        instance = self._construct(descriptor, target, args, kwargs)
        for argument, value in setters:
            self._inject_setter(descriptor, instance, argument, value)

        if descriptor.lifetime is Lifetime.SINGLETON:
            self._instances[name] = instance
        logger.debug(
            "Built component %r from %s with dependencies %s",
            name,
            descriptor.type_identifier,
            [dependency.ref for dependency in dependencies],
        )
        return instance

    def _target_of(self, descriptor: ComponentDescriptor) -> Callable[..., Any]:
        if descriptor.target is not None and callable(descriptor.target):
            return descriptor.target
        return self._type_resolver.resolve(descriptor.type_identifier, name=descriptor.name)

    def _plan(
        self,
        descriptor: ComponentDescriptor,
        target: Callable[..., Any],
    ) -> tuple[Dependency, ...]:
        if descriptor.dependencies or descriptor.autowire is Autowire.NO:
            return descriptor.dependencies

        cached = self._plans.get(descriptor.name)
        if cached is not None:
            return cached

        injection = descriptor.default_injection
        dependencies: list[Dependency] = []
        for point in injection_points(target, injection):
            ref = self._match(descriptor, point)
            if ref is None:
                if point.required:
                    raise BeanwireInstantiationError(
                        descriptor.name,
                        f"no component can be autowired into {point.argument!r}",
                    )
                continue
            dependencies.append(Dependency(ref=ref, argument=point.argument, injection=injection))

        plan = tuple(dependencies)
        self._plans[descriptor.name] = plan
        return plan

    def _match(self, descriptor: ComponentDescriptor, point: InjectionPoint) -> str | None:
        by_type = descriptor.autowire is Autowire.BY_TYPE and is_runtime_class(point.annotation)
        if not by_type:
            if point.argument != descriptor.name and point.argument in self._registry:
                return point.argument
            return None

        candidates = [
            other.name
            for other in self._registry
            if other.name != descriptor.name
            and _is_subclass(self._provided_type(other), point.annotation)
        ]
        if len(candidates) == 1:
            return candidates[0]
        if not candidates:
            return None
        if point.argument in candidates:
            return point.argument
        raise BeanwireAmbiguousDependencyError(descriptor.name, point.argument, candidates)

    def _provided_type(self, descriptor: ComponentDescriptor) -> type[Any] | None:
        # An unresolvable candidate is skipped; its error surfaces when it is resolved itself.
        try:
            target = self._target_of(descriptor)
        except BeanwireTypeResolutionError:
            return None
        if is_runtime_class(target):
            return target
        hints = _type_hints(target)
        provided = hints.get("return")
        return provided if is_runtime_class(provided) else None

    def _construct(
        self,
        descriptor: ComponentDescriptor,
        target: Callable[..., Any],
        args: list[Any],
        kwargs: dict[str, Any],
    ) -> Any:
        if inspect.isclass(target) and inspect.isabstract(target):
            abstract = ", ".join(sorted(getattr(target, "__abstractmethods__", ())))
            raise BeanwireInstantiationError(
                descriptor.name,
                f"{target.__qualname__} is abstract (unimplemented: {abstract})",
            )
        try:
            signature = inspect.signature(target)
        except (TypeError, ValueError):
            signature = None
        if signature is not None:
            try:
                signature.bind(*args, **kwargs)
            except TypeError as exc:
                raise BeanwireInstantiationError(
                    descriptor.name,
                    f"{_display_name(target)}{signature} does not accept the declared "
                    f"dependencies ({exc})",
                ) from exc
        return target(*args, **kwargs)

    def _inject_setter(
        self,
        descriptor: ComponentDescriptor,
        instance: Any,
        argument: str,
        value: Any,
    ) -> None:
        setter = getattr(instance, f"{SETTER_PREFIX}{argument}", None)
        if callable(setter):
            setter(value)
            return
        try:
            setattr(instance, argument, value)
        except (AttributeError, TypeError) as exc:
            raise BeanwireInstantiationError(
                descriptor.name,
                f"cannot inject {argument!r} into {type(instance).__qualname__} ({exc})",
            ) from exc


def injection_points(target: Callable[..., Any], injection: Injection) -> list[InjectionPoint]:
    """List the places of ``target`` that autowiring may fill."""
    if injection is Injection.SETTER:
        return _setter_points(target) if is_runtime_class(target) else []

    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        return []
    hints = _type_hints(target.__init__ if is_runtime_class(target) else target)

    points = []
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        points.append(
            InjectionPoint(
                argument=parameter.name,
                annotation=hints.get(parameter.name, parameter.annotation),
                required=parameter.default is parameter.empty,
            ),
        )
    return points


def _setter_points(cls: type[Any]) -> list[InjectionPoint]:
    points = []
    for attribute, member in inspect.getmembers(cls, inspect.isfunction):
        if not attribute.startswith(SETTER_PREFIX) or attribute == SETTER_PREFIX:
            continue
        parameters = list(inspect.signature(member).parameters.values())[1:]
        if len(parameters) != 1:
            continue
        hints = _type_hints(member)
        points.append(
            InjectionPoint(
                argument=attribute[len(SETTER_PREFIX) :],
                annotation=hints.get(parameters[0].name, parameters[0].annotation),
                required=False,
            ),
        )
    return points


def _type_hints(target: Any) -> dict[str, Any]:
    try:
        return get_type_hints(target)
    except (TypeError, NameError):
        return {}


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a plain class, not a parametrized generic."""
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def _is_subclass(candidate: type[Any] | None, base: type[Any]) -> bool:
    if candidate is None:
        return False
    try:
        return issubclass(candidate, base)
    except TypeError:
        return False


def _display_name(target: Callable[..., Any]) -> str:
    return getattr(target, "__qualname__", repr(target))


__all__ = ["InjectionPoint", "Resolver", "injection_points", "is_runtime_class"]
