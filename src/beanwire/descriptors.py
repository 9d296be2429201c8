from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Lifetime(str, Enum):
    """Defines how long a resolved component lives."""

    SINGLETON = "singleton"
    """One instance per component name, shared for the lifetime of the resolver."""

    TRANSIENT = "transient"
    """A new instance is created every time the component is resolved."""


class Injection(str, Enum):
    """Selects how a dependency is handed to its owner."""

    CONSTRUCTOR = "constructor"
    """Pass the dependency as a constructor argument."""

    SETTER = "setter"
    """Call ``set_<argument>(value)`` after construction, or assign the attribute."""


class Autowire(str, Enum):
    """Selects how dependencies are inferred when none are declared."""

    NO = "no"
    """Construct with no arguments."""

    BY_NAME = "by_name"
    """Match injection point names against registered component names."""

    BY_TYPE = "by_type"
    """Match injection point annotations against registered component types."""


@dataclass(frozen=True, slots=True)
class Dependency:
    """A reference from one component to another.

    ``argument`` is the constructor keyword or setter attribute receiving the
    value; ``None`` means a positional constructor argument.
    """

    ref: str
    argument: str | None = None
    injection: Injection = Injection.CONSTRUCTOR

    def __post_init__(self) -> None:
        if self.injection is Injection.SETTER and self.argument is None:
            object.__setattr__(self, "argument", self.ref)


@dataclass(frozen=True, slots=True)
class ComponentDescriptor:
    """Recipe for building one named component.

    The type identifier is resolved lazily, so a descriptor can be declared
    before the module it points at is importable.
    """

    name: str
    type_identifier: str
    dependencies: tuple[Dependency, ...] = ()
    lifetime: Lifetime = Lifetime.SINGLETON
    autowire: Autowire = Autowire.BY_NAME
    default_injection: Injection = Injection.CONSTRUCTOR
    # Set for components registered from Python objects rather than strings.
    target: object | None = field(default=None, compare=False, repr=False)

    @property
    def dependency_names(self) -> tuple[str, ...]:
        """Return referenced component names in declaration order."""
        return tuple(dependency.ref for dependency in self.dependencies)
