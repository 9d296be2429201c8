from __future__ import annotations

from collections.abc import Sequence


class BeanwireError(Exception):
    """Represent a base class for all beanwire-specific failures.

    Catch this type when you want to handle any beanwire error path without
    matching each concrete exception class individually.
    """


class BeanwireParseError(BeanwireError):
    """Signal a malformed declarative configuration source.

    Raised by the YAML, XML and properties loaders when the text cannot be
    parsed or when an entry has the wrong shape (for example a component
    declared without a class).

    Typical fixes include correcting the syntax at the reported line or using
    a file suffix that matches the content.
    """

    def __init__(self, message: str, *, source: str | None = None, line: int | None = None) -> None:
        self.source = source
        self.line = line
        location = ""
        if source is not None:
            location = f" in {source}"
        if line is not None:
            location += f" at line {line}"
        super().__init__(f"Invalid configuration{location}: {message}")


class BeanwireMissingKeyError(BeanwireError):
    """Signal that a required component name is absent from a configuration.

    Typical fix is declaring every required name (``dao`` and ``metier`` by
    default) or changing ``required_components`` in the settings.
    """

    def __init__(self, missing: Sequence[str], *, source: str | None = None) -> None:
        self.missing = list(missing)
        self.source = source
        where = f" in {source}" if source is not None else ""
        names = ", ".join(repr(name) for name in self.missing)
        super().__init__(f"Required component(s) {names} not declared{where}")


class BeanwireUnknownComponentError(BeanwireError):
    """Signal a lookup of a name that has no descriptor.

    Raised by ``Registry.lookup`` and therefore by ``Container.get``. When the
    name was referenced by another component, ``referrer`` holds that
    component's name.
    """

    def __init__(self, name: str, *, referrer: str | None = None) -> None:
        self.name = name
        self.referrer = referrer
        message = f"Component {name!r} is not registered"
        if referrer is not None:
            message += f" (referenced by {referrer!r})"
        super().__init__(message)


class BeanwireTypeResolutionError(BeanwireError):
    """Signal that a type identifier cannot be turned into a constructible type.

    Raised when the module cannot be imported, the attribute does not exist,
    or the object found is not callable.

    Typical fixes include checking the dotted path (``package.module.Class``
    or ``package.module:Class``) and that the module is importable.
    """

    def __init__(self, type_identifier: str, reason: str, *, name: str | None = None) -> None:
        self.type_identifier = type_identifier
        self.reason = reason
        self.name = name
        owner = f" for component {name!r}" if name is not None else ""
        super().__init__(f"Cannot resolve type {type_identifier!r}{owner}: {reason}")


class BeanwireCyclicDependencyError(BeanwireError):
    """Signal a cycle in the dependency graph.

    ``path`` lists the names from the first visit of the repeated component
    to its second visit, so ``path[0] == path[-1]``.
    """

    def __init__(self, name: str, path: Sequence[str]) -> None:
        self.name = name
        self.path = list(path)
        chain = " -> ".join(self.path)
        super().__init__(f"Circular dependency detected for {name!r}: {chain}")


class BeanwireInstantiationError(BeanwireError):
    """Signal that a resolved type could not be constructed or wired.

    Raised for structural problems: abstract classes, constructor signatures
    that do not accept the declared dependencies, setter targets that cannot
    be assigned, or an instance that is not of the type requested by a typed
    ``Container.get``. Exceptions raised by the constructor body itself are
    not wrapped.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot instantiate component {name!r}: {reason}")


class BeanwireAmbiguousDependencyError(BeanwireInstantiationError):
    """Signal that autowiring by type found several candidates.

    Typical fix is declaring the dependency explicitly or switching the
    component to ``Autowire.BY_NAME``.
    """

    def __init__(self, name: str, argument: str, candidates: Sequence[str]) -> None:
        self.argument = argument
        self.candidates = list(candidates)
        listed = ", ".join(repr(candidate) for candidate in self.candidates)
        super().__init__(name, f"argument {argument!r} matches several components: {listed}")


class BeanwireDuplicateNameError(BeanwireError):
    """Signal that a name is registered twice in the same registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component {name!r} is already registered")


class BeanwireRegistryFrozenError(BeanwireError):
    """Signal a registration attempt after the registry was frozen.

    Registries are frozen when a container finishes initialization; build a
    new registry instead of mutating a live one.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot register {name!r}: registry is frozen")
