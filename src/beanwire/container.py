from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any, TypeVar, overload

from typing_extensions import Self

from beanwire.exceptions import BeanwireInstantiationError, BeanwireParseError
from beanwire.loaders import load_config, loader_for
from beanwire.registry import Registry
from beanwire.resolver import Resolver
from beanwire.scanning import scan
from beanwire.settings import BeanwireSettings
from beanwire.type_resolution import TypeResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")

RegistrySource = Callable[[], Registry]
"""Zero-argument callable producing the registry, called once per container."""


class ContainerState(str, Enum):
    """Lifecycle of a ``Container``; ``INITIALIZED`` is terminal."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class Container:
    """Facade handing out wired components by name.

    The registry source runs on the first ``get`` (or an explicit
    ``initialize``) and never again. When it fails, the error reaches that
    caller and the container stays uninitialized; nothing is retried on its
    own.

    Example:
        container = Container.from_config("beans.yaml")
        metier = container.get("metier", IMetier)
        print(metier.compute())

    """

    __slots__ = ("_lock", "_resolver", "_settings", "_source", "_type_resolver")

    def __init__(
        self,
        source: RegistrySource | None = None,
        *,
        settings: BeanwireSettings | None = None,
        type_resolver: TypeResolver | None = None,
    ) -> None:
        """Create an uninitialized container.

        Args:
            source: Callable producing the registry. When omitted, the file named
                by ``settings.config_path`` is loaded.
            settings: Container defaults; read from the environment when omitted.
            type_resolver: Resolver for type identifiers, shared by every lookup.

        """
        self._source = source
        self._settings = settings or BeanwireSettings()
        self._type_resolver = type_resolver or TypeResolver()
        self._resolver: Resolver | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        path: str | Path,
        *,
        settings: BeanwireSettings | None = None,
        type_resolver: TypeResolver | None = None,
    ) -> Self:
        """Create a container reading ``path`` with the loader matching its suffix."""
        settings = settings or BeanwireSettings()
        return cls(
            lambda: loader_for(path, settings).load(Path(path)),
            settings=settings,
            type_resolver=type_resolver,
        )

    @classmethod
    def from_registry(
        cls,
        registry: Registry,
        *,
        settings: BeanwireSettings | None = None,
        type_resolver: TypeResolver | None = None,
    ) -> Self:
        return cls(lambda: registry, settings=settings, type_resolver=type_resolver)

    @classmethod
    def from_package(
        cls,
        *packages: str | ModuleType,
        settings: BeanwireSettings | None = None,
        type_resolver: TypeResolver | None = None,
    ) -> Self:
        """Create a container from the ``@component`` classes found in ``packages``."""
        return cls(lambda: scan(*packages), settings=settings, type_resolver=type_resolver)

    @property
    def state(self) -> ContainerState:
        if self._resolver is None:
            return ContainerState.UNINITIALIZED
        return ContainerState.INITIALIZED

    @property
    def is_initialized(self) -> bool:
        return self._resolver is not None

    @property
    def settings(self) -> BeanwireSettings:
        return self._settings

    @property
    def type_resolver(self) -> TypeResolver:
        return self._type_resolver

    @property
    def registry(self) -> Registry:
        return self.initialize().registry

    def initialize(self) -> Resolver:
        """Load the registry if that has not happened yet and return the resolver."""
        resolver = self._resolver
        if resolver is not None:
            return resolver

        with self._lock:
            if self._resolver is None:
                registry = self._load()
                if self._settings.validate_on_load:
                    registry.validate()
                registry.freeze()
                self._resolver = Resolver(registry, self._type_resolver)
                logger.info("Container initialized with components %s", registry.names())
            return self._resolver

    @overload
    def get(self, name: str) -> Any: ...

    @overload
    def get(self, name: str, kind: type[T]) -> T: ...

    def get(self, name: str, kind: type[T] | None = None) -> Any:
        """Return the component registered under ``name``.

        Args:
            name: Logical component name.
            kind: Optional type the component must be an instance of.

        Raises:
            BeanwireError: Any loading or resolution failure, unchanged.
            BeanwireInstantiationError: If ``kind`` is given and the component is
                not an instance of it.

        """
        instance = self.initialize().resolve(name)
        if kind is not None and not isinstance(instance, kind):
            raise BeanwireInstantiationError(
                name,
                f"expected an instance of {kind.__qualname__}, got {type(instance).__qualname__}",
            )
        return instance

    def _load(self) -> Registry:
        if self._source is not None:
            return self._source()
        path = self._settings.config_path
        if path is None:
            raise BeanwireParseError("no configuration source given and BEANWIRE_CONFIG_PATH is not set")
        return load_config(path, self._settings)

    def __repr__(self) -> str:
        return f"Container(state={self.state.value})"


__all__ = ["Container", "ContainerState", "RegistrySource"]
