from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, TypeVar

from beanwire.descriptors import Autowire, ComponentDescriptor, Injection, Lifetime
from beanwire.exceptions import BeanwireMissingKeyError, BeanwireParseError
from beanwire.registry import Registry

if TYPE_CHECKING:
    from beanwire.settings import BeanwireSettings

E = TypeVar("E", bound=Enum)

# Spellings used by Spring bean definitions, accepted next to the enum values.
_ENUM_ALIASES: dict[type[Enum], dict[str, Enum]] = {
    Lifetime: {"prototype": Lifetime.TRANSIENT},
    Autowire: {
        "none": Autowire.NO,
        "byname": Autowire.BY_NAME,
        "bytype": Autowire.BY_TYPE,
    },
    Injection: {"property": Injection.SETTER},
}


class ConfigLoader(ABC):
    """Parse a declarative source into a populated ``Registry``.

    Loaders only declare components; nothing is imported or instantiated
    until a resolver asks for it.
    """

    format_name: ClassVar[str]

    def __init__(
        self,
        *,
        required: Sequence[str] = (),
        lifetime: Lifetime = Lifetime.SINGLETON,
        injection: Injection = Injection.CONSTRUCTOR,
        autowire: Autowire = Autowire.BY_NAME,
        validate: bool = True,
    ) -> None:
        self.required = tuple(required)
        self.lifetime = lifetime
        self.injection = injection
        self.autowire = autowire
        self.validate = validate

    @classmethod
    def from_settings(cls, settings: BeanwireSettings) -> ConfigLoader:
        return cls(
            required=settings.required_components,
            lifetime=settings.default_lifetime,
            injection=settings.default_injection,
            autowire=settings.default_autowire,
            validate=settings.validate_on_load,
        )

    def load(self, source: str | Path) -> Registry:
        """Parse ``source`` (text, or a path to read) into a registry.

        Raises:
            BeanwireParseError: If the source is malformed or unreadable.
            BeanwireMissingKeyError: If a required name is not declared.
            BeanwireDuplicateNameError: If a name is declared twice.

        """
        text, origin = read_source(source)
        registry = Registry()
        for descriptor in self.parse(text, origin=origin):
            registry.add(descriptor)

        missing = [name for name in self.required if name not in registry]
        if missing:
            raise BeanwireMissingKeyError(missing, source=origin)
        if self.validate:
            registry.validate()
        return registry

    @abstractmethod
    def parse(self, text: str, *, origin: str | None = None) -> Iterable[ComponentDescriptor]:
        """Yield descriptors declared by ``text``."""

    def __call__(self, source: str | Path) -> Registry:
        return self.load(source)


def read_source(source: str | Path) -> tuple[str, str | None]:
    if isinstance(source, Path):
        try:
            return source.read_text(encoding="utf-8"), str(source)
        except OSError as exc:
            raise BeanwireParseError(f"cannot read file ({exc.strerror})", source=str(source)) from exc
    return source, None


def parse_enum(
    enum_cls: type[E],
    value: object,
    *,
    field: str,
    origin: str | None,
    line: int | None = None,
) -> E:
    """Convert a textual option to ``enum_cls``, accepting Spring spellings."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise BeanwireParseError(f"{field!r} must be a string, got {value!r}", source=origin, line=line)
    key = value.strip().lower().replace("-", "_")
    alias = _ENUM_ALIASES.get(enum_cls, {}).get(key.replace("_", ""))
    if alias is not None:
        return alias  # type: ignore[return-value]
    try:
        return enum_cls(key)
    except ValueError:
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise BeanwireParseError(
            f"invalid {field} {value!r} (expected one of {choices})",
            source=origin,
            line=line,
        ) from None


__all__ = ["ConfigLoader", "parse_enum", "read_source"]
