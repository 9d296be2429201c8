from __future__ import annotations

from pathlib import Path

from beanwire.exceptions import BeanwireParseError
from beanwire.loaders.base import ConfigLoader
from beanwire.loaders.properties_loader import PropertiesConfigLoader
from beanwire.loaders.xml_loader import XmlConfigLoader
from beanwire.loaders.yaml_loader import YamlConfigLoader
from beanwire.registry import Registry
from beanwire.settings import BeanwireSettings

LOADERS_BY_SUFFIX: dict[str, type[ConfigLoader]] = {
    ".yaml": YamlConfigLoader,
    ".yml": YamlConfigLoader,
    ".xml": XmlConfigLoader,
    ".properties": PropertiesConfigLoader,
    ".txt": PropertiesConfigLoader,
}


def loader_for(path: str | Path, settings: BeanwireSettings | None = None) -> ConfigLoader:
    """Return a loader configured from ``settings`` for the suffix of ``path``.

    Raises:
        BeanwireParseError: If the suffix is not a supported format.

    """
    suffix = Path(path).suffix.lower()
    loader_cls = LOADERS_BY_SUFFIX.get(suffix)
    if loader_cls is None:
        supported = ", ".join(sorted(LOADERS_BY_SUFFIX))
        raise BeanwireParseError(f"unsupported file type {suffix!r} (supported: {supported})", source=str(path))
    return loader_cls.from_settings(settings or BeanwireSettings())


def load_config(path: str | Path, settings: BeanwireSettings | None = None) -> Registry:
    """Read ``path`` with the loader matching its suffix."""
    return loader_for(path, settings).load(Path(path))


__all__ = [
    "LOADERS_BY_SUFFIX",
    "ConfigLoader",
    "PropertiesConfigLoader",
    "XmlConfigLoader",
    "YamlConfigLoader",
    "load_config",
    "loader_for",
]
