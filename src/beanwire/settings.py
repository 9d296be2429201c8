from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from beanwire.descriptors import Autowire, Injection, Lifetime


class BeanwireSettings(BaseSettings):
    """Container defaults, overridable through ``BEANWIRE_*`` environment variables.

    ``BEANWIRE_REQUIRED_COMPONENTS`` is parsed as JSON, for example
    ``'["dao", "metier"]'``.
    """

    model_config = SettingsConfigDict(env_prefix="BEANWIRE_", frozen=True)

    config_path: Path | None = None
    """Configuration file used when a container is created without a source."""

    required_components: tuple[str, ...] = ("dao", "metier")
    """Names every loaded configuration must declare."""

    default_lifetime: Lifetime = Lifetime.SINGLETON
    default_injection: Injection = Injection.CONSTRUCTOR
    default_autowire: Autowire = Autowire.BY_NAME

    validate_on_load: bool = Field(default=True)
    """Check references and cycles of explicit dependencies right after loading."""


__all__ = ["BeanwireSettings"]
