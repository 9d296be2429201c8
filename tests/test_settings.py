"""Tests for environment-driven container settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from beanwire.descriptors import Autowire, Injection, Lifetime
from beanwire.settings import BeanwireSettings


def test_defaults() -> None:
    settings = BeanwireSettings()

    assert settings.config_path is None
    assert settings.required_components == ("dao", "metier")
    assert settings.default_lifetime is Lifetime.SINGLETON
    assert settings.default_injection is Injection.CONSTRUCTOR
    assert settings.default_autowire is Autowire.BY_NAME
    assert settings.validate_on_load is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BEANWIRE_CONFIG_PATH", "/etc/beans.xml")
    monkeypatch.setenv("BEANWIRE_REQUIRED_COMPONENTS", '["service"]')
    monkeypatch.setenv("BEANWIRE_DEFAULT_LIFETIME", "transient")
    monkeypatch.setenv("BEANWIRE_DEFAULT_INJECTION", "setter")
    monkeypatch.setenv("BEANWIRE_DEFAULT_AUTOWIRE", "by_type")
    monkeypatch.setenv("BEANWIRE_VALIDATE_ON_LOAD", "false")

    settings = BeanwireSettings()

    assert settings.config_path == Path("/etc/beans.xml")
    assert settings.required_components == ("service",)
    assert settings.default_lifetime is Lifetime.TRANSIENT
    assert settings.default_injection is Injection.SETTER
    assert settings.default_autowire is Autowire.BY_TYPE
    assert settings.validate_on_load is False
