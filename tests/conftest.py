"""Shared pytest fixtures for beanwire tests."""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest

from beanwire.descriptors import ComponentDescriptor
from beanwire.registry import Registry
from beanwire.settings import BeanwireSettings
from beanwire.type_resolution import TypeResolver


@pytest.fixture(autouse=True)
def _clean_beanwire_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer BEANWIRE_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("BEANWIRE_"):
            monkeypatch.delenv(key)


@pytest.fixture()
def settings() -> BeanwireSettings:
    """Settings that do not require any component name."""
    return BeanwireSettings(required_components=())


@pytest.fixture()
def type_resolver() -> TypeResolver:
    return TypeResolver()


@pytest.fixture()
def make_registry() -> Callable[..., Registry]:
    """Build a registry from descriptors."""

    def factory(*descriptors: ComponentDescriptor) -> Registry:
        return Registry(list(descriptors))

    return factory
