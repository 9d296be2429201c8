"""Tests for the name -> descriptor registry."""

from __future__ import annotations

import pytest

from beanwire.descriptors import ComponentDescriptor, Dependency
from beanwire.exceptions import (
    BeanwireCyclicDependencyError,
    BeanwireDuplicateNameError,
    BeanwireRegistryFrozenError,
    BeanwireUnknownComponentError,
)
from beanwire.registry import Registry


def make(name: str, *refs: str) -> ComponentDescriptor:
    return ComponentDescriptor(
        name=name,
        type_identifier=f"pkg.{name}",
        dependencies=tuple(Dependency(ref=ref) for ref in refs),
    )


def test_register_and_lookup() -> None:
    registry = Registry()
    dao = make("dao")

    registry.register("dao", dao)

    assert registry.lookup("dao") is dao
    assert "dao" in registry
    assert len(registry) == 1
    assert registry.names() == ["dao"]


def test_register_under_other_name_renames_descriptor() -> None:
    registry = Registry()

    registry.register("alias", make("dao"))

    assert registry.lookup("alias").name == "alias"
    assert registry.lookup("alias").type_identifier == "pkg.dao"


def test_duplicate_name_raises() -> None:
    registry = Registry([make("dao")])

    with pytest.raises(BeanwireDuplicateNameError) as exc_info:
        registry.register("dao", make("dao"))

    assert exc_info.value.name == "dao"
    assert "already registered" in str(exc_info.value)


def test_lookup_unknown_raises() -> None:
    with pytest.raises(BeanwireUnknownComponentError) as exc_info:
        Registry().lookup("metier")

    assert exc_info.value.name == "metier"


def test_frozen_registry_rejects_registration() -> None:
    registry = Registry([make("dao")])
    registry.freeze()

    with pytest.raises(BeanwireRegistryFrozenError):
        registry.add(make("metier"))

    assert registry.frozen
    assert registry.names() == ["dao"]


def test_merge_adds_every_descriptor() -> None:
    registry = Registry([make("dao")])

    registry.merge(Registry([make("metier", "dao")]))

    assert registry.names() == ["dao", "metier"]


def test_merge_with_collision_raises() -> None:
    with pytest.raises(BeanwireDuplicateNameError):
        Registry([make("dao")]).merge(Registry([make("dao")]))


def test_iteration_order_follows_insertion() -> None:
    registry = Registry([make("metier", "dao"), make("dao")])

    assert [descriptor.name for descriptor in registry] == ["metier", "dao"]


class TestValidate:
    def test_valid_graph_passes(self) -> None:
        Registry([make("metier", "dao"), make("dao")]).validate()

    def test_dangling_reference(self) -> None:
        registry = Registry([make("metier", "dao")])

        with pytest.raises(BeanwireUnknownComponentError) as exc_info:
            registry.validate()

        assert exc_info.value.name == "dao"
        assert exc_info.value.referrer == "metier"

    def test_two_component_cycle(self) -> None:
        registry = Registry([make("metier", "dao"), make("dao", "metier")])

        with pytest.raises(BeanwireCyclicDependencyError) as exc_info:
            registry.validate()

        assert exc_info.value.path == ["metier", "dao", "metier"]

    def test_self_reference(self) -> None:
        with pytest.raises(BeanwireCyclicDependencyError) as exc_info:
            Registry([make("loop", "loop")]).validate()

        assert exc_info.value.path == ["loop", "loop"]

    def test_diamond_is_not_a_cycle(self) -> None:
        Registry(
            [
                make("top", "left", "right"),
                make("left", "base"),
                make("right", "base"),
                make("base"),
            ],
        ).validate()
