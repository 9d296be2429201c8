"""Tests for the bundled two-layer demo graph."""

from __future__ import annotations

import pytest

from beanwire.container import Container
from beanwire.demo import DaoImpl, DaoImplV2, IMetier, MetierImpl, MetierSetterImpl
from beanwire.demo.manual import wire_manually
from beanwire.descriptors import ComponentDescriptor, Dependency, Injection
from beanwire.registry import Registry


def test_manual_wiring() -> None:
    metier = wire_manually()

    assert isinstance(metier, MetierSetterImpl)
    assert metier.compute() == 42


def test_implementations_are_interchangeable() -> None:
    assert MetierImpl(DaoImpl()).compute() == 42
    assert MetierImpl(DaoImplV2()).compute() == 100


def test_setter_metier_without_dao_fails() -> None:
    with pytest.raises(RuntimeError, match="not injected"):
        MetierSetterImpl().compute()


def test_setter_variant_through_container() -> None:
    registry = Registry(
        [
            ComponentDescriptor(name="dao", type_identifier="beanwire.demo.dao.DaoImplV2"),
            ComponentDescriptor(
                name="metier",
                type_identifier="beanwire.demo.metier.MetierSetterImpl",
                dependencies=(Dependency(ref="dao", injection=Injection.SETTER),),
            ),
        ],
    )

    metier = Container.from_registry(registry).get("metier", IMetier)

    assert metier.compute() == 100
