"""Annotation-driven wiring.

Components are marked with ``@component`` and discovered by ``scan``. The
business component declares what it needs through a type annotation and is
wired by type.
"""

from __future__ import annotations

import sys

from beanwire import Container, component, scan
from beanwire.demo import IDao, IMetier


@component("dao")
class DatabaseDao(IDao):
    def value(self) -> int:
        return 21


@component("metier")
class DoublingMetier(IMetier):
    def __init__(self, source: IDao) -> None:
        self.source = source

    def compute(self) -> int:
        return self.source.value() * 2


def main() -> None:
    registry = scan(sys.modules[__name__])
    print(f"found={sorted(registry.names())}")  # => found=['dao', 'metier']

    container = Container.from_registry(registry)
    metier = container.get("metier", IMetier)
    print(f"compute={metier.compute()}")  # => compute=42
    print(f"source={type(metier.source).__name__}")  # => source=DatabaseDao


if __name__ == "__main__":
    main()
