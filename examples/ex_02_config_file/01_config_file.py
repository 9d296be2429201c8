"""Reflection-style wiring from a declarative file.

The configuration maps logical names to importable classes. Nothing is
imported until the first ``get``; the business component's ``dao`` parameter
is filled by name.
"""

from __future__ import annotations

from beanwire import Container, YamlConfigLoader
from beanwire.demo import IMetier

CONFIG = """
classes:
  dao: beanwire.demo.dao.DaoImpl
  metier: beanwire.demo.metier.MetierImpl
"""

SWAPPED = """
classes:
  dao: beanwire.demo.dao.DaoImplV2
  metier: beanwire.demo.metier.MetierImpl
"""


def main() -> None:
    loader = YamlConfigLoader(required=("dao", "metier"))

    container = Container(lambda: loader.load(CONFIG))
    print(f"state={container.state.value}")  # => state=uninitialized

    metier = container.get("metier", IMetier)
    print(f"compute={metier.compute()}")  # => compute=42
    print(f"state={container.state.value}")  # => state=initialized
    print(f"same_instance={container.get('metier') is metier}")  # => same_instance=True

    swapped = Container(lambda: loader.load(SWAPPED))
    print(f"compute_v2={swapped.get('metier').compute()}")  # => compute_v2=100


if __name__ == "__main__":
    main()
