"""Constructor versus setter injection.

Both strategies are configuration options. With setter injection the
component is built first and ``set_<name>`` is called afterwards.
"""

from __future__ import annotations

from beanwire import Container, Injection, YamlConfigLoader

CONFIG = """
components:
  dao: beanwire.demo.dao.DaoImpl
  byConstructor:
    class: beanwire.demo.metier.MetierImpl
    dependencies: [dao]
  bySetter:
    class: beanwire.demo.metier.MetierSetterImpl
    dependencies: [dao]
    injection: setter
"""

AUTOWIRED = """
classes:
  dao: beanwire.demo.dao.DaoImpl
  metier: beanwire.demo.metier.MetierSetterImpl
"""


def main() -> None:
    container = Container(lambda: YamlConfigLoader().load(CONFIG))
    print(f"constructor={container.get('byConstructor').compute()}")  # => constructor=42
    print(f"setter={container.get('bySetter').compute()}")  # => setter=42

    # Flat entries take the loader's default strategy; setters are autowired by name.
    loader = YamlConfigLoader(injection=Injection.SETTER)
    autowired = Container(lambda: loader.load(AUTOWIRED))
    print(f"autowired_setter={autowired.get('metier').compute()}")  # => autowired_setter=42


if __name__ == "__main__":
    main()
