"""Configuration errors surface on the first ``get``.

Every failure derives from ``BeanwireError`` and is raised to the caller;
nothing is retried or silently replaced.
"""

from __future__ import annotations

from beanwire import (
    BeanwireCyclicDependencyError,
    BeanwireMissingKeyError,
    BeanwireTypeResolutionError,
    Container,
    YamlConfigLoader,
)

UNKNOWN_TYPE = """
classes:
  dao: com.example.DoesNotExist
  metier: beanwire.demo.metier.MetierImpl
"""

CYCLE = """
components:
  metier: {class: beanwire.demo.metier.MetierImpl, dependencies: [dao]}
  dao: {class: beanwire.demo.dao.DaoImpl, dependencies: [metier]}
"""

MISSING = """
classes:
  dao: beanwire.demo.dao.DaoImpl
"""


def main() -> None:
    loader = YamlConfigLoader(required=("dao", "metier"))

    try:
        Container(lambda: loader.load(UNKNOWN_TYPE)).get("metier")
    except BeanwireTypeResolutionError as error:
        print(f"type_error={error.type_identifier}")  # => type_error=com.example.DoesNotExist

    try:
        Container(lambda: loader.load(CYCLE)).get("metier")
    except BeanwireCyclicDependencyError as error:
        print(f"cycle={' -> '.join(error.path)}")  # => cycle=metier -> dao -> metier

    try:
        Container(lambda: loader.load(MISSING)).get("metier")
    except BeanwireMissingKeyError as error:
        print(f"missing={error.missing}")  # => missing=['metier']


if __name__ == "__main__":
    main()
