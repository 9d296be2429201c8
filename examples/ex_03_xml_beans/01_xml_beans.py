"""Spring-style bean markup.

Beans declare their collaborators explicitly: ``constructor-arg`` for
constructor injection, ``property`` for setter injection. Nested beans are
registered under generated names.
"""

from __future__ import annotations

from beanwire import Container, XmlConfigLoader

BEANS = """
<beans xmlns="http://www.springframework.org/schema/beans">
  <bean id="dao" class="beanwire.demo.dao.DaoImpl"/>
  <bean id="metier" class="beanwire.demo.metier.MetierImpl">
    <constructor-arg ref="dao"/>
  </bean>
  <bean id="metierV2" class="beanwire.demo.metier.MetierSetterImpl" scope="prototype">
    <property name="dao">
      <bean class="beanwire.demo.dao.DaoImplV2"/>
    </property>
  </bean>
</beans>
"""


def main() -> None:
    container = Container(lambda: XmlConfigLoader().load(BEANS))

    print(f"compute={container.get('metier').compute()}")  # => compute=42
    print(f"compute_v2={container.get('metierV2').compute()}")  # => compute_v2=100
    print(f"components={container.registry.names()}")  # => components=['dao', 'metier', 'metierV2#0', 'metierV2']

    fresh = container.get("metierV2") is not container.get("metierV2")
    print(f"prototype_is_fresh={fresh}")  # => prototype_is_fresh=True


if __name__ == "__main__":
    main()
