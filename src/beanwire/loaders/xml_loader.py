from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

from beanwire.descriptors import Autowire, ComponentDescriptor, Dependency, Injection, Lifetime
from beanwire.exceptions import BeanwireParseError
from beanwire.loaders.base import ConfigLoader, parse_enum

INNER_BEAN_SEPARATOR = "#"


def _local(tag: str) -> str:
    # Spring files declare the beans namespace; element names are matched without it.
    return tag.rpartition("}")[2]


@dataclass
class _BeanState:
    name: str
    origin: str | None
    inner_count: int = 0
    inner: list[ComponentDescriptor] = field(default_factory=list)


class XmlConfigLoader(ConfigLoader):
    """Load components from Spring-style bean markup.

    Supported elements::

        <beans>
          <bean id="dao" class="myapp.dao.DaoImpl"/>
          <bean id="metier" class="myapp.metier.MetierImpl" scope="singleton">
            <constructor-arg ref="dao"/>
          </bean>
          <bean id="other" class="myapp.metier.MetierImpl">
            <property name="dao"><bean class="myapp.dao.DaoImpl"/></property>
          </bean>
        </beans>

    ``constructor-arg`` without ``name`` is positional (ordered by ``index``
    when given). Nested beans are registered as ``<outer>#<n>``.
    """

    format_name = "xml"

    def parse(self, text: str, *, origin: str | None = None) -> Iterator[ComponentDescriptor]:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            line, _column = exc.position
            raise BeanwireParseError(str(exc), source=origin, line=line) from exc

        if _local(root.tag) != "beans":
            raise BeanwireParseError(
                f"root element must be <beans>, got <{_local(root.tag)}>",
                source=origin,
            )

        for element in root:
            if _local(element.tag) == "description":
                continue
            if _local(element.tag) != "bean":
                raise BeanwireParseError(f"unexpected element <{_local(element.tag)}>", source=origin)
            name = element.get("id") or element.get("name")
            if not name:
                raise BeanwireParseError("top-level <bean> needs an 'id'", source=origin)
            yield from self._bean(element, name, origin)

    def _bean(self, element: ET.Element, name: str, origin: str | None) -> Iterator[ComponentDescriptor]:
        identifier = (element.get("class") or "").strip()
        if not identifier:
            raise BeanwireParseError(f"<bean id={name!r}> needs a 'class'", source=origin)

        state = _BeanState(name=name, origin=origin)
        indexed: dict[int, Dependency] = {}
        unindexed: list[Dependency] = []
        named: list[Dependency] = []
        for child in element:
            tag = _local(child.tag)
            if tag == "constructor-arg":
                ref = self._reference(child, state)
                argument = child.get("name")
                index = self._index(child, state)
                if argument:
                    named.append(Dependency(ref=ref, argument=argument))
                elif index is None:
                    unindexed.append(Dependency(ref=ref))
                elif index in indexed:
                    raise BeanwireParseError(
                        f"constructor-arg index {index} of {name!r} is declared twice",
                        source=origin,
                    )
                else:
                    indexed[index] = Dependency(ref=ref)
            elif tag == "property":
                argument = child.get("name")
                if not argument:
                    raise BeanwireParseError(f"<property> of {name!r} needs a 'name'", source=origin)
                named.append(Dependency(ref=self._reference(child, state), argument=argument, injection=Injection.SETTER))
            elif tag != "description":
                raise BeanwireParseError(f"unexpected element <{tag}> in bean {name!r}", source=origin)

        dependencies = tuple(self._positional(indexed, unindexed, state)) + tuple(named)
        has_setters = any(dependency.injection is Injection.SETTER for dependency in dependencies)

        yield from state.inner
        yield ComponentDescriptor(
            name=name,
            type_identifier=identifier,
            dependencies=dependencies,
            lifetime=parse_enum(Lifetime, element.get("scope", self.lifetime), field="scope", origin=origin),
            autowire=self._autowire(element, origin),
            default_injection=Injection.SETTER if has_setters else self.injection,
        )

    def _autowire(self, element: ET.Element, origin: str | None) -> Autowire:
        value = element.get("autowire")
        if value is None or value == "default":
            return self.autowire
        return parse_enum(Autowire, value, field="autowire", origin=origin)

    def _index(self, element: ET.Element, state: _BeanState) -> int | None:
        index = element.get("index")
        if index is None:
            return None
        try:
            value = int(index)
        except ValueError:
            raise BeanwireParseError(
                f"constructor-arg index {index!r} of {state.name!r} is not an integer",
                source=state.origin,
            ) from None
        if value < 0:
            raise BeanwireParseError(
                f"constructor-arg index {value} of {state.name!r} is negative",
                source=state.origin,
            )
        return value

    def _positional(
        self,
        indexed: dict[int, Dependency],
        unindexed: list[Dependency],
        state: _BeanState,
    ) -> list[Dependency]:
        # Explicit indexes keep their slot; the others fill the free slots in document order.
        count = len(indexed) + len(unindexed)
        out_of_range = sorted(index for index in indexed if index >= count)
        if out_of_range:
            raise BeanwireParseError(
                f"constructor-arg index {out_of_range[0]} of {state.name!r} leaves a gap "
                f"({count} positional argument(s) declared)",
                source=state.origin,
            )
        remaining = iter(unindexed)
        return [indexed[slot] if slot in indexed else next(remaining) for slot in range(count)]

    def _reference(self, element: ET.Element, state: _BeanState) -> str:
        ref = element.get("ref")
        if ref:
            return ref
        if element.get("value") is not None:
            raise BeanwireParseError(
                f"literal values are not supported (bean {state.name!r}); declare a component instead",
                source=state.origin,
            )

        children = list(element)
        if len(children) != 1:
            raise BeanwireParseError(
                f"<{_local(element.tag)}> of {state.name!r} needs a 'ref' or one nested element",
                source=state.origin,
            )
        nested = children[0]
        tag = _local(nested.tag)
        if tag == "ref":
            bean = nested.get("bean")
            if not bean:
                raise BeanwireParseError(f"<ref> in {state.name!r} needs a 'bean'", source=state.origin)
            return bean
        if tag == "bean":
            inner_name = nested.get("id") or f"{state.name}{INNER_BEAN_SEPARATOR}{state.inner_count}"
            state.inner_count += 1
            state.inner.extend(self._bean(nested, inner_name, state.origin))
            return inner_name
        raise BeanwireParseError(f"unexpected element <{tag}> in {state.name!r}", source=state.origin)


__all__ = ["XmlConfigLoader"]
