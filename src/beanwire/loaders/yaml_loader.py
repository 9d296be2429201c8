from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import Any

import yaml

from beanwire.descriptors import Autowire, ComponentDescriptor, Dependency, Injection, Lifetime
from beanwire.exceptions import BeanwireDuplicateNameError, BeanwireParseError
from beanwire.loaders.base import ConfigLoader, parse_enum

SECTIONS = ("classes", "components")
COMPONENT_KEYS = frozenset({"class", "dependencies", "injection", "lifetime", "autowire"})
MERGE_TAG = "tag:yaml.org,2002:merge"


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects repeated mapping keys instead of keeping the last one.

    A name repeated inside a section raises ``BeanwireDuplicateNameError``;
    any other repeated key is a parse error.
    """

    _root: yaml.Node | None = None

    def construct_document(self, node: yaml.Node) -> Any:
        self._root = node
        return super().construct_document(node)

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == MERGE_TAG:
                continue
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                if self._is_section(node):
                    raise BeanwireDuplicateNameError(str(key))
                raise yaml.constructor.ConstructorError(
                    None,
                    None,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)

    def _is_section(self, node: yaml.Node) -> bool:
        root = self._root
        if not isinstance(root, yaml.MappingNode):
            return False
        return any(value is node for _, value in root.value)


class YamlConfigLoader(ConfigLoader):
    """Load components from a YAML document.

    The flat form maps names straight to type identifiers::

        classes:
          dao: myapp.dao.DaoImpl
          metier: myapp.metier.MetierImpl

    The ``components`` section describes a component in full::

        components:
          metier:
            class: myapp.metier.MetierImpl
            dependencies: [dao]
            injection: setter
            lifetime: transient
    """

    format_name = "yaml"

    def parse(self, text: str, *, origin: str | None = None) -> Iterator[ComponentDescriptor]:
        try:
            document = yaml.load(text, Loader=UniqueKeyLoader)  # noqa: S506
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            problem = getattr(exc, "problem", None) or str(exc)
            raise BeanwireParseError(
                problem,
                source=origin,
                line=mark.line + 1 if mark is not None else None,
            ) from exc

        if document is None:
            return
        if not isinstance(document, Mapping):
            raise BeanwireParseError("top level must be a mapping", source=origin)

        unknown = sorted(str(key) for key in document if key not in SECTIONS)
        if unknown:
            raise BeanwireParseError(f"unknown section(s): {', '.join(unknown)}", source=origin)

        classes = self._section(document, "classes", origin)
        for name, identifier in classes.items():
            yield self._descriptor(name, {"class": identifier}, origin)

        components = self._section(document, "components", origin)
        for name, entry in components.items():
            if isinstance(entry, str):
                entry = {"class": entry}
            if not isinstance(entry, Mapping):
                raise BeanwireParseError(f"component {name!r} must be a mapping", source=origin)
            yield self._descriptor(name, entry, origin)

    def _section(self, document: Mapping[str, Any], key: str, origin: str | None) -> Mapping[str, Any]:
        section = document.get(key)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise BeanwireParseError(f"section {key!r} must be a mapping", source=origin)
        return section

    def _descriptor(self, name: object, entry: Mapping[str, Any], origin: str | None) -> ComponentDescriptor:
        if not isinstance(name, str) or not name:
            raise BeanwireParseError(f"component name {name!r} must be a non-empty string", source=origin)

        extra = sorted(str(key) for key in entry if key not in COMPONENT_KEYS)
        if extra:
            raise BeanwireParseError(
                f"component {name!r} has unknown key(s): {', '.join(extra)}",
                source=origin,
            )

        identifier = entry.get("class")
        if not isinstance(identifier, str) or not identifier.strip():
            raise BeanwireParseError(f"component {name!r} needs a 'class' string", source=origin)

        injection = parse_enum(Injection, entry.get("injection", self.injection), field="injection", origin=origin)
        return ComponentDescriptor(
            name=name,
            type_identifier=identifier.strip(),
            dependencies=self._dependencies(name, entry.get("dependencies"), injection, origin),
            lifetime=parse_enum(Lifetime, entry.get("lifetime", self.lifetime), field="lifetime", origin=origin),
            autowire=parse_enum(Autowire, entry.get("autowire", self.autowire), field="autowire", origin=origin),
            default_injection=injection,
        )

    def _dependencies(
        self,
        name: str,
        declared: object,
        injection: Injection,
        origin: str | None,
    ) -> tuple[Dependency, ...]:
        if declared is None:
            return ()
        if isinstance(declared, list):
            pairs = [(ref, ref) for ref in declared]
        elif isinstance(declared, Mapping):
            pairs = list(declared.items())
        else:
            raise BeanwireParseError(
                f"dependencies of {name!r} must be a list of names or a mapping",
                source=origin,
            )

        dependencies = []
        for argument, ref in pairs:
            if not isinstance(ref, str) or not isinstance(argument, str):
                raise BeanwireParseError(
                    f"dependencies of {name!r} must be component names, got {ref!r}",
                    source=origin,
                )
            dependencies.append(Dependency(ref=ref, argument=argument, injection=injection))
        return tuple(dependencies)


__all__ = ["YamlConfigLoader"]
