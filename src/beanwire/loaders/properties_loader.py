from __future__ import annotations

import re
from collections.abc import Iterator

from beanwire.descriptors import ComponentDescriptor
from beanwire.exceptions import BeanwireParseError
from beanwire.loaders.base import ConfigLoader

_ENTRY = re.compile(r"^\s*(?P<name>[^=:\s]+)\s*[=:]\s*(?P<identifier>\S*)\s*$")
COMMENT_PREFIXES = ("#", "!")


class PropertiesConfigLoader(ConfigLoader):
    """Load a flat ``name=type.identifier`` file, one component per line.

    ``:`` works as a separator too; lines starting with ``#`` or ``!`` are
    comments. Dependencies are always autowired.
    """

    format_name = "properties"

    def parse(self, text: str, *, origin: str | None = None) -> Iterator[ComponentDescriptor]:
        for number, line in enumerate(text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIXES):
                continue
            match = _ENTRY.match(line)
            if match is None:
                raise BeanwireParseError(f"expected 'name=type', got {stripped!r}", source=origin, line=number)
            if not match["identifier"]:
                raise BeanwireParseError(f"missing type for {match['name']!r}", source=origin, line=number)
            yield ComponentDescriptor(
                name=match["name"],
                type_identifier=match["identifier"],
                lifetime=self.lifetime,
                autowire=self.autowire,
                default_injection=self.injection,
            )


__all__ = ["PropertiesConfigLoader"]
