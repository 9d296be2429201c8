"""Command line entry point: wire the demo graph one way and print a result."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from importlib import resources
from pathlib import Path
from typing import Any

from beanwire.container import Container
from beanwire.demo.manual import wire_manually
from beanwire.exceptions import BeanwireError

logger = logging.getLogger(__name__)

STRATEGIES = ("manual", "config", "xml", "properties", "annotations")
DEMO_CONFIGS = {
    "config": "beans.yaml",
    "xml": "beans.xml",
    "properties": "beans.properties",
}
DEMO_PACKAGE = "beanwire.demo.annotated"
FILE_STRATEGIES = tuple(DEMO_CONFIGS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beanwire",
        description="Resolve a component, call one of its methods and print the result.",
    )
    parser.add_argument("--strategy", choices=STRATEGIES, default="config", help="wiring strategy (default: config)")
    parser.add_argument(
        "--config",
        type=Path,
        help="configuration file for the config, xml and properties strategies (defaults to the bundled demo file)",
    )
    parser.add_argument("--package", default=DEMO_PACKAGE, help="package scanned by the annotations strategy")
    parser.add_argument("--component", default="metier", help="component to resolve (default: metier)")
    parser.add_argument("--method", default="compute", help="no-argument method to call (default: compute)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log resolution details")
    return parser


def demo_config(strategy: str) -> Path:
    return Path(str(resources.files("beanwire.demo") / "config" / DEMO_CONFIGS[strategy]))


def resolve_component(args: argparse.Namespace) -> Any:
    if args.strategy == "manual":
        return wire_manually()
    if args.strategy == "annotations":
        container = Container.from_package(args.package)
    else:
        container = Container.from_config(args.config or demo_config(args.strategy))
    return container.get(args.component)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.config is not None and args.strategy not in FILE_STRATEGIES:
        parser.error(f"--config cannot be used with the {args.strategy} strategy")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        target = resolve_component(args)
    except BeanwireError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    method = getattr(target, args.method, None)
    if not callable(method):
        print(f"error: {type(target).__qualname__} has no method {args.method!r}", file=sys.stderr)
        return 1

    logger.debug("Calling %s.%s()", type(target).__qualname__, args.method)
    print(method())
    return 0


if __name__ == "__main__":
    sys.exit(main())
