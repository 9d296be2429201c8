from __future__ import annotations

from beanwire.descriptors import Autowire, Injection, Lifetime
from beanwire.scanning import component


class Clock:
    def now(self) -> str:
        return "noon"


@component
class Greeter:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock

    def greet(self) -> str:
        return f"good {self.clock.now()}"


class LoudGreeter(Greeter):
    """Subclass of a component, not a component itself."""


@component("clock", lifetime=Lifetime.TRANSIENT)
def make_clock() -> Clock:
    return Clock()


@component(autowire=Autowire.BY_NAME, injection=Injection.SETTER)
class Announcer:
    def __init__(self) -> None:
        self.greeter: Greeter | None = None

    def set_greeter(self, greeter: Greeter) -> None:
        self.greeter = greeter
