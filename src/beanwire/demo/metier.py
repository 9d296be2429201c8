from __future__ import annotations

from abc import ABC, abstractmethod

from beanwire.demo.dao import IDao


class IMetier(ABC):
    @abstractmethod
    def compute(self) -> int: ...


class MetierImpl(IMetier):
    """Business component receiving its accessor through the constructor."""

    def __init__(self, dao: IDao) -> None:
        self.dao = dao

    def compute(self) -> int:
        return self.dao.value() * 2


class MetierSetterImpl(IMetier):
    """Business component receiving its accessor after construction."""

    def __init__(self) -> None:
        self.dao: IDao | None = None

    def set_dao(self, dao: IDao) -> None:
        self.dao = dao

    def compute(self) -> int:
        if self.dao is None:
            msg = "dao was not injected"
            raise RuntimeError(msg)
        return self.dao.value() * 2
