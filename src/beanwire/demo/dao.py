from __future__ import annotations

from abc import ABC, abstractmethod


class IDao(ABC):
    @abstractmethod
    def value(self) -> int:
        """Return the raw value the business layer computes on."""


class DaoImpl(IDao):
    def value(self) -> int:
        return 21


class DaoImplV2(IDao):
    """Alternative accessor, selected by pointing ``dao`` at it in the configuration."""

    def value(self) -> int:
        return 50
