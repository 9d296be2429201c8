from __future__ import annotations

from beanwire.demo.dao import IDao
from beanwire.scanning import component


@component("dao")
class AnnotatedDao(IDao):
    def value(self) -> int:
        return 21
