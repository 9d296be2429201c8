from __future__ import annotations

from beanwire.demo.dao import IDao
from beanwire.demo.metier import IMetier
from beanwire.scanning import component


@component("metier")
class AnnotatedMetier(IMetier):
    def __init__(self, accessor: IDao) -> None:
        self.accessor = accessor

    def compute(self) -> int:
        return self.accessor.value() * 2
