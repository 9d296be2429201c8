from __future__ import annotations

from beanwire.demo.dao import DaoImpl
from beanwire.demo.metier import IMetier, MetierSetterImpl


def wire_manually() -> IMetier:
    """Build the graph by hand, with no container involved."""
    dao = DaoImpl()
    metier = MetierSetterImpl()
    metier.set_dao(dao)
    return metier
