"""Two-layer demo graph: a ``dao`` data accessor and a ``metier`` business component."""

from beanwire.demo.dao import DaoImpl, DaoImplV2, IDao
from beanwire.demo.metier import IMetier, MetierImpl, MetierSetterImpl

__all__ = ["DaoImpl", "DaoImplV2", "IDao", "IMetier", "MetierImpl", "MetierSetterImpl"]
