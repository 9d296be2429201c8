from tests.scan_fixtures.services import Greeter

__all__ = ["Greeter"]
