"""Manual wiring: build the object graph by hand.

No container is involved. The presentation code picks concrete classes and
hands the data accessor to the business component itself.
"""

from __future__ import annotations

from beanwire.demo import DaoImpl, DaoImplV2, MetierImpl


def main() -> None:
    metier = MetierImpl(DaoImpl())
    print(f"compute={metier.compute()}")  # => compute=42

    # Swapping the implementation means editing and recompiling this code.
    metier = MetierImpl(DaoImplV2())
    print(f"compute_v2={metier.compute()}")  # => compute_v2=100


if __name__ == "__main__":
    main()
