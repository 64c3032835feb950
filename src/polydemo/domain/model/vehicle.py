"""Vehicle hierarchy for rental pricing.

``Vehicle`` is the abstract base: it owns the shared make/model/year
fields and the first display line.  Each variant adds one attribute,
its own daily rate rule and one extra display line.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Daily rates (ksh)
# ---------------------------------------------------------------------------
CAR_DAILY_RATE = 2000
SUV_DAILY_RATE = 2000
SUV_4WD_DAILY_RATE = 3000
TRUCK_DAILY_RATE = 2500

CURRENCY = "ksh"


@dataclass(frozen=True)
class Vehicle(ABC):
    """Abstract rental vehicle.

    No invariants are enforced: make, model and year are accepted as
    given.  Instances are immutable once constructed.
    """

    make: str
    model: str
    year: int

    @abstractmethod
    def rental_cost(self, days: int) -> int:
        """Return the rental cost for *days* days.

        ``days`` is not validated; the caller owns that check.
        """

    def describe(self) -> list[str]:
        """Return the display lines for this vehicle."""
        return [f"Make: {self.make}, Model: {self.model}, Year: {self.year}"]


@dataclass(frozen=True)
class Car(Vehicle):
    num_doors: int

    def rental_cost(self, days: int) -> int:
        return days * CAR_DAILY_RATE

    def describe(self) -> list[str]:
        return super().describe() + [f"Type: Car, Doors: {self.num_doors}"]


@dataclass(frozen=True)
class SUV(Vehicle):
    four_wheel_drive: bool

    @property
    def daily_rate(self) -> int:
        return SUV_4WD_DAILY_RATE if self.four_wheel_drive else SUV_DAILY_RATE

    def rental_cost(self, days: int) -> int:
        return days * self.daily_rate

    def describe(self) -> list[str]:
        fwd = "Yes" if self.four_wheel_drive else "No"
        return super().describe() + [f"Type: SUV, 4WD: {fwd}"]


@dataclass(frozen=True)
class Truck(Vehicle):
    cargo_capacity: float  # tons

    def rental_cost(self, days: int) -> int:
        return days * TRUCK_DAILY_RATE

    def describe(self) -> list[str]:
        return super().describe() + [
            f"Type: Truck, Cargo Capacity: {self.cargo_capacity:g} tons"
        ]
