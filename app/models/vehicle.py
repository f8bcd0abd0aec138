# app/models/vehicle.py
"""
Vehicle categories and the parked vehicle entity.
A Vehicle is identified by its plate only: two instances with the same plate
are the same vehicle regardless of category or discount card.
Not persisted — vehicles live in the ParkingLot until they check out.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

_BASE_RATES = {
    "car": 20,
    "motorcycle": 15,
    "mini_bus": 25,
    "bus": 30,
}

_IMMUTABLE_FIELDS = ("plate", "category", "check_in_time")


class VehicleCategory(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    MINI_BUS = "mini_bus"
    BUS = "bus"

    @property
    def rate(self) -> int:
        """Flat fee for the first two hours."""
        return _BASE_RATES[self.value]

    @classmethod
    def from_value(cls, value) -> "VehicleCategory":
        """Accepts 'mini_bus', 'mini-bus', 'Mini Bus', 'miniBus' and the enum itself."""
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().replace("-", "_").replace(" ", "_")
        if normalised == "miniBus":
            normalised = "mini_bus"
        try:
            return cls(normalised.lower())
        except ValueError:
            raise ValueError(f"Unknown vehicle category: {value!r}") from None


@dataclass(eq=False)
class Vehicle:
    plate: str
    category: VehicleCategory
    discount_card: Optional[str] = None   # presence grants the discount, value is not checked
    check_in_time: datetime = field(default_factory=datetime.utcnow)

    def __setattr__(self, name, value):
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Vehicle.{name} cannot be changed after check-in")
        object.__setattr__(self, name, value)

    @property
    def has_discount(self) -> bool:
        return self.discount_card is not None

    def parked_minutes(self, now: Optional[datetime] = None) -> int:
        """Whole minutes since check-in, truncated. Never negative."""
        now = now or datetime.utcnow()
        seconds = (now - self.check_in_time).total_seconds()
        return max(0, int(seconds // 60))

    def __eq__(self, other):
        if not isinstance(other, Vehicle):
            return NotImplemented
        return self.plate == other.plate

    def __hash__(self):
        return hash(self.plate)

    def __repr__(self):
        return f"<Vehicle {self.plate} type={self.category.value} discount={self.has_discount}>"
