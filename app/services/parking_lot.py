# app/services/parking_lot.py
"""
ParkingLot: check-in / check-out of vehicles and running statistics.

How it works:
  - admit(vehicle)   → rejected when the lot is full or the plate is already inside
  - discharge(plate) → removes the vehicle, charges it via fee_calculator,
                       and adds the fee to the statistics
  - Both return a result object; expected failures are never raised

Single-threaded: nothing here awaits or blocks, so callers on one event loop
see admit/discharge as atomic.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, List, Optional

from app.config import settings
from app.models.parking_statistics import ParkingStatistics
from app.models.vehicle import Vehicle
from app.services.fee_calculator import compute_fee
from app.utils.logger import get_logger

logger = get_logger(__name__)


class DischargeError(str, Enum):
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class AdmitResult:
    plate: str
    admitted: bool

    def __bool__(self):
        return self.admitted


@dataclass(frozen=True)
class DischargeResult:
    plate: str
    fee: Optional[int] = None
    error: Optional[DischargeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ParkingLot:
    def __init__(self, capacity: int = None, clock: Callable[[], datetime] = datetime.utcnow):
        self.capacity = settings.LOT_CAPACITY if capacity is None else capacity
        self._clock = clock
        self._vehicles: Dict[str, Vehicle] = {}
        self._statistics = ParkingStatistics()

    def __len__(self):
        return len(self._vehicles)

    def __contains__(self, plate: str):
        return plate in self._vehicles

    def now(self) -> datetime:
        """Current time on the lot's clock. Use it for check-in times."""
        return self._clock()

    @property
    def is_full(self) -> bool:
        return len(self._vehicles) >= self.capacity

    @property
    def available(self) -> int:
        return self.capacity - len(self._vehicles)

    def admit(self, vehicle: Vehicle) -> AdmitResult:
        if self.is_full:
            logger.warning(f"[CHECK-IN] Rejected {vehicle.plate}: lot full ({len(self)}/{self.capacity})")
            return AdmitResult(plate=vehicle.plate, admitted=False)
        if vehicle.plate in self._vehicles:
            logger.warning(f"[CHECK-IN] Rejected {vehicle.plate}: plate already inside")
            return AdmitResult(plate=vehicle.plate, admitted=False)

        self._vehicles[vehicle.plate] = vehicle
        logger.info(f"[CHECK-IN] Plate={vehicle.plate} | Type={vehicle.category.value} | "
                    f"Discount={vehicle.has_discount} | {len(self)}/{self.capacity}")
        return AdmitResult(plate=vehicle.plate, admitted=True)

    def discharge(self, plate: str) -> DischargeResult:
        vehicle = self._vehicles.pop(plate, None)
        if vehicle is None:
            logger.warning(f"[CHECK-OUT] Plate {plate} is not in the lot")
            return DischargeResult(plate=plate, error=DischargeError.NOT_FOUND)

        minutes = vehicle.parked_minutes(self.now())
        fee = compute_fee(vehicle.category, minutes, vehicle.has_discount)
        self._statistics = self._statistics.record(fee)

        logger.info(f"[CHECK-OUT] Plate={plate} parked {minutes} min → fee={fee} "
                    f"(discount={vehicle.has_discount})")
        return DischargeResult(plate=plate, fee=fee)

    def get_statistics(self) -> ParkingStatistics:
        return self._statistics

    def list_admitted_plates(self) -> List[str]:
        return list(self._vehicles)

    def get_vehicle(self, plate: str) -> Optional[Vehicle]:
        return self._vehicles.get(plate)
