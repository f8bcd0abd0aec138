# app/models/parking_statistics.py
"""
Running totals for a parking lot.
Only successful check-outs move these numbers, and they never go down.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParkingStatistics:
    vehicles: int = 0    # completed check-outs
    earnings: int = 0    # sum of all fees charged

    def record(self, fee: int) -> "ParkingStatistics":
        return ParkingStatistics(vehicles=self.vehicles + 1, earnings=self.earnings + fee)

    def summary(self) -> str:
        return f"{self.vehicles} vehicles have checked out and have earnings of ${self.earnings}"
