# app/lot_store.py
"""
Process-wide ParkingLot instance and the FastAPI dependency that hands it out.
State is in memory only and is lost on restart.
"""

from app.config import settings
from app.services.parking_lot import ParkingLot

_parking_lot = ParkingLot(capacity=settings.LOT_CAPACITY)


def get_parking_lot() -> ParkingLot:
    """FastAPI dependency — returns the shared lot. Override in tests."""
    return _parking_lot
