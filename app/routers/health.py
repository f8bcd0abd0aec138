# app/routers/health.py
"""
System health check endpoint.
Returns backend status and current lot occupancy.
"""

from fastapi import APIRouter, Depends
from datetime import datetime

from app.lot_store import get_parking_lot
from app.services.parking_lot import ParkingLot

router = APIRouter()


@router.get("/health", summary="System health check")
async def health_check(lot: ParkingLot = Depends(get_parking_lot)):
    """
    Returns:
    - Backend status ("ok", or "full" when no space is left)
    - Occupied / available spaces
    """
    return {
        "status": "full" if lot.is_full else "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "occupied": len(lot),
        "capacity": lot.capacity,
        "available": lot.available,
    }
