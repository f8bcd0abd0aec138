# app/routers/parking.py
"""Check-in / check-out endpoints and the list of vehicles currently parked."""

from fastapi import APIRouter, Depends, HTTPException

from app.lot_store import get_parking_lot
from app.models.vehicle import Vehicle
from app.schemas.vehicle import AdmittedVehiclesOut, CheckInOut, CheckOutOut, VehicleCheckIn
from app.services.parking_lot import ParkingLot

router = APIRouter()

# Handlers are async so they run on the event loop one at a time;
# ParkingLot never awaits, which keeps check-in/check-out atomic.


@router.post("/parking/check-in", response_model=CheckInOut, summary="Admit a vehicle")
async def check_in(body: VehicleCheckIn, lot: ParkingLot = Depends(get_parking_lot)):
    """Returns 409 when the lot is full or the plate is already inside."""
    vehicle = Vehicle(plate=body.plate, category=body.category,
                      discount_card=body.discount_card, check_in_time=lot.now())
    if not lot.admit(vehicle):
        raise HTTPException(status_code=409, detail=f"Check-in failed for plate {body.plate}")
    return {"status": "admitted", "plate": body.plate}


@router.post("/parking/check-out/{plate}", response_model=CheckOutOut, summary="Discharge a vehicle")
async def check_out(plate: str, lot: ParkingLot = Depends(get_parking_lot)):
    result = lot.discharge(plate)
    if not result.ok:
        raise HTTPException(status_code=404, detail=f"Plate {plate} is not in the lot")
    return {"status": "discharged", "plate": plate, "fee": result.fee}


@router.get("/parking/vehicles", response_model=AdmittedVehiclesOut, summary="Plates currently parked")
async def list_vehicles(lot: ParkingLot = Depends(get_parking_lot)):
    plates = lot.list_admitted_plates()
    return {"count": len(plates), "capacity": lot.capacity, "plates": plates}
