# app/routers/parking_stats.py
"""Earnings / check-out statistics and fee quotes."""

from fastapi import APIRouter, Depends, Query

from app.lot_store import get_parking_lot
from app.models.vehicle import VehicleCategory
from app.schemas.parking_stats import FeeQuoteOut, StatisticsOut, StatisticsSummaryOut
from app.services.fee_calculator import compute_fee
from app.services.parking_lot import ParkingLot

router = APIRouter()


@router.get("/stats", response_model=StatisticsOut, summary="Completed check-outs and earnings")
async def get_statistics(lot: ParkingLot = Depends(get_parking_lot)):
    return lot.get_statistics()


@router.get("/stats/summary", response_model=StatisticsSummaryOut, summary="Statistics as one line")
async def get_statistics_summary(lot: ParkingLot = Depends(get_parking_lot)):
    return {"summary": lot.get_statistics().summary()}


@router.get("/fees/quote", response_model=FeeQuoteOut, summary="Fee for a stay, without checking out")
async def quote_fee(
    category: VehicleCategory,
    minutes: int = Query(..., ge=0),
    discount: bool = False,
):
    return {
        "category": category,
        "minutes": minutes,
        "discount": discount,
        "fee": compute_fee(category, minutes, discount),
    }
