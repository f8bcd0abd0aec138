# app/schemas/parking_stats.py
from pydantic import BaseModel

from app.models.vehicle import VehicleCategory


class StatisticsOut(BaseModel):
    vehicles: int
    earnings: int

    class Config:
        from_attributes = True


class StatisticsSummaryOut(BaseModel):
    summary: str


class FeeQuoteOut(BaseModel):
    category: VehicleCategory
    minutes: int
    discount: bool
    fee: int
