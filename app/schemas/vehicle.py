# app/schemas/vehicle.py
from pydantic import BaseModel, field_validator
from typing import Optional

from app.models.vehicle import VehicleCategory


class VehicleCheckIn(BaseModel):
    plate: str
    category: VehicleCategory          # car | motorcycle | mini_bus | bus
    discount_card: Optional[str] = None

    @field_validator("plate")
    @classmethod
    def plate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("plate must not be empty")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def normalise_category(cls, v):
        return VehicleCategory.from_value(v)


class CheckInOut(BaseModel):
    status: str
    plate: str


class CheckOutOut(BaseModel):
    status: str
    plate: str
    fee: int


class AdmittedVehiclesOut(BaseModel):
    count: int
    capacity: int
    plates: list[str]
