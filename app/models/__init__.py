# Parking Lot — Domain Models
# Import all models here so callers can use app.models directly

from app.models.vehicle import Vehicle, VehicleCategory        # noqa
from app.models.parking_statistics import ParkingStatistics    # noqa
