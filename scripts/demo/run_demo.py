# scripts/demo/run_demo.py
"""
Walk through the classic lot scenario against the core, no server needed.
Usage: python scripts/demo/run_demo.py [--minutes 135]
"""

import argparse
import sys
import os
from datetime import datetime, timedelta
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.models.vehicle import Vehicle, VehicleCategory
from app.services.parking_lot import ParkingLot

FIXTURES = [
    ("AA111AA", VehicleCategory.CAR, "DISCOUNT_CARD_001"),
    ("B222BBB", VehicleCategory.MOTORCYCLE, None),
    ("DD444DD", VehicleCategory.BUS, "DISCOUNT_CARD_002"),
    ("CC333CC", VehicleCategory.MINI_BUS, None),
    ("DD55DD", VehicleCategory.BUS, "DISCOUNT_CARD_002"),
    ("AA111BB", VehicleCategory.CAR, "DISCOUNT_CARD_003"),
    ("B222CCC", VehicleCategory.MOTORCYCLE, "DISCOUNT_CARD_004"),
    ("CC333DD", VehicleCategory.MINI_BUS, None),
    ("DD444EE", VehicleCategory.BUS, "DISCOUNT_CARD_005"),
    ("AA111CC", VehicleCategory.CAR, None),
    ("B222DDD", VehicleCategory.MOTORCYCLE, None),
    ("CC333EE", VehicleCategory.MINI_BUS, None),
    ("DD444GG", VehicleCategory.BUS, "DISCOUNT_CARD_006"),
    ("AA111DD", VehicleCategory.CAR, "DISCOUNT_CARD_007"),
    ("B222EEE", VehicleCategory.MOTORCYCLE, None),
    ("CC333FF", VehicleCategory.MINI_BUS, None),
    ("AA444HH", VehicleCategory.BUS, "DISCOUNT_CARD_008"),
    ("AA888PP", VehicleCategory.CAR, "DISCOUNT_CARD_009"),
    ("B555QQQ", VehicleCategory.MOTORCYCLE, None),
]


def check_in(lot, vehicle):
    if lot.admit(vehicle):
        print("Welcome to the parking lot!")
    else:
        print("Sorry, the check-in failed")


def check_out(lot, plate):
    result = lot.discharge(plate)
    if result.ok:
        print(f"Your fee is ${result.fee}. Come back soon")
    else:
        print("Sorry, the check-out failed")


def section(title):
    print("*" * 36)
    print(title)


def main():
    parser = argparse.ArgumentParser(description="Parking lot demo scenario")
    parser.add_argument("--minutes", type=int, default=135, help="How long every vehicle stays")
    args = parser.parse_args()

    arrival = datetime.utcnow()
    departure = arrival + timedelta(minutes=args.minutes)
    lot = ParkingLot(capacity=20, clock=lambda: departure)

    section(f"Checking in {len(FIXTURES)} vehicles:")
    for plate, category, card in FIXTURES:
        check_in(lot, Vehicle(plate, category, discount_card=card, check_in_time=arrival))

    section("Repeated plate:")
    check_in(lot, Vehicle("B555QQQ", VehicleCategory.CAR, check_in_time=arrival))

    section("Vehicle number 20:")
    check_in(lot, Vehicle("CC444WW", VehicleCategory.MINI_BUS, check_in_time=arrival))

    section("Lot is full:")
    check_in(lot, Vehicle("CC444ZZ", VehicleCategory.MINI_BUS, check_in_time=arrival))

    section(f"Checking out two vehicles after {args.minutes} minutes:")
    for plate in ("CC444WW", "AA888PP"):
        check_out(lot, plate)
        print(lot.get_statistics().summary())

    section("Unknown plate:")
    check_out(lot, "CC444ZZ")

    section("Still parked:")
    for plate in sorted(lot.list_admitted_plates()):
        print(f"Vehicle plate is {plate}")
    print("*" * 36)


if __name__ == "__main__":
    main()
