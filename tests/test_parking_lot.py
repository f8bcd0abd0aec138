"""Unit tests for ParkingLot check-in, check-out and statistics."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from datetime import datetime, timedelta
from app.models.vehicle import Vehicle, VehicleCategory
from app.services.parking_lot import DischargeError, ParkingLot

CHECK_IN = datetime(2026, 3, 1, 9, 0, 0)


class FakeClock:
    def __init__(self, now=CHECK_IN):
        self.now = now

    def advance(self, minutes):
        self.now += timedelta(minutes=minutes)

    def __call__(self):
        return self.now


def make_vehicle(plate, category=VehicleCategory.CAR, card=None):
    return Vehicle(plate, category, discount_card=card, check_in_time=CHECK_IN)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def lot(clock):
    return ParkingLot(capacity=20, clock=clock)


class TestAdmit:
    def test_admit_adds_vehicle(self, lot):
        result = lot.admit(make_vehicle("AA111AA"))
        assert result.admitted
        assert "AA111AA" in lot
        assert lot.list_admitted_plates() == ["AA111AA"]

    def test_duplicate_plate_rejected_original_kept(self, lot):
        lot.admit(make_vehicle("AA111AA", VehicleCategory.CAR, card="CARD-1"))
        result = lot.admit(make_vehicle("AA111AA", VehicleCategory.BUS))

        assert not result.admitted
        assert len(lot) == 1
        kept = lot.get_vehicle("AA111AA")
        assert kept.category is VehicleCategory.CAR
        assert kept.discount_card == "CARD-1"

    def test_capacity_exceeded(self, lot):
        for i in range(20):
            assert lot.admit(make_vehicle(f"PL{i:03d}")).admitted
        assert lot.is_full

        result = lot.admit(make_vehicle("EXTRA01"))
        assert not result.admitted
        assert len(lot) == 20
        assert "EXTRA01" not in lot

    def test_default_capacity_from_settings(self):
        assert ParkingLot().capacity == 20

    def test_rejection_is_logged(self, lot):
        lot.admit(make_vehicle("AA111AA"))
        with patch("app.services.parking_lot.logger") as mock_logger:
            lot.admit(make_vehicle("AA111AA"))
            mock_logger.warning.assert_called_once()
            assert "already inside" in mock_logger.warning.call_args[0][0]


class TestDischarge:
    def test_unknown_plate_not_found(self, lot):
        result = lot.discharge("ZZ999ZZ")
        assert not result.ok
        assert result.error is DischargeError.NOT_FOUND
        assert result.fee is None
        assert lot.get_statistics().vehicles == 0
        assert lot.get_statistics().earnings == 0

    def test_discharge_charges_and_records(self, lot, clock):
        lot.admit(make_vehicle("AA111AA"))
        clock.advance(135)

        result = lot.discharge("AA111AA")
        assert result.ok
        assert result.fee == 25
        assert "AA111AA" not in lot

        stats = lot.get_statistics()
        assert stats.vehicles == 1
        assert stats.earnings == 25

    def test_discharge_twice_fails_second_time(self, lot, clock):
        lot.admit(make_vehicle("AA111AA"))
        clock.advance(30)
        assert lot.discharge("AA111AA").ok
        second = lot.discharge("AA111AA")
        assert second.error is DischargeError.NOT_FOUND
        assert lot.get_statistics().vehicles == 1
        assert lot.get_statistics().earnings == 20

    def test_discount_card_applied(self, lot, clock):
        lot.admit(make_vehicle("AA111AA", card="DISCOUNT_CARD_001"))
        clock.advance(135)
        assert lot.discharge("AA111AA").fee == 21

    def test_discount_card_added_after_check_in(self, lot, clock):
        vehicle = make_vehicle("AA111AA")
        lot.admit(vehicle)
        vehicle.discount_card = "LATE-CARD"
        clock.advance(135)
        assert lot.discharge("AA111AA").fee == 21

    def test_seconds_are_truncated(self, lot, clock):
        lot.admit(make_vehicle("AA111AA"))
        clock.now = CHECK_IN + timedelta(minutes=120, seconds=59)
        assert lot.discharge("AA111AA").fee == 20

    def test_earnings_accumulate(self, lot, clock):
        lot.admit(make_vehicle("AA111AA"))
        lot.admit(make_vehicle("BB222BB", VehicleCategory.BUS))
        clock.advance(135)
        lot.discharge("AA111AA")
        lot.discharge("BB222BB")
        stats = lot.get_statistics()
        assert stats.vehicles == 2
        assert stats.earnings == 25 + 37

    def test_discharge_frees_capacity(self, lot):
        for i in range(20):
            lot.admit(make_vehicle(f"PL{i:03d}"))
        lot.discharge("PL000")
        assert lot.admit(make_vehicle("NEW0001")).admitted


class TestStatistics:
    def test_summary_line(self, lot, clock):
        lot.admit(make_vehicle("AA111AA"))
        clock.advance(10)
        lot.discharge("AA111AA")
        assert lot.get_statistics().summary() == "1 vehicles have checked out and have earnings of $20"

    def test_snapshot_not_affected_by_later_checkouts(self, lot):
        lot.admit(make_vehicle("AA111AA"))
        before = lot.get_statistics()
        lot.discharge("AA111AA")
        assert before.vehicles == 0
        assert lot.get_statistics().vehicles == 1


class TestFullScenario:
    def test_fill_overflow_and_checkout(self, lot, clock):
        for i in range(19):
            assert lot.admit(make_vehicle(f"PL{i:03d}")).admitted
        assert len(lot) == 19

        assert lot.admit(make_vehicle("CC444WW", VehicleCategory.MINI_BUS)).admitted
        assert len(lot) == 20

        assert not lot.admit(make_vehicle("CC444ZZ", VehicleCategory.MINI_BUS)).admitted
        assert len(lot) == 20

        clock.advance(135)
        result = lot.discharge("CC444WW")
        assert result.fee == 31
        assert len(lot) == 19
        assert lot.get_statistics().vehicles == 1
        assert lot.get_statistics().earnings == 31

        assert lot.discharge("CC444ZZ").error is DischargeError.NOT_FOUND
        assert len(lot) == 19
        assert lot.get_statistics().vehicles == 1
        assert lot.get_statistics().earnings == 31
