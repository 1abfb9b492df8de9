"""Tests for ParkingSpot occupancy and duration formatting."""

from datetime import datetime, timedelta

from parking_status.state.spot import ParkingSpot


def test_new_spot_is_available():
    spot = ParkingSpot()

    assert not spot.is_occupied()
    assert spot.vehicle_id is None
    assert spot.occupied_since is None
    assert spot.occupation_duration() == timedelta(0)
    assert spot.formatted_occupation_time() == "Available"


def test_occupy_sets_vehicle_and_start_time(clock):
    spot = ParkingSpot(clock)

    spot.occupy("V1")

    assert spot.is_occupied()
    assert spot.vehicle_id == "V1"
    assert spot.occupied_since == clock.now


def test_vacate_clears_all_fields(clock):
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    spot.vacate()

    assert not spot.is_occupied()
    assert spot.vehicle_id is None
    assert spot.occupied_since is None


def test_vacate_on_free_spot_is_harmless():
    spot = ParkingSpot()

    spot.vacate()

    assert not spot.is_occupied()


def test_direct_occupy_overwrites_and_restarts_clock(clock):
    """Occupying an occupied spot directly replaces the vehicle silently."""
    spot = ParkingSpot(clock)
    spot.occupy("V1")
    clock.advance(minutes=40)

    spot.occupy("V2")

    assert spot.vehicle_id == "V2"
    assert spot.occupation_duration() == timedelta(0)


def test_duration_tracks_clock(clock):
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    clock.advance(minutes=7, seconds=30)

    assert spot.occupation_duration() == timedelta(minutes=7, seconds=30)


def test_duration_is_non_decreasing_with_real_clock():
    spot = ParkingSpot()
    spot.occupy("V1")

    first = spot.occupation_duration()
    second = spot.occupation_duration()

    assert first >= timedelta(0)
    assert second >= first


def test_formatted_time_with_hours(clock):
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    clock.advance(minutes=125)

    assert spot.formatted_occupation_time() == "2h 5m"


def test_formatted_time_under_an_hour(clock):
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    clock.advance(minutes=45, seconds=59)

    assert spot.formatted_occupation_time() == "45m"


def test_formatted_time_just_occupied(clock):
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    assert spot.formatted_occupation_time() == "0m"


def test_formatted_time_exact_hours(clock):
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    clock.advance(hours=3)

    assert spot.formatted_occupation_time() == "3h 0m"


def test_formatted_time_over_a_day(clock):
    """Hours are not wrapped at 24."""
    spot = ParkingSpot(clock)
    spot.occupy("V1")

    clock.advance(days=1, hours=2, minutes=15)

    assert spot.formatted_occupation_time() == "26h 15m"


def test_default_clock_is_wall_time():
    spot = ParkingSpot()
    before = datetime.now()

    spot.occupy("V1")

    assert before <= spot.occupied_since <= datetime.now()
