"""Tests for display formatting and metrics publication."""

from parking_status.display import format_availability, format_hourly_rate
from parking_status.metrics import REGISTRY, get_metrics, update_lot_counts
from parking_status.state.lot import ParkingLot


def test_format_hourly_rate():
    assert format_hourly_rate(3.5) == "$3.50/hour"
    assert format_hourly_rate(0) == "$0.00/hour"
    assert format_hourly_rate(12) == "$12.00/hour"


def test_format_availability():
    assert format_availability(5, 6) == "5/6"
    assert format_availability(0, 12) == "0/12"


def test_update_lot_counts_sets_gauges():
    lot = ParkingLot("Gauge Lot", 2.5, 2, 2)
    lot.occupy_spot(1, 1, "V1")

    update_lot_counts(lot)

    labels = {"lot_name": "Gauge Lot"}
    assert REGISTRY.get_sample_value("parking_lot_spots_total", labels) == 4
    assert REGISTRY.get_sample_value("parking_lot_spots_available", labels) == 3
    assert REGISTRY.get_sample_value("parking_lot_spots_occupied", labels) == 1
    assert REGISTRY.get_sample_value("parking_lot_hourly_rate", labels) == 2.5
    assert b'parking_lot_spots_available{lot_name="Gauge Lot"} 3.0' in get_metrics()
