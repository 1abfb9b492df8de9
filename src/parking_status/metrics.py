"""Prometheus metrics for parking lot status."""

from prometheus_client import Counter, Gauge, CollectorRegistry, generate_latest

from .state.lot import ParkingLot

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

LOT_TOTAL_SPOTS = Gauge(
    "parking_lot_spots_total",
    "Total number of spots in a parking lot",
    ["lot_name"],
    registry=REGISTRY,
)

LOT_AVAILABLE_SPOTS = Gauge(
    "parking_lot_spots_available",
    "Number of available spots in a parking lot",
    ["lot_name"],
    registry=REGISTRY,
)

LOT_OCCUPIED_SPOTS = Gauge(
    "parking_lot_spots_occupied",
    "Number of occupied spots in a parking lot",
    ["lot_name"],
    registry=REGISTRY,
)

LOT_HOURLY_RATE = Gauge(
    "parking_lot_hourly_rate",
    "Hourly parking rate of a lot",
    ["lot_name"],
    registry=REGISTRY,
)

# Spot state changes counter with time of day label
SPOT_STATE_CHANGES = Counter(
    "parking_spot_state_changes_total",
    "Total number of parking spot state changes",
    ["lot_name", "change_type", "hour_of_day"],
    registry=REGISTRY,
)

REFRESH_CYCLES = Counter(
    "parking_refresh_cycles_total",
    "Total number of periodic refresh cycles run",
    registry=REGISTRY,
)


def record_spot_change(lot_name: str, became_occupied: bool, hour: int) -> None:
    """Record a spot state change."""
    change_type = "became_occupied" if became_occupied else "became_available"
    SPOT_STATE_CHANGES.labels(
        lot_name=lot_name,
        change_type=change_type,
        hour_of_day=str(hour).zfill(2),
    ).inc()


def update_lot_counts(lot: ParkingLot) -> None:
    """Update the count and rate gauges for a lot."""
    available = lot.available_spots()
    LOT_TOTAL_SPOTS.labels(lot_name=lot.name).set(lot.total_spots)
    LOT_AVAILABLE_SPOTS.labels(lot_name=lot.name).set(available)
    LOT_OCCUPIED_SPOTS.labels(lot_name=lot.name).set(lot.total_spots - available)
    LOT_HOURLY_RATE.labels(lot_name=lot.name).set(lot.hourly_rate)


def increment_refresh_cycles() -> None:
    """Increment refresh cycle counter."""
    REFRESH_CYCLES.inc()


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
