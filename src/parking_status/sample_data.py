"""Seeding of parking lots at startup."""

import logging

from .config import AppConfig, LotConfig
from .state.lot import ParkingLot
from .state.lot_manager import ParkingLotManager

logger = logging.getLogger(__name__)

SAMPLE_LOTS = [
    LotConfig(
        name="Downtown Mall",
        hourly_rate=3.50,
        rows=4,
        cols=6,
        occupied=[
            {"row": 0, "col": 0, "vehicle_id": "ABC123"},
            {"row": 0, "col": 1, "vehicle_id": "XYZ789"},
            {"row": 1, "col": 2, "vehicle_id": "DEF456"},
            {"row": 2, "col": 3, "vehicle_id": "GHI789"},
            {"row": 3, "col": 4, "vehicle_id": "JKL012"},
        ],
    ),
    LotConfig(
        name="Airport Terminal",
        hourly_rate=5.00,
        rows=3,
        cols=8,
        occupied=[
            {"row": 0, "col": 0, "vehicle_id": "AIR001"},
            {"row": 0, "col": 1, "vehicle_id": "AIR002"},
            {"row": 1, "col": 3, "vehicle_id": "AIR003"},
            {"row": 2, "col": 5, "vehicle_id": "AIR004"},
            {"row": 2, "col": 6, "vehicle_id": "AIR005"},
        ],
    ),
    LotConfig(
        name="University Campus",
        hourly_rate=2.00,
        rows=5,
        cols=5,
        occupied=[
            {"row": 0, "col": 0, "vehicle_id": "STU001"},
            {"row": 1, "col": 1, "vehicle_id": "STU002"},
            {"row": 2, "col": 2, "vehicle_id": "STU003"},
            {"row": 3, "col": 3, "vehicle_id": "STU004"},
            {"row": 4, "col": 4, "vehicle_id": "STU005"},
            {"row": 0, "col": 4, "vehicle_id": "STU006"},
            {"row": 4, "col": 0, "vehicle_id": "STU007"},
        ],
    ),
    LotConfig(
        name="City Hospital",
        hourly_rate=4.25,
        rows=3,
        cols=7,
        occupied=[
            {"row": 0, "col": 0, "vehicle_id": "HOS001"},
            {"row": 0, "col": 1, "vehicle_id": "HOS002"},
            {"row": 1, "col": 2, "vehicle_id": "HOS003"},
            {"row": 2, "col": 4, "vehicle_id": "HOS004"},
            {"row": 2, "col": 5, "vehicle_id": "HOS005"},
            {"row": 2, "col": 6, "vehicle_id": "HOS006"},
        ],
    ),
]


def build_lot(lot_config: LotConfig) -> ParkingLot:
    """
    Create a lot from its configuration and park the listed vehicles.

    Entries that cannot be applied (out of range, or a spot listed twice)
    are logged and skipped.
    """
    lot = ParkingLot(
        name=lot_config.name,
        hourly_rate=lot_config.hourly_rate,
        rows=lot_config.rows,
        cols=lot_config.cols,
    )

    for entry in lot_config.occupied:
        if not lot.occupy_spot(entry.row, entry.col, entry.vehicle_id):
            logger.warning(
                f"Lot '{lot.name}': skipping seed vehicle {entry.vehicle_id} "
                f"at ({entry.row},{entry.col})"
            )

    return lot


def build_manager(lot_configs: list[LotConfig]) -> ParkingLotManager:
    """Create a manager holding one lot per configuration entry, in order."""
    manager = ParkingLotManager()
    for lot_config in lot_configs:
        manager.add_lot(build_lot(lot_config))

    logger.info(f"Loaded {len(manager)} parking lot(s)")
    return manager


def create_sample_data() -> ParkingLotManager:
    """Create a manager with the built-in demonstration lots."""
    return build_manager(SAMPLE_LOTS)


def manager_from_config(config: AppConfig) -> ParkingLotManager:
    """
    Create the manager for an application config.

    Configured lots win; with none configured, the sample lots are used
    when use_sample_data is set, otherwise the manager starts empty.
    """
    if config.lots:
        return build_manager(config.lots)

    if config.use_sample_data:
        logger.info("No lots configured, seeding sample data")
        return create_sample_data()

    logger.warning("No lots configured and sample data disabled")
    return ParkingLotManager()
