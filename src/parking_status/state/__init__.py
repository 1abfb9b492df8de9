"""State management module."""

from .lot import ParkingLot
from .lot_manager import ParkingLotManager
from .models import LotState, SpotState, SpotStatus
from .spot import ParkingSpot

__all__ = [
    "ParkingSpot",
    "ParkingLot",
    "ParkingLotManager",
    "SpotStatus",
    "SpotState",
    "LotState",
]
