"""Read-only snapshot models of parking lot state."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SpotStatus(str, Enum):
    """Status of a parking spot."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"


class SpotState(BaseModel):
    """Point-in-time view of one spot in a lot grid."""

    row: int
    col: int
    coordinates: str  # "row,col" click address
    status: SpotStatus
    vehicle_id: Optional[str] = None
    occupied_since: Optional[datetime] = None
    duration_seconds: float = 0.0
    duration_display: str = "Available"


class LotState(BaseModel):
    """Point-in-time view of a whole lot."""

    name: str
    hourly_rate: float
    rows: int
    cols: int
    total_spots: int
    available: int
    occupied: int
    spots: list[list[SpotState]]
