"""Parking lot grid with bounds-checked occupancy operations."""

import logging
from datetime import datetime
from typing import Callable, Iterator, Optional

from ..coordinates import format_coordinates
from .models import LotState, SpotState, SpotStatus
from .spot import ParkingSpot

logger = logging.getLogger(__name__)


class ParkingLot:
    """
    A named, priced, fixed-size grid of parking spots.

    Spots are addressed by zero-based (row, col). Every lookup and mutation
    checks bounds first; out-of-range coordinates give None or False and
    never raise. Occupancy changes only go through occupy_spot and
    vacate_spot, which refuse to double-occupy or double-vacate.
    """

    def __init__(
        self,
        name: str,
        hourly_rate: float,
        rows: int,
        cols: int,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Create a lot with every spot initially available.

        Args:
            name: Display name of the lot
            hourly_rate: Price per hour, must be non-negative
            rows: Number of grid rows, must be positive
            cols: Number of grid columns, must be positive
            clock: Time source shared by all spots in the lot

        Raises:
            ValueError: If the rate is negative or a dimension is not positive
        """
        if hourly_rate < 0:
            raise ValueError(f"hourly_rate must be non-negative, got {hourly_rate}")
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Lot dimensions must be positive, got {rows}x{cols}")

        self._name = name
        self._hourly_rate = hourly_rate
        self._rows = rows
        self._cols = cols
        self._spots = [[ParkingSpot(clock) for _ in range(cols)] for _ in range(rows)]

        logger.debug(f"Created lot '{name}' ({rows}x{cols}, {hourly_rate:.2f}/hour)")

    @property
    def name(self) -> str:
        return self._name

    @property
    def hourly_rate(self) -> float:
        return self._hourly_rate

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def total_spots(self) -> int:
        return self._rows * self._cols

    def is_valid_coordinates(self, row: int, col: int) -> bool:
        """Check that (row, col) falls inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get_spot(self, row: int, col: int) -> Optional[ParkingSpot]:
        """Get the spot at (row, col), or None if out of bounds."""
        if self.is_valid_coordinates(row, col):
            return self._spots[row][col]
        return None

    def iter_spots(self) -> Iterator[tuple[int, int, ParkingSpot]]:
        """Yield (row, col, spot) for every cell in row-major order."""
        for row, spot_row in enumerate(self._spots):
            for col, spot in enumerate(spot_row):
                yield row, col, spot

    def available_spots(self) -> int:
        """Count free spots by scanning the whole grid."""
        return sum(1 for _, _, spot in self.iter_spots() if not spot.is_occupied())

    def occupied_spots(self) -> int:
        """Count taken spots."""
        return self.total_spots - self.available_spots()

    def occupy_spot(self, row: int, col: int, vehicle_id: str) -> bool:
        """
        Park a vehicle in a free spot.

        Args:
            row: Row index of the spot
            col: Column index of the spot
            vehicle_id: Identifier of the arriving vehicle

        Returns:
            True if the spot was taken, False if the coordinates are out of
            range or the spot is already occupied
        """
        spot = self.get_spot(row, col)
        if spot is None:
            logger.debug(f"Lot '{self._name}': occupy rejected, ({row},{col}) out of range")
            return False
        if spot.is_occupied():
            logger.debug(f"Lot '{self._name}': occupy rejected, ({row},{col}) already occupied")
            return False

        spot.occupy(vehicle_id)
        logger.info(f"Lot '{self._name}': spot ({row},{col}) occupied by {vehicle_id}")
        return True

    def vacate_spot(self, row: int, col: int) -> bool:
        """
        Free an occupied spot.

        Returns:
            True if the spot was freed, False if the coordinates are out of
            range or the spot was already free
        """
        spot = self.get_spot(row, col)
        if spot is None or not spot.is_occupied():
            logger.debug(f"Lot '{self._name}': vacate rejected at ({row},{col})")
            return False

        vehicle_id = spot.vehicle_id
        spot.vacate()
        logger.info(f"Lot '{self._name}': spot ({row},{col}) vacated by {vehicle_id}")
        return True

    def get_spot_state(self, row: int, col: int) -> Optional[SpotState]:
        """Get a snapshot of one spot, or None if out of bounds."""
        spot = self.get_spot(row, col)
        if spot is None:
            return None
        return _spot_state(row, col, spot)

    def get_state(self) -> LotState:
        """Get a snapshot of the whole lot."""
        grid = [
            [_spot_state(row, col, spot) for col, spot in enumerate(spot_row)]
            for row, spot_row in enumerate(self._spots)
        ]
        available = self.available_spots()

        return LotState(
            name=self._name,
            hourly_rate=self._hourly_rate,
            rows=self._rows,
            cols=self._cols,
            total_spots=self.total_spots,
            available=available,
            occupied=self.total_spots - available,
            spots=grid,
        )

    def __repr__(self) -> str:
        return f"ParkingLot(name={self._name!r}, rows={self._rows}, cols={self._cols})"


def _spot_state(row: int, col: int, spot: ParkingSpot) -> SpotState:
    return SpotState(
        row=row,
        col=col,
        coordinates=format_coordinates(row, col),
        status=SpotStatus.OCCUPIED if spot.is_occupied() else SpotStatus.AVAILABLE,
        vehicle_id=spot.vehicle_id,
        occupied_since=spot.occupied_since,
        duration_seconds=spot.occupation_duration().total_seconds(),
        duration_display=spot.formatted_occupation_time(),
    )
