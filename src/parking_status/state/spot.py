"""A single parking spot and its occupancy clock."""

from datetime import datetime, timedelta
from typing import Callable, Optional


class ParkingSpot:
    """
    One occupancy cell in a parking lot grid.

    Tracks whether the spot is taken, by which vehicle, and since when.
    The three fields always move together: a spot is occupied exactly when
    it holds both a vehicle ID and a start time.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._occupied = False
        self._vehicle_id: Optional[str] = None
        self._occupied_since: Optional[datetime] = None

    @property
    def vehicle_id(self) -> Optional[str]:
        return self._vehicle_id

    @property
    def occupied_since(self) -> Optional[datetime]:
        return self._occupied_since

    def is_occupied(self) -> bool:
        """Check whether a vehicle currently holds this spot."""
        return self._occupied

    def occupy(self, vehicle_id: str) -> None:
        """
        Mark the spot as taken by a vehicle, starting the clock now.

        Calling this on a spot that is already occupied replaces the vehicle
        ID and restarts the clock. Use ParkingLot.occupy_spot when double
        occupancy must be rejected.

        Args:
            vehicle_id: Identifier of the vehicle taking the spot
        """
        self._occupied = True
        self._occupied_since = self._clock()
        self._vehicle_id = vehicle_id

    def vacate(self) -> None:
        """Free the spot. Safe to call on a spot that is already free."""
        self._occupied = False
        self._occupied_since = None
        self._vehicle_id = None

    def occupation_duration(self) -> timedelta:
        """Time elapsed since the current occupancy began, or zero if free."""
        if not self._occupied or self._occupied_since is None:
            return timedelta(0)
        return self._clock() - self._occupied_since

    def formatted_occupation_time(self) -> str:
        """
        Human-readable occupation time.

        Returns:
            "Available" for a free spot, otherwise "2h 5m" style when at
            least one whole hour has passed, or "45m" below one hour
        """
        if not self._occupied:
            return "Available"

        total_minutes = int(self.occupation_duration().total_seconds() // 60)
        hours, minutes = divmod(total_minutes, 60)

        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"

    def __repr__(self) -> str:
        if self._occupied:
            return f"ParkingSpot(occupied by {self._vehicle_id!r})"
        return "ParkingSpot(available)"
