"""Registry of parking lots with a single current selection."""

import logging
from typing import Optional

from .lot import ParkingLot

logger = logging.getLogger(__name__)


class ParkingLotManager:
    """
    Holds parking lots in insertion order and tracks which one is selected.

    The first lot added becomes the current lot. After that the selection
    only moves through set_current_lot / set_current_lot_by_name and never
    returns to None.
    """

    def __init__(self):
        self._lots: list[ParkingLot] = []
        self._current: Optional[ParkingLot] = None

    def add_lot(self, lot: ParkingLot) -> None:
        """Register a lot, selecting it if nothing is selected yet."""
        self._lots.append(lot)
        if self._current is None:
            self._current = lot
            logger.info(f"Current lot set to '{lot.name}'")

        logger.debug(f"Added lot '{lot.name}' ({len(self._lots)} total)")

    def all_lots(self) -> list[ParkingLot]:
        """Get a copy of the registered lots."""
        return list(self._lots)

    def current_lot(self) -> Optional[ParkingLot]:
        return self._current

    def set_current_lot(self, lot: ParkingLot) -> bool:
        """
        Select a registered lot.

        Membership is by identity, so a different lot object with the same
        name is rejected.

        Returns:
            True if selected, False if the lot is not registered here
        """
        if not any(existing is lot for existing in self._lots):
            logger.debug(f"Refusing to select unregistered lot '{lot.name}'")
            return False

        self._current = lot
        logger.info(f"Current lot set to '{lot.name}'")
        return True

    def set_current_lot_by_name(self, name: str) -> bool:
        """Select the first registered lot with the given name."""
        lot = self.get_lot_by_name(name)
        if lot is None:
            logger.debug(f"No lot named '{name}'")
            return False
        return self.set_current_lot(lot)

    def get_lot_by_name(self, name: str) -> Optional[ParkingLot]:
        """Find the first registered lot with the given name."""
        for lot in self._lots:
            if lot.name == name:
                return lot
        return None

    def __len__(self) -> int:
        return len(self._lots)
