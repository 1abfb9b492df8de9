"""FastAPI route definitions."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Response

from ..coordinates import parse_coordinates
from ..display import format_availability, format_hourly_rate
from ..metrics import get_metrics, record_spot_change, update_lot_counts
from ..state.lot import ParkingLot
from ..state.lot_manager import ParkingLotManager
from ..state.models import SpotState
from .schemas import (
    ClickRequest,
    ClickResponse,
    HealthResponse,
    LotDetailResponse,
    LotsResponse,
    LotSummary,
    OccupyRequest,
    SelectLotRequest,
    SpotActionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependencies injected at startup
_lot_manager: Optional[ParkingLotManager] = None
_start_time: datetime = datetime.now()


def init_router(lot_manager: ParkingLotManager) -> None:
    """
    Initialize router with dependencies.

    Args:
        lot_manager: ParkingLotManager instance holding all lots
    """
    global _lot_manager, _start_time

    _lot_manager = lot_manager
    _start_time = datetime.now()

    logger.info("API router initialized")


def _get_manager() -> ParkingLotManager:
    if _lot_manager is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _lot_manager


def _get_lot(name: str) -> ParkingLot:
    lot = _get_manager().get_lot_by_name(name)
    if lot is None:
        raise HTTPException(status_code=404, detail=f"Lot '{name}' not found")
    return lot


def _get_current_lot() -> ParkingLot:
    lot = _get_manager().current_lot()
    if lot is None:
        raise HTTPException(status_code=404, detail="No lot selected")
    return lot


def _lot_detail(lot: ParkingLot) -> LotDetailResponse:
    state = lot.get_state()
    return LotDetailResponse(
        **state.model_dump(),
        availability=format_availability(state.available, state.total_spots),
        hourly_rate_display=format_hourly_rate(lot.hourly_rate),
        is_current=_get_manager().current_lot() is lot,
    )


def _require_spot(lot: ParkingLot, row: int, col: int) -> None:
    if not lot.is_valid_coordinates(row, col):
        raise HTTPException(
            status_code=404, detail=f"Spot ({row},{col}) is outside lot '{lot.name}'"
        )


def _spot_changed(lot: ParkingLot, row: int, col: int) -> SpotActionResponse:
    spot_state = lot.get_spot_state(row, col)
    record_spot_change(
        lot_name=lot.name,
        became_occupied=lot.get_spot(row, col).is_occupied(),
        hour=datetime.now().hour,
    )
    update_lot_counts(lot)

    return SpotActionResponse(
        lot_name=lot.name,
        spot=spot_state,
        available=lot.available_spots(),
        total_spots=lot.total_spots,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health information about the service.
    """
    uptime = (datetime.now() - _start_time).total_seconds()

    lot_count = 0
    current_name = None
    if _lot_manager is not None:
        lot_count = len(_lot_manager)
        current = _lot_manager.current_lot()
        current_name = current.name if current else None

    return HealthResponse(
        status="healthy" if _lot_manager is not None else "starting",
        lot_count=lot_count,
        current_lot=current_name,
        uptime_seconds=uptime,
    )


@router.get("/lots", response_model=LotsResponse)
async def list_lots() -> LotsResponse:
    """
    List all parking lots with their availability and rate.

    Lots are returned in the order they were registered.
    """
    manager = _get_manager()
    current = manager.current_lot()

    summaries = []
    for lot in manager.all_lots():
        available = lot.available_spots()
        summaries.append(
            LotSummary(
                name=lot.name,
                available=available,
                total_spots=lot.total_spots,
                availability=format_availability(available, lot.total_spots),
                hourly_rate=lot.hourly_rate,
                hourly_rate_display=format_hourly_rate(lot.hourly_rate),
                is_current=lot is current,
            )
        )

    return LotsResponse(lots=summaries, current=current.name if current else None)


@router.get("/lots/current", response_model=LotDetailResponse)
async def get_current_lot() -> LotDetailResponse:
    """Get the full state of the currently selected lot."""
    return _lot_detail(_get_current_lot())


@router.put("/lots/current", response_model=LotDetailResponse)
async def select_lot(request: SelectLotRequest) -> LotDetailResponse:
    """
    Change the currently selected lot.

    If several lots share the name, the first one registered is selected.
    """
    manager = _get_manager()
    if not manager.set_current_lot_by_name(request.name):
        raise HTTPException(status_code=404, detail=f"Lot '{request.name}' not found")

    return _lot_detail(manager.current_lot())


@router.post("/lots/current/click", response_model=ClickResponse)
async def click_spot(request: ClickRequest) -> ClickResponse:
    """
    Toggle a spot of the current lot.

    An occupied spot is vacated. A free spot is occupied by the given
    vehicle. Malformed coordinates, spots outside the grid, or a blank
    vehicle ID for a free spot are ignored.
    """
    coordinates = parse_coordinates(request.coordinates)
    if coordinates is None:
        logger.debug(f"Ignoring click with malformed coordinates: {request.coordinates!r}")
        return ClickResponse(handled=False)

    lot = _get_manager().current_lot()
    if lot is None:
        return ClickResponse(handled=False)

    row, col = coordinates
    spot = lot.get_spot(row, col)
    if spot is None:
        return ClickResponse(handled=False)

    if spot.is_occupied():
        lot.vacate_spot(row, col)
        action = "vacated"
    else:
        vehicle_id = (request.vehicle_id or "").strip()
        if not vehicle_id:
            return ClickResponse(handled=False)
        lot.occupy_spot(row, col, vehicle_id)
        action = "occupied"

    result = _spot_changed(lot, row, col)
    return ClickResponse(handled=True, action=action, spot=result.spot)


@router.get("/lots/{name}", response_model=LotDetailResponse)
async def get_lot(name: str) -> LotDetailResponse:
    """
    Get the full state of a lot by name.

    Args:
        name: The name of the lot to query
    """
    return _lot_detail(_get_lot(name))


@router.get("/lots/{name}/spots/{row}/{col}", response_model=SpotState)
async def get_spot(name: str, row: int, col: int) -> SpotState:
    """Get the state of a single spot."""
    lot = _get_lot(name)
    _require_spot(lot, row, col)
    return lot.get_spot_state(row, col)


@router.post("/lots/{name}/spots/{row}/{col}/occupy", response_model=SpotActionResponse)
async def occupy_spot(name: str, row: int, col: int, request: OccupyRequest) -> SpotActionResponse:
    """
    Park a vehicle in a spot.

    Returns 404 if the spot is outside the lot, 409 if it is already occupied.
    """
    lot = _get_lot(name)
    _require_spot(lot, row, col)
    if not lot.occupy_spot(row, col, request.vehicle_id):
        raise HTTPException(
            status_code=409, detail=f"Spot ({row},{col}) in '{name}' cannot be occupied"
        )
    return _spot_changed(lot, row, col)


@router.post("/lots/{name}/spots/{row}/{col}/vacate", response_model=SpotActionResponse)
async def vacate_spot(name: str, row: int, col: int) -> SpotActionResponse:
    """
    Free a spot.

    Returns 404 if the spot is outside the lot, 409 if it is already available.
    """
    lot = _get_lot(name)
    _require_spot(lot, row, col)
    if not lot.vacate_spot(row, col):
        raise HTTPException(
            status_code=409, detail=f"Spot ({row},{col}) in '{name}' cannot be vacated"
        )
    return _spot_changed(lot, row, col)


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format including:
    - parking_lot_spots_total: Total number of spots per lot
    - parking_lot_spots_available: Number of available spots per lot
    - parking_lot_spots_occupied: Number of occupied spots per lot
    - parking_lot_hourly_rate: Hourly rate per lot
    - parking_spot_state_changes_total: Counter of state changes by lot and hour
    - parking_refresh_cycles_total: Total refresh cycles run
    """
    return Response(
        content=get_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
