"""API request and response schemas."""

from typing import Optional

from pydantic import BaseModel

from ..state.models import LotState, SpotState


class LotSummary(BaseModel):
    """Headline figures for one lot, as shown in a lot selector."""

    name: str
    available: int
    total_spots: int
    availability: str  # "available/total"
    hourly_rate: float
    hourly_rate_display: str
    is_current: bool


class LotsResponse(BaseModel):
    """Response for listing lots."""

    lots: list[LotSummary]
    current: Optional[str] = None


class LotDetailResponse(LotState):
    """Full lot state plus display strings."""

    availability: str
    hourly_rate_display: str
    is_current: bool


class SelectLotRequest(BaseModel):
    """Request to change the current lot."""

    name: str


class OccupyRequest(BaseModel):
    """Request to park a vehicle in a spot."""

    vehicle_id: str


class SpotActionResponse(BaseModel):
    """Result of an occupy or vacate request."""

    lot_name: str
    spot: SpotState
    available: int
    total_spots: int


class ClickRequest(BaseModel):
    """A click on a spot of the current lot, addressed as "row,col"."""

    coordinates: str
    vehicle_id: Optional[str] = None


class ClickResponse(BaseModel):
    """Outcome of a click; ignored clicks leave state untouched."""

    handled: bool
    action: Optional[str] = None  # "occupied" or "vacated"
    spot: Optional[SpotState] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    lot_count: int
    current_lot: Optional[str] = None
    uptime_seconds: float
