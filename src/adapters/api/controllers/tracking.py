from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_booking_session
from src.adapters.api.presenters import tracking_to_schema
from src.adapters.api.schemas.tracking import (
    AdvanceRequestSchema,
    BookRequestSchema,
    TrackingSchema,
    TripEndedSchema,
)
from src.app.services.booking_session import BookingSession

router = APIRouter(prefix="/tracking", tags=["tracking"])

TRIP_ENDED_MESSAGE = "Trip ended. Thank you for using Arogya."


# Handlers stay on the event loop: the session is shared and the tick
# scheduler needs the running loop.
@router.post("", response_model=TrackingSchema)
async def book_quote(
    req: BookRequestSchema,
    session: BookingSession = Depends(get_booking_session),
) -> TrackingSchema:
    session.book(req.quote_index)
    return tracking_to_schema(session.tracking)


@router.get("", response_model=TrackingSchema)
async def get_tracking(
    session: BookingSession = Depends(get_booking_session),
) -> TrackingSchema:
    return tracking_to_schema(session.tracking)


@router.post("/advance", response_model=TrackingSchema)
async def advance_trip(
    req: AdvanceRequestSchema,
    session: BookingSession = Depends(get_booking_session),
) -> TrackingSchema:
    session.tracking.advance(req.elapsed_s)
    return tracking_to_schema(session.tracking)


@router.delete("", response_model=TripEndedSchema)
async def end_trip(
    session: BookingSession = Depends(get_booking_session),
) -> TripEndedSchema:
    session.tracking.end_trip()
    return TripEndedSchema(message=TRIP_ENDED_MESSAGE)
