from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_booking_session
from src.adapters.api.presenters import (
    facility_to_schema,
    map_to_schema,
    point_schema,
    quote_to_schema,
    suggestion_to_schema,
)
from src.adapters.api.schemas.booking import (
    DestinationSelectSchema,
    FacilitySchema,
    GeoPointSchema,
    MapViewSchema,
    PickupResponseSchema,
    QuoteRequestSchema,
    QuotesResponseSchema,
    ScreenPointSchema,
    SuggestionSchema,
)
from src.app.services.booking_session import BookingRequest, BookingSession
from src.domain.exceptions import BookingValidationError
from src.domain.models import GeoPoint

router = APIRouter(prefix="/booking", tags=["booking"])

NO_VEHICLES_MESSAGE = (
    "No vehicles available for selected service at the moment. "
    "Please try another service type or resubmit."
)


def _pickup_response(session: BookingSession) -> PickupResponseSchema:
    if session.pickup is None:
        raise BookingValidationError("Please set pickup location first.")
    return PickupResponseSchema(
        location=point_schema(session.pickup),
        label=session.pickup_label,
        generation=session.pickup_generation,
    )


@router.get("/map", response_model=MapViewSchema)
async def get_booking_map(
    session: BookingSession = Depends(get_booking_session),
) -> MapViewSchema:
    return map_to_schema(session.booking_map)


@router.get("/facilities", response_model=list[SuggestionSchema])
async def suggest_facilities(
    q: str = Query(default=""),
    session: BookingSession = Depends(get_booking_session),
) -> list[SuggestionSchema]:
    await session.catalog.ensure_loaded()
    return [
        suggestion_to_schema(s)
        for s in session.catalog.suggest(q, pickup=session.pickup)
    ]


@router.post("/pickup", response_model=PickupResponseSchema)
async def set_pickup(
    req: GeoPointSchema,
    session: BookingSession = Depends(get_booking_session),
) -> PickupResponseSchema:
    session.set_pickup(GeoPoint(lat=req.lat, lng=req.lng))
    await session.label_pickup()
    return _pickup_response(session)


@router.post("/pickup/screen", response_model=PickupResponseSchema)
async def set_pickup_from_screen(
    req: ScreenPointSchema,
    session: BookingSession = Depends(get_booking_session),
) -> PickupResponseSchema:
    session.set_pickup_from_screen(req.client_x, req.client_y)
    await session.label_pickup()
    return _pickup_response(session)


@router.post("/pickup/locate", response_model=PickupResponseSchema)
async def locate_pickup(
    session: BookingSession = Depends(get_booking_session),
) -> PickupResponseSchema:
    await session.locate_pickup()
    return _pickup_response(session)


@router.post("/destination", response_model=FacilitySchema)
async def select_destination(
    req: DestinationSelectSchema,
    session: BookingSession = Depends(get_booking_session),
) -> FacilitySchema:
    await session.catalog.ensure_loaded()
    return facility_to_schema(session.select_destination(req.name))


@router.delete("/destination", status_code=204)
async def clear_destination(session: BookingSession = Depends(get_booking_session)) -> None:
    session.clear_destination()


@router.post("/quotes", response_model=QuotesResponseSchema)
async def search_quotes(
    req: QuoteRequestSchema,
    session: BookingSession = Depends(get_booking_session),
) -> QuotesResponseSchema:
    await session.catalog.ensure_loaded()
    quotes = await session.search(
        BookingRequest(
            service_class=req.service_class,
            destination_text=req.destination_text,
            phone=req.phone,
        )
    )
    return QuotesResponseSchema(
        quotes=[quote_to_schema(i, q) for i, q in enumerate(quotes)],
        message=None if quotes else NO_VEHICLES_MESSAGE,
    )
