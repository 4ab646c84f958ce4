from __future__ import annotations

from src.adapters.api.schemas.booking import (
    FacilitySchema,
    GeoPointSchema,
    MapViewSchema,
    MarkerSchema,
    QuoteSchema,
    SuggestionSchema,
    TileSchema,
    VehicleSchema,
)
from src.adapters.api.schemas.tracking import (
    DriverSchema,
    TrackingSchema,
    TripProgressSchema,
)
from src.app.services.tile_map_renderer import TileMapRenderer
from src.app.services.tracking_session import TrackingSession
from src.domain.exceptions import NoActiveTrip
from src.domain.models import (
    Facility,
    FacilitySuggestion,
    GeoPoint,
    Quote,
    TripProgress,
    Vehicle,
)


def point_schema(point: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=point.lat, lng=point.lng)


def map_to_schema(view: TileMapRenderer) -> MapViewSchema:
    return MapViewSchema(
        center=point_schema(view.center),
        zoom=view.zoom,
        width_px=view.width_px,
        height_px=view.height_px,
        tiles=[
            TileSchema(
                zoom=t.tile.zoom,
                x=t.tile.x,
                y=t.tile.y,
                url=t.url,
                left_px=t.left_px,
                top_px=t.top_px,
                size_px=t.size_px,
            )
            for t in view.tiles
        ],
        markers=[
            MarkerSchema(
                id=m.id,
                label=m.label,
                location=point_schema(m.position),
                left_px=m.left_px,
                top_px=m.top_px,
            )
            for m in view.markers.values()
        ],
    )


def facility_to_schema(facility: Facility) -> FacilitySchema:
    return FacilitySchema(
        name=facility.name,
        category=facility.category,
        area=facility.area,
        location=point_schema(facility.position),
        aliases=list(facility.aliases),
        popularity=facility.popularity,
    )


def suggestion_to_schema(suggestion: FacilitySuggestion) -> SuggestionSchema:
    return SuggestionSchema(
        facility=facility_to_schema(suggestion.facility),
        distance_km=suggestion.distance_km,
    )


def vehicle_to_schema(vehicle: Vehicle) -> VehicleSchema:
    return VehicleSchema(
        id=vehicle.id,
        vehicle_class=vehicle.vehicle_class.value,
        location=point_schema(vehicle.position),
        base_fare=vehicle.base_fare,
        per_km_rate=vehicle.per_km_rate,
        speed_kmph=vehicle.speed_kmph,
    )


def quote_to_schema(index: int, quote: Quote) -> QuoteSchema:
    return QuoteSchema(
        index=index,
        vehicle=vehicle_to_schema(quote.vehicle),
        distance_to_pickup_km=quote.distance_to_pickup_km,
        trip_distance_km=quote.trip_distance_km,
        eta_to_pickup_minutes=quote.eta_to_pickup_minutes,
        fare_estimate=quote.fare_estimate,
        destination=point_schema(quote.destination),
    )


def progress_to_schema(progress: TripProgress) -> TripProgressSchema:
    return TripProgressSchema(
        status=progress.status.value,
        location=point_schema(progress.position),
        segment_index=progress.segment_index,
        progress_m=progress.progress_m,
        fraction=progress.fraction,
        remaining_km=progress.remaining_km,
        eta_minutes=progress.eta_minutes,
    )


def tracking_to_schema(tracking: TrackingSession) -> TrackingSchema:
    quote = tracking.quote
    if quote is None or tracking.trip_id is None:
        raise NoActiveTrip("No trip is being tracked")
    progress = tracking.current()

    driver = tracking.driver
    return TrackingSchema(
        trip_id=tracking.trip_id,
        vehicle=vehicle_to_schema(quote.vehicle),
        info_text=tracking.info_text,
        live_fare=tracking.live_fare,
        live_eta_minutes=tracking.live_eta_minutes,
        progress=progress_to_schema(progress),
        driver=(
            DriverSchema(
                name=driver.name,
                phone=driver.phone,
                vehicle_registration=driver.vehicle_registration,
            )
            if driver
            else None
        ),
        map=map_to_schema(tracking.track_map) if tracking.track_map else None,
    )
