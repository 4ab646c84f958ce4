from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class ScreenPointSchema(BaseModel):
    client_x: float
    client_y: float


class PickupResponseSchema(BaseModel):
    location: GeoPointSchema
    label: str | None = None
    generation: int


class TileSchema(BaseModel):
    zoom: int
    x: int
    y: int
    url: str
    left_px: float
    top_px: float
    size_px: int


class MarkerSchema(BaseModel):
    id: str
    label: str
    location: GeoPointSchema
    left_px: float
    top_px: float


class MapViewSchema(BaseModel):
    center: GeoPointSchema
    zoom: int
    width_px: float
    height_px: float
    tiles: list[TileSchema]
    markers: list[MarkerSchema]


class FacilitySchema(BaseModel):
    name: str
    category: str
    area: str
    location: GeoPointSchema
    aliases: list[str] = []
    popularity: int = 0


class SuggestionSchema(BaseModel):
    facility: FacilitySchema
    distance_km: float | None = None


class DestinationSelectSchema(BaseModel):
    name: str


class QuoteRequestSchema(BaseModel):
    service_class: str = "Any"
    destination_text: str = ""
    phone: str = ""


class VehicleSchema(BaseModel):
    id: str
    vehicle_class: str
    location: GeoPointSchema
    base_fare: float
    per_km_rate: float
    speed_kmph: float


class QuoteSchema(BaseModel):
    index: int
    vehicle: VehicleSchema
    distance_to_pickup_km: float
    trip_distance_km: float
    eta_to_pickup_minutes: int
    fare_estimate: int
    destination: GeoPointSchema


class QuotesResponseSchema(BaseModel):
    quotes: list[QuoteSchema]
    message: str | None = None
