from __future__ import annotations

from pydantic import BaseModel, Field

from src.adapters.api.schemas.booking import GeoPointSchema, MapViewSchema, VehicleSchema


class BookRequestSchema(BaseModel):
    quote_index: int = Field(0, ge=0)


class AdvanceRequestSchema(BaseModel):
    elapsed_s: float = Field(..., ge=0.0)


class DriverSchema(BaseModel):
    name: str
    phone: str
    vehicle_registration: str


class TripProgressSchema(BaseModel):
    status: str
    location: GeoPointSchema
    segment_index: int
    progress_m: float
    fraction: float
    remaining_km: float
    eta_minutes: int


class TrackingSchema(BaseModel):
    trip_id: str
    vehicle: VehicleSchema
    info_text: str
    live_fare: int | None = None
    live_eta_minutes: int | None = None
    progress: TripProgressSchema
    driver: DriverSchema | None = None
    map: MapViewSchema | None = None


class TripEndedSchema(BaseModel):
    message: str
