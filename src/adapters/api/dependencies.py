from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.config import env_bool, env_float
from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.knowledge.duckduckgo_source import DuckDuckGoInstantAnswerSource
from src.adapters.knowledge.wikipedia_source import WikipediaSummarySource
from src.adapters.llm.chat_completion_providers import providers_from_env
from src.adapters.location.ip_location_providers import default_location_providers
from src.adapters.persistence import (
    DEFAULT_FACILITIES,
    DEMO_DRIVERS,
    StaticFleetRepository,
    facility_repository_for,
)
from src.adapters.scheduling.asyncio_tick_scheduler import AsyncioTickScheduler
from src.app.ports.output import ITickScheduler
from src.app.services.booking_session import BookingSession
from src.app.services.facility_catalog import FacilityCatalog
from src.app.services.fleet_quote_service import FleetQuoteService
from src.app.services.knowledge_service import KnowledgeService
from src.app.services.llm_proxy_service import LlmProxyService
from src.app.services.location_service import LocationService
from src.app.services.tile_map_renderer import (
    DEFAULT_TILE_URL_TEMPLATE,
    TileMapRenderer,
)
from src.app.services.tracking_session import TrackingSession
from src.app.services.trip_simulator import DEFAULT_TICK_PERIOD_S, TripSimulator
from src.domain.models import GeoPoint

# Esplanade, Kolkata.
DEFAULT_MAP_CENTER = GeoPoint(lat=22.5726, lng=88.3639)


def _map_factory():
    zoom = int(os.getenv("MAP_ZOOM") or 14)
    width = env_float("MAP_WIDTH_PX", 768.0)
    height = env_float("MAP_HEIGHT_PX", 512.0)
    template = os.getenv("TILE_URL_TEMPLATE") or DEFAULT_TILE_URL_TEMPLATE

    def build(center: GeoPoint) -> TileMapRenderer:
        return TileMapRenderer(
            center=center,
            zoom=zoom,
            width_px=width,
            height_px=height,
            tile_url_template=template,
        )

    return build


def get_llm_proxy_service() -> LlmProxyService:
    return LlmProxyService(providers=providers_from_env())


def get_knowledge_service() -> KnowledgeService:
    return KnowledgeService(
        llm=get_llm_proxy_service(),
        sources=(DuckDuckGoInstantAnswerSource(), WikipediaSummarySource()),
    )


@lru_cache(maxsize=1)
def get_booking_session() -> BookingSession:
    """The single demo session shared by every request."""

    map_factory = _map_factory()

    scheduler: ITickScheduler | None = None
    if env_bool("TRIP_AUTO_TICK", True):
        scheduler = AsyncioTickScheduler()

    simulator = TripSimulator(
        tick_period_s=env_float("TRIP_TICK_PERIOD_S", DEFAULT_TICK_PERIOD_S),
        scheduler=scheduler,
    )

    return BookingSession(
        catalog=FacilityCatalog(
            fallback=DEFAULT_FACILITIES, repository=facility_repository_for()
        ),
        quote_service=FleetQuoteService(fleet_repository=StaticFleetRepository()),
        location=LocationService(
            geocoder=NominatimGeocoder(), providers=default_location_providers()
        ),
        booking_map=map_factory(DEFAULT_MAP_CENTER),
        tracking=TrackingSession(
            simulator=simulator, map_factory=map_factory, drivers=DEMO_DRIVERS
        ),
    )
