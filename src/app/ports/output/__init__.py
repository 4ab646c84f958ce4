from .facility_repository import IFacilityRepository
from .fleet_repository import IFleetRepository
from .geocoder import IGeocoder
from .knowledge_source import IKnowledgeSource
from .llm_client import IChatCompletionProvider, ILlmClient
from .location_provider import IApproxLocationProvider
from .tick_scheduler import ITickHandle, ITickScheduler

__all__ = [
    "IApproxLocationProvider",
    "IChatCompletionProvider",
    "IFacilityRepository",
    "IFleetRepository",
    "IGeocoder",
    "IKnowledgeSource",
    "ILlmClient",
    "ITickHandle",
    "ITickScheduler",
]
