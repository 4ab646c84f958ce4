from .facility import Facility, FacilitySuggestion
from .fleet import DriverProfile, Quote, ServiceClass, Vehicle, VehicleClass
from .geo import GeoPoint
from .knowledge import KnowledgeAnswer, LlmAnswer
from .map import MapMarker, TilePlacement, TileRef
from .trip import TripProgress, TripSegment, TripStatus

__all__ = [
    "DriverProfile",
    "Facility",
    "FacilitySuggestion",
    "GeoPoint",
    "KnowledgeAnswer",
    "LlmAnswer",
    "MapMarker",
    "Quote",
    "ServiceClass",
    "TilePlacement",
    "TileRef",
    "TripProgress",
    "TripSegment",
    "TripStatus",
    "Vehicle",
    "VehicleClass",
]
