"""Client for the Oura Ring v1 health-data API."""

from ouraring.core.config import DEFAULT_BASE_URL, Settings, get_settings
from ouraring.models import (
    Sleep,
    Activity,
    Readiness,
    RestModeState,
    SleepStage,
    ActivityClass,
)
from ouraring.schemas.responses import FetchResult
from ouraring.services.errors import (
    OuraError,
    HttpError,
    AuthError,
    TransportError,
    DecodeError,
)
from ouraring.services.oura import OuraClient

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "Settings",
    "get_settings",
    "Sleep",
    "Activity",
    "Readiness",
    "RestModeState",
    "SleepStage",
    "ActivityClass",
    "FetchResult",
    "OuraError",
    "HttpError",
    "AuthError",
    "TransportError",
    "DecodeError",
    "OuraClient",
]
