# Domain records
from ouraring.models.summary import (
    Sleep,
    Activity,
    Readiness,
    RestModeState,
    SleepStage,
    ActivityClass,
)

__all__ = [
    "Sleep",
    "Activity",
    "Readiness",
    "RestModeState",
    "SleepStage",
    "ActivityClass",
]
