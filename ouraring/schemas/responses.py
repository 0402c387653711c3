"""Response envelopes and fetch results."""

from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ouraring.models.summary import Sleep, Activity, Readiness
from ouraring.services.errors import HttpError

T = TypeVar("T")


class _Envelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class SleepEnvelope(_Envelope):
    """Top-level body of GET /sleep."""
    sleep: list[Sleep]


class ActivityEnvelope(_Envelope):
    """Top-level body of GET /activity."""
    activity: list[Activity]


class ReadinessEnvelope(_Envelope):
    """Top-level body of GET /readiness."""
    readiness: list[Readiness]


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Records from one fetch, or an empty list and the HTTP error."""
    records: list[T] = field(default_factory=list)
    error: Optional[HttpError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator:
        # Allows `records, error = client.fetch_sleep(...)`
        return iter((self.records, self.error))
