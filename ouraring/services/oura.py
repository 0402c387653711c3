"""Oura Ring v1 API client.

The v1 API takes the personal access token as an `access_token` query
parameter, so it is part of every request URL. httpx logs request URLs on
its own `httpx` logger at INFO; importing this module installs a filter on
that logger which masks the token value.
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

import httpx
from pydantic import BaseModel, ValidationError

from ouraring.core.config import DEFAULT_BASE_URL, Settings, get_settings
from ouraring.models.summary import Sleep, Activity, Readiness
from ouraring.schemas.responses import (
    FetchResult,
    SleepEnvelope,
    ActivityEnvelope,
    ReadinessEnvelope,
)
from ouraring.services.errors import HttpError, AuthError, TransportError, DecodeError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, None]

# Resource path -> envelope model; the envelope's list field shares the path name
RESOURCES: dict[str, type[BaseModel]] = {
    "sleep": SleepEnvelope,
    "activity": ActivityEnvelope,
    "readiness": ReadinessEnvelope,
}

AUTH_STATUS_CODES = (401, 403)

_ACCESS_TOKEN_RE = re.compile(r"(access_token=)[^&\s\"']+")


class RedactAccessToken(logging.Filter):
    """Mask access_token query values in log record arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, tuple):
            record.args = tuple(_redact(arg) for arg in record.args)
        elif isinstance(record.msg, str):
            record.msg = _redact(record.msg)
        return True


def _redact(value):
    text = str(value)
    if "access_token=" not in text:
        return value
    return _ACCESS_TOKEN_RE.sub(r"\1***", text)


_redact_filter = RedactAccessToken()
logging.getLogger("httpx").addFilter(_redact_filter)


def _format_date(value: Union[str, date]) -> str:
    """Format a date as YYYY-MM-DD; strings are passed through untouched."""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def _error_message(response: httpx.Response) -> str:
    """Pull the server-provided message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("detail", "message", "title"):
            if body.get(key):
                return str(body[key])

    if response.text:
        return response.text[:500]
    return response.reason_phrase


class OuraClient:
    """Synchronous client for the Oura v1 REST API.

    Each fetch is an independent GET; the only state held between calls is
    the read-only configuration and the pooled HTTP connection.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        default_window_days: int = 7,
        today: Callable[[], date] = date.today,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._access_token = access_token
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout
        self._default_window_days = default_window_days
        self._today = today
        self._transport = transport
        self.client: Optional[httpx.Client] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "OuraClient":
        """Build a client from OURA_* settings; kwargs override them."""
        settings = settings or get_settings()
        options = {
            "base_url": settings.base_url,
            "timeout": settings.request_timeout,
            "default_window_days": settings.default_window_days,
        }
        options.update(kwargs)
        return cls(settings.access_token, **options)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def default_window_days(self) -> int:
        return self._default_window_days

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self.client is None:
            self.client = httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
            )
        return self.client

    def close(self):
        """Close the HTTP client."""
        if self.client:
            self.client.close()
            self.client = None

    def __enter__(self) -> "OuraClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def default_window(self) -> tuple[str, str]:
        """Return (start, end) for the default range ending today."""
        today = self._today()
        start = today - timedelta(days=self._default_window_days)
        return _format_date(start), _format_date(today)

    def _resolve_window(self, date_from: DateLike, date_to: DateLike) -> tuple[str, str]:
        if date_from is not None and date_to is not None:
            return _format_date(date_from), _format_date(date_to)

        # Both defaults come from a single reading of the clock
        default_start, default_end = self.default_window()
        start = default_start if date_from is None else _format_date(date_from)
        end = default_end if date_to is None else _format_date(date_to)
        return start, end

    def request(self, resource: str, date_from: DateLike = None, date_to: DateLike = None) -> httpx.Response:
        """
        GET one resource for a date range and return the raw response.

        Raises:
            TransportError: The request did not complete.
            DecodeError: The body could not be decompressed.
        """
        if resource not in RESOURCES:
            raise ValueError(f"Unknown Oura resource: {resource}")

        start, end = self._resolve_window(date_from, date_to)
        url = f"{self._base_url}/{resource}"
        params = {"start": start, "end": end, "access_token": self._access_token}

        logger.info(f"Fetching Oura {resource} from {start} to {end}")
        logger.debug(f"GET {url} start={start} end={end}")

        client = self._get_client()
        try:
            return client.get(url, params=params)
        except httpx.DecodingError as e:
            logger.error(f"Oura {resource} response body could not be decoded: {e}")
            raise DecodeError(e) from e
        except httpx.RequestError as e:
            logger.error(f"Oura {resource} request failed: {e}")
            raise TransportError(e) from e

    def fetch(self, resource: str, date_from: DateLike = None, date_to: DateLike = None) -> FetchResult:
        """
        Fetch one resource collection for a date range.

        Args:
            resource: One of "sleep", "activity", "readiness"
            date_from: First day (YYYY-MM-DD or date), defaults to today minus the window
            date_to: Last day (YYYY-MM-DD or date), defaults to today

        Returns:
            FetchResult with the decoded records, or an empty list and an
            HttpError when the server answers with a non-200 status.

        Raises:
            TransportError: The request did not complete.
            DecodeError: A 200 body could not be decoded into records.
        """
        response = self.request(resource, date_from, date_to)
        envelope_model = RESOURCES[resource]

        if response.status_code != 200:
            logger.warning(
                f"Oura {resource} returned HTTP {response.status_code}: {response.text[:200]}"
            )
            error_class = AuthError if response.status_code in AUTH_STATUS_CODES else HttpError
            safe_url = str(response.request.url.copy_remove_param("access_token"))
            return FetchResult(
                records=[],
                error=error_class(response.status_code, _error_message(response), safe_url),
            )

        try:
            envelope = envelope_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Failed to decode Oura {resource} response: {e}, body: {response.text[:200]}")
            raise DecodeError(e) from e

        records = list(getattr(envelope, resource))
        logger.info(f"Fetched {len(records)} {resource} records from Oura")
        return FetchResult(records=records, error=None)

    def fetch_sleep(self, date_from: DateLike = None, date_to: DateLike = None) -> FetchResult[Sleep]:
        """Fetch sleep periods."""
        return self.fetch("sleep", date_from, date_to)

    def fetch_activity(self, date_from: DateLike = None, date_to: DateLike = None) -> FetchResult[Activity]:
        """Fetch activity days."""
        return self.fetch("activity", date_from, date_to)

    def fetch_readiness(self, date_from: DateLike = None, date_to: DateLike = None) -> FetchResult[Readiness]:
        """Fetch readiness assessments."""
        return self.fetch("readiness", date_from, date_to)
