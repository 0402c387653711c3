"""Typed daily summary records returned by the Oura v1 API.

See https://cloud.ouraring.com/docs/ for the field reference.
"""

from datetime import date, datetime
from enum import IntEnum, Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Range 1-100, or 0 if not available
Score = Annotated[int, Field(ge=0, le=100)]
Percent = Annotated[int, Field(ge=0, le=100)]
Seconds = Annotated[int, Field(ge=0)]
Minutes = Annotated[int, Field(ge=0)]


class RestModeState(IntEnum):
    """Rest Mode state for a day or sleep period."""
    OFF = 0
    ENTERING_REST_MODE = 1
    REST_MODE = 2
    ENTERING_RECOVERY = 3
    RECOVERING = 4


class SleepStage(str, Enum):
    """Hypnogram character codes."""
    DEEP = "1"
    LIGHT = "2"
    REM = "3"
    AWAKE = "4"


class ActivityClass(str, Enum):
    """Activity class codes used in class_5min."""
    NON_WEAR = "0"
    REST = "1"  # MET below 1.05
    INACTIVE = "2"  # MET between 1.05 and 2
    LOW = "3"
    MEDIUM = "4"
    HIGH = "5"


class _Summary(BaseModel):
    """Immutable record; unknown keys from newer API versions are dropped."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Sleep(_Summary):
    """
    One sleep period.

    A sleep period is a nearly continuous stretch of time spent lying down
    in bed. summary_date is one day before the date the period ended.
    """

    summary_date: date
    period_id: int = Field(ge=0)  # 0 = first sleep period of the day
    is_longest: int = Field(ge=0, le=1)
    timezone: int  # offset from UTC in minutes, e.g. 180 for EEST
    bedtime_start: datetime
    bedtime_end: datetime

    score: Score
    score_total: Score
    score_disturbances: Score
    score_efficiency: Score
    score_latency: Score
    score_rem: Score
    score_deep: Score
    score_alignment: Score

    total: Seconds
    duration: Seconds
    awake: Seconds
    light: Seconds
    rem: Seconds
    deep: Seconds
    onset_latency: Seconds
    midpoint_time: Seconds
    restless: Percent
    efficiency: Percent

    hr_lowest: int  # bpm, lowest 5 minute sliding average
    hr_average: float  # bpm
    rmssd: int  # ms
    breath_average: float  # breaths per minute
    temperature_delta: float  # Celsius deviation from long-term average

    hypnogram_5min: str = Field(pattern=r"^[1-4]*$")
    hr_5min: list[int]
    rmssd_5min: list[int]

    @model_validator(mode="after")
    def check_totals(self) -> "Sleep":
        if self.total != self.rem + self.light + self.deep:
            raise ValueError(
                f"total ({self.total}) must equal rem + light + deep "
                f"({self.rem + self.light + self.deep})"
            )
        buckets = len(self.hypnogram_5min)
        if len(self.hr_5min) != buckets or len(self.rmssd_5min) != buckets:
            raise ValueError(
                f"5 minute series lengths differ: hypnogram={buckets}, "
                f"hr={len(self.hr_5min)}, rmssd={len(self.rmssd_5min)}"
            )
        return self

    @property
    def key(self) -> tuple[date, int]:
        return (self.summary_date, self.period_id)

    @property
    def is_longest_period(self) -> bool:
        return self.is_longest == 1

    @property
    def hypnogram_stages(self) -> list[SleepStage]:
        """Decode hypnogram_5min, one stage per 5 minutes from bedtime_start."""
        return [SleepStage(c) for c in self.hypnogram_5min]


class Activity(_Summary):
    """
    One activity day.

    An Oura activity day runs from 4 AM to 3:59 AM user's local time.
    """

    summary_date: date
    day_start: datetime
    day_end: datetime
    timezone: int

    score: Score
    score_stay_active: Score
    score_move_every_hour: Score
    score_meet_daily_targets: Score
    score_training_frequency: Score
    score_training_volume: Score
    score_recovery_time: Score

    daily_movement: int = Field(ge=0)  # equivalent walking meters
    non_wear: Minutes
    rest: Minutes
    inactive: Minutes
    inactivity_alerts: int = Field(ge=0)
    low: Minutes
    medium: Minutes
    high: Minutes
    steps: int = Field(ge=0)

    # Energy
    cal_total: int  # kcal, including BMR
    cal_active: int
    met_min_inactive: int
    met_min_low: int
    met_min_medium_plus: int
    met_min_medium: int
    met_min_high: int
    average_met: float

    class_5min: str = Field(pattern=r"^[0-5]*$")
    met_1min: list[float]

    # Missing for days before Rest Mode was available
    rest_mode_state: Optional[RestModeState] = None

    @property
    def key(self) -> date:
        return self.summary_date

    @property
    def activity_classes(self) -> list[ActivityClass]:
        return [ActivityClass(c) for c in self.class_5min]


class Readiness(_Summary):
    """Readiness assessment for one sleep period."""

    summary_date: date
    period_id: int = Field(ge=0)

    score: Score
    score_previous_night: Score
    score_sleep_balance: Score
    score_previous_day: Score
    score_activity_balance: Score
    score_resting_hr: Score
    # Absent for dates before HRV balance was introduced
    score_hrv_balance: Optional[Score] = None
    score_recovery_index: Score
    score_temperature: Score

    rest_mode_state: Optional[RestModeState] = None

    @property
    def key(self) -> tuple[date, int]:
        return (self.summary_date, self.period_id)
