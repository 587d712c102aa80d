"""
Clock — Simulated time of day for the house.

Time only moves on the needs tick. Everything else (hour, weekday,
day/night, whether it is bedtime) is derived from elapsed_minutes so the
clock has a single source of truth.
"""

import math
from dataclasses import dataclass
from enum import Enum

from dollhouse.config import (
    DEFAULT_SPEED_MULTIPLIER, START_MINUTE, BEDTIME_MINUTE, WAKETIME_MINUTE,
    NIGHT_START_HOUR, NIGHT_END_HOUR, MORNING_HOURS, EVENING_HOURS,
    NIGHT_DECAY_MULTIPLIER,
)

MINUTES_PER_DAY: int = 24 * 60

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class TimeOfDay(Enum):
    NIGHT = "night"
    MORNING = "morning"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"
    EVENING = "evening"


@dataclass
class SimClock:
    """Elapsed simulated minutes plus the household's sleep schedule."""
    elapsed_minutes: float = START_MINUTE
    speed_multiplier: float = DEFAULT_SPEED_MULTIPLIER
    bedtime_minute_of_day: int = BEDTIME_MINUTE
    waketime_minute_of_day: int = WAKETIME_MINUTE

    def advance(self) -> None:
        """Advance one needs tick."""
        self.elapsed_minutes += self.speed_multiplier / 60.0

    # ================================================================
    # DERIVED TIME
    # ================================================================

    @property
    def hour(self) -> int:
        return int(math.floor(self.elapsed_minutes / 60)) % 24

    @property
    def minute_of_day(self) -> float:
        return self.elapsed_minutes % MINUTES_PER_DAY

    @property
    def day(self) -> int:
        """1-based day counter."""
        return int(self.elapsed_minutes // MINUTES_PER_DAY) + 1

    @property
    def day_of_week(self) -> int:
        return int(math.floor(self.elapsed_minutes / MINUTES_PER_DAY)) % 7

    @property
    def weekday_name(self) -> str:
        return WEEKDAYS[self.day_of_week]

    @property
    def is_night(self) -> bool:
        return self.hour >= NIGHT_START_HOUR or self.hour < NIGHT_END_HOUR

    @property
    def is_day(self) -> bool:
        return not self.is_night

    @property
    def is_morning(self) -> bool:
        return MORNING_HOURS[0] <= self.hour < MORNING_HOURS[1]

    @property
    def is_evening(self) -> bool:
        return EVENING_HOURS[0] <= self.hour < EVENING_HOURS[1]

    @property
    def night_multiplier(self) -> float:
        """Needs decay slows down at night."""
        return NIGHT_DECAY_MULTIPLIER if self.is_night else 1.0

    @property
    def time_of_day(self) -> TimeOfDay:
        if self.is_night:
            return TimeOfDay.NIGHT
        if self.hour < 11:
            return TimeOfDay.MORNING
        if self.hour < 14:
            return TimeOfDay.MIDDAY
        if self.hour < EVENING_HOURS[0]:
            return TimeOfDay.AFTERNOON
        return TimeOfDay.EVENING

    # ================================================================
    # SLEEP SCHEDULE
    # ================================================================

    def is_past_bedtime(self) -> bool:
        return self.minute_of_day >= self.bedtime_minute_of_day

    def is_wake_time(self) -> bool:
        """Between waketime and bedtime: a sleeper should get up."""
        m = self.minute_of_day
        return self.waketime_minute_of_day <= m < self.bedtime_minute_of_day

    def in_sleep_window(self) -> bool:
        return not self.is_wake_time()

    # ================================================================
    # PRESENTATION
    # ================================================================

    def daylight(self) -> float:
        """0.0 at midnight, 1.0 through the middle of the day."""
        h = self.minute_of_day / 60.0
        if NIGHT_END_HOUR + 2 <= h < NIGHT_START_HOUR - 3:
            return 1.0
        if NIGHT_END_HOUR <= h < NIGHT_END_HOUR + 2:
            return 0.4 + 0.6 * (h - NIGHT_END_HOUR) / 2.0
        if NIGHT_START_HOUR - 3 <= h < NIGHT_START_HOUR:
            return 1.0 - 0.6 * (h - (NIGHT_START_HOUR - 3)) / 3.0
        return 0.4

    def time_label(self) -> str:
        m = int(self.minute_of_day)
        return f"{self.weekday_name} {m // 60:02d}:{m % 60:02d}"
