from abc import ABC, abstractmethod
from datetime import date
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

from questlog.core.constants import KM_TO_MILES, LAP_LENGTH_M
from questlog.core.time_utils import format_day, pace_min_per_mile, speed_mph


class ActivityKind(str, Enum):
    running = "running"
    cycling = "cycling"
    swimming = "swimming"


class ActivityBase(BaseModel, ABC):
    kind: ActivityKind
    date: date
    minutes: int = Field(gt=0)

    # Display name used in summaries, e.g. "Running"
    @property
    def label(self) -> str:
        return self.kind.value.capitalize()

    @abstractmethod
    def distance(self) -> float:
        """Distance in miles."""

    def speed(self) -> float:
        """Average speed in mph."""
        return speed_mph(self.minutes, self.distance())

    def pace(self) -> float:
        """Minutes per mile."""
        return pace_min_per_mile(self.minutes, self.distance())

    def summary(self) -> str:
        return (
            f"{format_day(self.date)} {self.label} ({self.minutes} min) - "
            f"Distance {self.distance():.1f} miles, "
            f"Speed {self.speed():.1f} mph, "
            f"Pace: {self.pace():.2f} min per mile"
        )


class Running(ActivityBase):
    kind: ActivityKind = ActivityKind.running
    distance_mi: float = Field(ge=0)

    def distance(self) -> float:
        return self.distance_mi


class Cycling(ActivityBase):
    kind: ActivityKind = ActivityKind.cycling
    speed_mph: float = Field(ge=0)

    def distance(self) -> float:
        # distance = speed * hours
        return self.speed_mph * self.minutes / 60.0

    def speed(self) -> float:
        return self.speed_mph

    def pace(self) -> float:
        if self.speed_mph <= 0:
            return 0.0
        return 60.0 / self.speed_mph


class Swimming(ActivityBase):
    kind: ActivityKind = ActivityKind.swimming
    laps: int = Field(ge=0)

    def distance(self) -> float:
        km = self.laps * LAP_LENGTH_M / 1000.0
        return km * KM_TO_MILES


Activity = Union[Running, Cycling, Swimming]
