from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..interfaces import ScheduleModeKind


@dataclass(frozen=True)
class ScheduleMode:
    """
    How scheduled transactions are posted.

    ``ADD_UNTIL`` carries ``weekday`` (day of the month), ``ADD`` carries
    ``nbdays`` (days in advance); ``NOT_SET`` keeps whatever was stored.
    """

    kind: ScheduleModeKind = ScheduleModeKind.NOT_SET
    weekday: Optional[int] = None
    nbdays: Optional[int] = None

    @classmethod
    def resolve(
        cls,
        smode: Optional[int],
        weekday: Optional[int],
        nbdays: Optional[int],
    ) -> "ScheduleMode":
        """Combine the three ``auto_*`` attributes, whatever order they came in."""
        if smode is None:
            return cls(ScheduleModeKind.NOT_SET, weekday, nbdays)
        if smode == 0:
            return cls(ScheduleModeKind.ADD_UNTIL, weekday=weekday if weekday is not None else 1)
        if smode == 1:
            return cls(ScheduleModeKind.ADD, nbdays=nbdays if nbdays is not None else 0)
        raise ValueError(f"Unknown schedule mode: {smode}")


@dataclass(frozen=True)
class DbProperties:
    """Database-wide settings (``<properties>``)."""

    title: str = ""
    currency: int = 1
    vehicle_category: int = 1
    schedule_mode: ScheduleMode = field(default_factory=ScheduleMode)


@dataclass(frozen=True)
class DbSchema:
    """The ``<homebank>`` root attributes: file format and data versions."""

    version: str = "1.3999999999999999"
    data_version: str = "050504"
    saved: Optional[date] = None
