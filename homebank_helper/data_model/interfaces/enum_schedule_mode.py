from __future__ import annotations

from enum import Enum


class ScheduleModeKind(Enum):
    """
    How scheduled transactions are added automatically.

    ``NOT_SET``: neither mode chosen yet.
    ``ADD``: add this many days in advance of today.
    ``ADD_UNTIL``: add until this day of each month (excluded).
    """

    NOT_SET = "not_set"
    ADD = "add"
    ADD_UNTIL = "add_until"
