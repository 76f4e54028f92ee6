"""
LienPilot Deadline Calculator

Calculates the controlling mechanics lien filing deadline.

Key features:
- Calendar-month arithmetic ("15th day of the Nth month after"), never a
  fixed day count
- End-of-month clamping when advancing months
- Explicit evaluation date; nothing here reads the system clock
- Unknown last work date yields an "unknown" result instead of an error
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..models import (
    DEFAULT_RULES,
    UNKNOWN_DEADLINE,
    DeadlineResult,
    RoleTier,
    StatuteRules,
)


# =============================================================================
# Calendar Helpers
# =============================================================================

def as_date(value: date) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(start: date, months: int) -> date:
    """
    Advance a date by whole calendar months.

    The day of month is clamped to the length of the target month, so
    January 31 + 1 month is February 28 (or 29 in a leap year).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def nth_month_day(anchor: date, months: int, day_of_month: int) -> date:
    """The given day of the month that is `months` calendar months after anchor."""
    target = add_months(anchor, months)
    return target.replace(day=day_of_month)


def days_between(start: date, end: date) -> int:
    """
    Signed whole calendar days from start to end.

    Dates carry no time component, so a deadline tomorrow is exactly 1
    and a deadline today is exactly 0.
    """
    return (as_date(end) - as_date(start)).days


# =============================================================================
# Deadline Calculator
# =============================================================================

@dataclass
class DeadlineCalculator:
    """
    Computes the controlling filing deadline for a claimant tier.

    Usage:
        calculator = DeadlineCalculator()
        result = calculator.compute(
            last_work_date=date(2024, 1, 20),
            tier=RoleTier.SUBCONTRACTOR_TIER,
            today=date(2024, 2, 1),
        )
        print(result.deadline_date, result.days_remaining)
    """

    rules: StatuteRules = field(default_factory=lambda: DEFAULT_RULES)

    def filing_date(self, last_work_date: date, tier: RoleTier) -> date:
        """Deadline date only, without the evaluation-date flags."""
        return nth_month_day(
            as_date(last_work_date),
            self.rules.months_for(tier),
            self.rules.filing_day_of_month,
        )

    def compute(
        self,
        last_work_date: Optional[date],
        tier: RoleTier,
        today: date,
    ) -> DeadlineResult:
        """
        Calculate the filing deadline and its urgency flags.

        Args:
            last_work_date: Last day labor/materials were furnished, or None
            tier: Claimant tier from the role classifier
            today: Evaluation date

        Returns:
            DeadlineResult (all date fields None when last_work_date is None)
        """
        if last_work_date is None:
            return UNKNOWN_DEADLINE

        deadline_date = self.filing_date(last_work_date, tier)
        days_remaining = days_between(today, deadline_date)

        # The deadline day itself is not filable: 0 days remaining means
        # can_file_lien is False while is_past_deadline is also False.
        return DeadlineResult(
            deadline_date=deadline_date,
            days_remaining=days_remaining,
            is_past_deadline=days_remaining < 0,
            is_urgent=0 < days_remaining <= self.rules.urgent_window_days,
            can_file_lien=days_remaining > 0,
            months_to_add=self.rules.months_for(tier),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def compute_deadline(
    last_work_date: Optional[date],
    tier: RoleTier,
    today: date,
    rules: Optional[StatuteRules] = None,
) -> DeadlineResult:
    """
    Calculate the controlling filing deadline.

    Convenience function that creates a temporary calculator.
    """
    calc = DeadlineCalculator(rules=rules or DEFAULT_RULES)
    return calc.compute(last_work_date, tier, today)
