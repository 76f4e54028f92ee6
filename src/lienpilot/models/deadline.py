"""
LienPilot Deadline Models

Models for the controlling lien filing deadline and for the wider
statutory deadline schedule.

Key components:
- DeadlineResult: The controlling filing deadline and its urgency flags
- ScheduledDeadline: One entry of the full statutory schedule
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Optional

from .enums import DeadlineSeverity, DeadlineStatus, DeadlineType


# =============================================================================
# Controlling Deadline
# =============================================================================

@dataclass(frozen=True)
class DeadlineResult:
    """
    The controlling mechanics lien filing deadline.

    All date-dependent fields are None (flags False) when the last work
    date is unknown. That is a normal in-progress state, not an error.

    Attributes:
        deadline_date: Last day to file, or None if unknown
        days_remaining: Signed days from the evaluation date (negative once past)
        is_past_deadline: days_remaining < 0
        is_urgent: 0 < days_remaining <= urgent window
        can_file_lien: days_remaining > 0 (the deadline day itself is too late)
        months_to_add: Calendar months applied to the last work date
    """
    deadline_date: Optional[date] = None
    days_remaining: Optional[int] = None
    is_past_deadline: bool = False
    is_urgent: bool = False
    can_file_lien: bool = False
    months_to_add: Optional[int] = None

    @property
    def is_known(self) -> bool:
        """False when there was not enough data to compute a date."""
        return self.deadline_date is not None

    @property
    def days_overdue(self) -> int:
        """Days past the deadline (0 if not past or unknown)."""
        if self.days_remaining is None:
            return 0
        return max(0, -self.days_remaining)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "deadline_date": self.deadline_date.isoformat() if self.deadline_date else None,
            "days_remaining": self.days_remaining,
            "is_past_deadline": self.is_past_deadline,
            "is_urgent": self.is_urgent,
            "can_file_lien": self.can_file_lien,
        }


UNKNOWN_DEADLINE = DeadlineResult()


# =============================================================================
# Statutory Schedule
# =============================================================================

@dataclass(frozen=True)
class ScheduledDeadline:
    """
    One deadline in a project's statutory schedule.

    Attributes:
        type: Kind of deadline
        title: Short display title
        description: What must happen and why
        due_date: Date the step is due
        severity: How loudly to surface it
        status: Relative to the evaluation date
        is_optional: Warnings and best-practice steps are optional
        legal_reference: Statute citation
        action_items: Concrete steps to complete it
    """
    type: DeadlineType
    title: str
    description: str
    due_date: date
    severity: DeadlineSeverity = DeadlineSeverity.LOW
    status: DeadlineStatus = DeadlineStatus.UPCOMING
    is_optional: bool = False
    legal_reference: str = ""
    action_items: tuple[str, ...] = field(default_factory=tuple)

    @property
    def key(self) -> tuple[str, str]:
        """Identity used to match an item across recalculations."""
        return (self.type.value, self.title)

    def with_status(self, status: DeadlineStatus) -> "ScheduledDeadline":
        return replace(self, status=status)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date.isoformat(),
            "severity": self.severity.value,
            "status": self.status.value,
            "is_optional": self.is_optional,
            "legal_reference": self.legal_reference,
            "action_items": list(self.action_items),
        }
