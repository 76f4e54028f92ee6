"""
LienPilot Deadline Schedule

Builds the full statutory deadline schedule for a project: notices,
the lien filing itself, bond claims, foreclosure and payment demand.

Key features:
- Same calendar-month arithmetic as the controlling deadline
- Status and severity relative to an explicit evaluation date
- Completed items survive recalculation
- Reminder selection and display formatting helpers
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Iterable, Optional

from ..models import (
    DEFAULT_RULES,
    DeadlineSeverity,
    DeadlineStatus,
    DeadlineType,
    ProjectAssessment,
    ProjectType,
    RoleClassification,
    ScheduledDeadline,
    StatuteRules,
)
from .deadline_calculator import DeadlineCalculator, add_months, as_date, days_between, nth_month_day
from .role_classifier import classify


# =============================================================================
# Schedule Builder
# =============================================================================

@dataclass
class ScheduleBuilder:
    """
    Calculates every applicable deadline for a project.

    Usage:
        builder = ScheduleBuilder()
        schedule = builder.build(assessment, today=date(2024, 2, 1))
        for item in schedule:
            print(item.due_date, item.title, item.status)
    """

    rules: StatuteRules = field(default_factory=lambda: DEFAULT_RULES)

    def build(
        self,
        assessment: ProjectAssessment,
        today: date,
        role: Optional[RoleClassification] = None,
    ) -> tuple[ScheduledDeadline, ...]:
        """
        Calculate the schedule.

        Args:
            assessment: Normalized answers
            today: Evaluation date
            role: Pre-computed classification (derived when omitted)

        Returns:
            Deadlines sorted by due date, then type and title
        """
        today = as_date(today)
        role = role or classify(assessment.contract_party)

        items: list[ScheduledDeadline] = []
        items.extend(self._preliminary_notice(assessment, role))
        items.extend(self._monthly_notices(assessment, role, today))
        items.extend(self._retainage_notice(assessment, role))
        items.extend(self._mechanics_lien(assessment, role))
        items.extend(self._bond_claim(assessment, role))
        items.extend(self._payment_demand(assessment))

        dated = [
            replace(
                item,
                severity=self.severity_for(item.due_date, today),
                status=self.status_for(item.due_date, today),
            )
            for item in items
        ]
        return tuple(sorted(dated, key=lambda d: (d.due_date, d.type.value, d.title)))

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def status_for(self, due_date: date, today: date) -> DeadlineStatus:
        days_until = days_between(today, due_date)
        if days_until < 0:
            return DeadlineStatus.OVERDUE
        if days_until <= self.rules.critical_warning_days:
            return DeadlineStatus.DUE_SOON
        return DeadlineStatus.UPCOMING

    def severity_for(self, due_date: date, today: date) -> DeadlineSeverity:
        days_until = days_between(today, due_date)
        if days_until <= self.rules.critical_warning_days:
            return DeadlineSeverity.CRITICAL
        if days_until <= self.rules.high_warning_days:
            return DeadlineSeverity.HIGH
        if days_until <= self.rules.medium_warning_days:
            return DeadlineSeverity.MEDIUM
        return DeadlineSeverity.LOW

    # -------------------------------------------------------------------------
    # Deadline Types
    # -------------------------------------------------------------------------

    def _item(self, deadline_type: DeadlineType, **kwargs) -> ScheduledDeadline:
        return ScheduledDeadline(
            type=deadline_type,
            legal_reference=self.rules.legal_reference(deadline_type),
            **kwargs,
        )

    def _preliminary_notice(
        self,
        assessment: ProjectAssessment,
        role: RoleClassification,
    ) -> list[ScheduledDeadline]:
        if (
            assessment.work_start_date is None
            or not assessment.project_type.is_residential
            or role.is_original_contractor
        ):
            return []

        due = nth_month_day(
            assessment.work_start_date,
            self.rules.preliminary_notice_months,
            self.rules.preliminary_notice_day_of_month,
        )
        warning_days = self.rules.preliminary_notice_warning_days
        return [
            self._item(
                DeadlineType.PRELIMINARY_NOTICE,
                title="File Preliminary Notice",
                description=(
                    "Required for residential projects to preserve lien rights. Must be "
                    "sent by the 15th day of the 2nd month after first furnishing "
                    "labor or materials."
                ),
                due_date=due,
                action_items=(
                    "Complete preliminary notice form",
                    "Include property description and owner information",
                    "Send via certified mail to property owner",
                    "Send copy to general contractor if applicable",
                    "Keep proof of delivery",
                ),
            ),
            self._item(
                DeadlineType.PRELIMINARY_NOTICE,
                title="Preliminary Notice Due Soon",
                description=f"Preliminary notice deadline is {warning_days} days away.",
                due_date=due - timedelta(days=warning_days),
                is_optional=True,
                action_items=("Start preparing preliminary notice documents",),
            ),
        ]

    def _monthly_notices(
        self,
        assessment: ProjectAssessment,
        role: RoleClassification,
        today: date,
    ) -> list[ScheduledDeadline]:
        first = assessment.work_start_date
        last = assessment.last_work_date
        if (
            first is None
            or last is None
            or not assessment.project_type.is_residential
            or role.is_original_contractor
        ):
            return []

        notices: list[ScheduledDeadline] = []
        offset = 0
        work_month = first
        while work_month <= last:
            due = nth_month_day(first, offset + 1, self.rules.preliminary_notice_day_of_month)
            if today < due:
                notices.append(self._item(
                    DeadlineType.MONTHLY_NOTICE,
                    title=f"Monthly Notice - {calendar.month_name[due.month]} {due.year}",
                    description=(
                        "Monthly notice for amounts unpaid from the previous month, "
                        "required to preserve lien rights."
                    ),
                    due_date=due,
                    action_items=(
                        "Calculate unpaid balance from previous month",
                        "Complete monthly notice form",
                        "Send to property owner via certified mail",
                        "Keep proof of delivery",
                    ),
                ))
            offset += 1
            work_month = add_months(first, offset)
        return notices

    def _retainage_notice(
        self,
        assessment: ProjectAssessment,
        role: RoleClassification,
    ) -> list[ScheduledDeadline]:
        if (
            assessment.last_work_date is None
            or assessment.retainage_amount <= 0
            or not assessment.project_type.is_residential
        ):
            return []

        lien_date = DeadlineCalculator(self.rules).filing_date(assessment.last_work_date, role.tier)
        days_before = self.rules.retainage_notice_days_before_lien
        return [
            self._item(
                DeadlineType.RETAINAGE_NOTICE,
                title="File Retainage Notice",
                description=(
                    f"Required {days_before}-day notice before filing a lien for retained "
                    f"funds (${assessment.retainage_amount:,.2f})."
                ),
                due_date=lien_date - timedelta(days=days_before),
                action_items=(
                    "Calculate total retainage amount",
                    "Complete retainage notice form",
                    "Send via certified mail to property owner",
                    f"Wait {days_before} days before filing lien",
                ),
            )
        ]

    def _mechanics_lien(
        self,
        assessment: ProjectAssessment,
        role: RoleClassification,
    ) -> list[ScheduledDeadline]:
        if assessment.last_work_date is None or assessment.project_type == ProjectType.PUBLIC:
            return []

        lien_date = DeadlineCalculator(self.rules).filing_date(assessment.last_work_date, role.tier)
        warning_days = self.rules.critical_warning_days
        return [
            self._item(
                DeadlineType.MECHANICS_LIEN,
                title="File Mechanics Lien",
                description=(
                    "Last day to file the mechanics lien with the county clerk. "
                    "After this date, lien rights are lost."
                ),
                due_date=lien_date,
                action_items=(
                    "Complete mechanics lien affidavit",
                    "Include accurate property description",
                    "Calculate total amount due",
                    "File with county clerk",
                    "Serve copy on property owner",
                    "Keep certified copies",
                ),
            ),
            self._item(
                DeadlineType.MECHANICS_LIEN,
                title="URGENT: Mechanics Lien Deadline Approaching",
                description=f"Only {warning_days} days left to file the mechanics lien.",
                due_date=lien_date - timedelta(days=warning_days),
                is_optional=True,
                action_items=("Start preparing lien documents immediately",),
            ),
            self._item(
                DeadlineType.LAWSUIT_FILING,
                title="File Lawsuit to Foreclose Lien",
                description=(
                    "Deadline to sue to foreclose the mechanics lien. The lien becomes "
                    "unenforceable after this date."
                ),
                due_date=add_months(lien_date, self.rules.lawsuit_months_after_lien),
                action_items=(
                    "Consult with attorney",
                    "Prepare foreclosure lawsuit",
                    "File in appropriate court",
                    "Serve all parties",
                ),
            ),
        ]

    def _bond_claim(
        self,
        assessment: ProjectAssessment,
        role: RoleClassification,
    ) -> list[ScheduledDeadline]:
        if assessment.last_work_date is None or assessment.project_type != ProjectType.PUBLIC:
            return []

        days_to_file = self.rules.bond_claim_days_for(role.tier)
        due = assessment.last_work_date + timedelta(days=days_to_file)
        warning_days = self.rules.bond_claim_warning_days
        return [
            self._item(
                DeadlineType.BOND_CLAIM,
                title="File Payment Bond Claim",
                description=(
                    "Deadline to claim against the payment bond for a public project. "
                    f"Must be filed within {days_to_file} days of last work."
                ),
                due_date=due,
                action_items=(
                    "Obtain copy of payment bond",
                    "Identify bond surety company",
                    "Complete bond claim form",
                    "Include detailed billing information",
                    "Send via certified mail to surety",
                    "Send copy to general contractor",
                ),
            ),
            self._item(
                DeadlineType.BOND_CLAIM,
                title="Bond Claim Deadline Approaching",
                description=f"{warning_days} days until the bond claim deadline.",
                due_date=due - timedelta(days=warning_days),
                is_optional=True,
                action_items=("Begin preparing bond claim documents",),
            ),
        ]

    def _payment_demand(self, assessment: ProjectAssessment) -> list[ScheduledDeadline]:
        if assessment.last_work_date is None:
            return []

        return [
            self._item(
                DeadlineType.PAYMENT_DEMAND,
                title="Send Payment Demand Letter",
                description="Send a formal payment demand before pursuing lien rights.",
                due_date=assessment.last_work_date + timedelta(days=self.rules.payment_demand_days),
                is_optional=True,
                action_items=(
                    "Draft demand letter with amount due",
                    "Include copies of invoices",
                    "Set payment deadline (typically 10 days)",
                    "Send via certified mail",
                    "Document all communication",
                ),
            )
        ]


# =============================================================================
# Convenience Functions
# =============================================================================

def build_schedule(
    assessment: ProjectAssessment,
    today: date,
    rules: Optional[StatuteRules] = None,
) -> tuple[ScheduledDeadline, ...]:
    """Calculate a project's full deadline schedule."""
    return ScheduleBuilder(rules=rules or DEFAULT_RULES).build(assessment, today)


def recalculate_schedule(
    existing: Iterable[ScheduledDeadline],
    assessment: ProjectAssessment,
    today: date,
    rules: Optional[StatuteRules] = None,
) -> tuple[ScheduledDeadline, ...]:
    """
    Rebuild a schedule after answers change.

    Items previously marked completed stay completed when the same
    (type, title) appears in the fresh schedule.
    """
    completed = {d.key for d in existing if d.status == DeadlineStatus.COMPLETED}
    return tuple(
        d.with_status(DeadlineStatus.COMPLETED) if d.key in completed else d
        for d in build_schedule(assessment, today, rules)
    )


def deadlines_needing_reminders(
    schedule: Iterable[ScheduledDeadline],
    today: date,
    days_before: int = 7,
) -> list[ScheduledDeadline]:
    """Open deadlines falling strictly between today and today + days_before."""
    today = as_date(today)
    horizon = today + timedelta(days=days_before)
    return [
        d for d in schedule
        if d.status not in (DeadlineStatus.COMPLETED, DeadlineStatus.OVERDUE)
        and today < d.due_date < horizon
    ]


def format_deadline(item: ScheduledDeadline, today: date) -> str:
    """Short human-readable due label."""
    days_until = days_between(today, item.due_date)
    if days_until < 0:
        return f"Overdue by {abs(days_until)} days"
    if days_until == 0:
        return "Due today"
    if days_until == 1:
        return "Due tomorrow"
    if days_until <= 7:
        return f"Due in {days_until} days"
    due = item.due_date
    return f"{calendar.month_abbr[due.month]} {due.day}, {due.year}"
