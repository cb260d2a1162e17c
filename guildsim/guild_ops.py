"""Guild operations: facility upgrades, staff and loans."""

from __future__ import annotations

from .catalog import STAFF_HIRE_WEEKS, FacilityRating, FacilityType, LoanKind, StaffRole
from .ledger import Loan, TransactionCategory
from .recruitment import generate_staff_member
from .results import FailureReason, OperationResult
from .sampling import RandomSource
from .schemas import CampaignState, EventType


def upgrade_facility(state: CampaignState, facility_type: FacilityType) -> OperationResult:
    """Raise a facility one rating step and restore its condition."""
    guild = state.guild
    facility = guild.facilities[facility_type]
    if facility.is_max_rating:
        return OperationResult.failure(FailureReason.ALREADY_MAX_RATING)

    target = FacilityRating(facility.rating.value + 1)
    cost = target.upgrade_cost
    if guild.finances.treasury < cost:
        return OperationResult.failure(
            FailureReason.INSUFFICIENT_FUNDS,
            f"Upgrading the {facility_type.value.replace('_', ' ')} costs {cost} gold",
        )

    guild.post(
        week=state.total_weeks,
        amount=-cost,
        category=TransactionCategory.FACILITY_UPGRADE,
        description=f"Upgraded {facility_type.value} to rating {target.value}",
        related_entity_id=facility_type.value,
    )
    facility.rating = target
    facility.condition = 100

    state.log_event(
        EventType.FACILITY_UPGRADED,
        f"The {facility_type.value.replace('_', ' ')} is now rated {target.name.lower()}",
        related_entity_id=facility_type.value,
    )
    return OperationResult.success(facility)


def hire_staff(state: CampaignState, role: StaffRole, rng: RandomSource) -> OperationResult:
    """Hire a generated staff member; the signing fee is four weeks of salary.

    The candidate is generated before the funds check, so a refused hire still
    advances ``rng``.
    """
    guild = state.guild
    if not role.allows_multiple and any(member.role is role for member in guild.staff):
        return OperationResult.failure(FailureReason.ROLE_ALREADY_FILLED)

    candidate = generate_staff_member(role, rng, state.total_weeks)
    fee = candidate.weekly_salary * STAFF_HIRE_WEEKS
    if guild.finances.treasury < fee:
        return OperationResult.failure(
            FailureReason.INSUFFICIENT_FUNDS,
            f"Hiring a {role.value.replace('_', ' ')} costs {fee} gold",
        )

    guild.post(
        week=state.total_weeks,
        amount=-fee,
        category=TransactionCategory.RECRUITMENT_FEES,
        description=f"Hired {candidate.name} as {role.value}",
        related_entity_id=candidate.staff_id,
    )
    guild.staff.append(candidate)

    state.log_event(
        EventType.STAFF_HIRED,
        f"{candidate.name} joins the staff as {role.value.replace('_', ' ')}",
        related_entity_id=candidate.staff_id,
    )
    return OperationResult.success(candidate)


def dismiss_staff(state: CampaignState, staff_id: str) -> OperationResult:
    guild = state.guild
    for member in guild.staff:
        if member.staff_id == staff_id:
            guild.staff.remove(member)
            state.log_event(
                EventType.STAFF_DISMISSED,
                f"{member.name} has been let go",
                related_entity_id=staff_id,
            )
            return OperationResult.success(member)
    return OperationResult.failure(FailureReason.STAFF_NOT_FOUND)


def take_loan(state: CampaignState, kind: LoanKind, amount: int) -> OperationResult:
    """Borrow ``amount`` on the lender's standard terms."""
    if amount <= 0:
        return OperationResult.failure(FailureReason.INVALID_AMOUNT, "Loan amount must be positive")

    guild = state.guild
    loan = Loan.from_terms(
        loan_id=f"loan-{len(guild.ledger) + 1:06d}",
        kind=kind,
        principal=amount,
        start_week=state.total_weeks,
    )
    guild.post(
        week=state.total_weeks,
        amount=amount,
        category=TransactionCategory.LOAN_PROCEEDS,
        description=f"Loan from {loan.lender_name}",
        related_entity_id=loan.loan_id,
    )
    guild.loans.append(loan)

    state.log_event(
        EventType.LOAN_TAKEN,
        f"Borrowed {amount} gold from {loan.lender_name} "
        f"({loan.weekly_payment} gold/week for {loan.duration_weeks} weeks)",
        related_entity_id=loan.loan_id,
    )
    return OperationResult.success(loan)
