"""
Time & economic controller: one call to ``advance_week`` is one game week.

Order within a week:
1. Advance the week counter
2. Tick injury recovery
3. Resolve and apply missions that are due
4. Pay wages, salaries and maintenance; collect tavern income
5. Amortize loans
6. Wear facilities
7. Calendar: month and season roll-over, board refresh, free-agent top-up
8. Unlock locked missions the guild tier now allows
9. Treasury warnings
10. Council confidence and band (ultimatums are settled by the caller)

Every flow of gold is posted to the ledger as its own transaction. The
treasury may go negative; nothing here raises.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from . import council
from .catalog import (
    BOARD_REFRESH_WEEKS,
    FACILITY_WEEKLY_WEAR,
    MONTHS_PER_SEASON,
    RESERVE_WARNING_WEEKS,
    WEEKS_PER_MONTH,
    AgentCondition,
    ConfidenceBand,
)
from .ledger import TransactionCategory
from .missions import (
    MissionDebrief,
    missions_due,
    refresh_mission_board,
    run_mission,
    unlock_eligible_missions,
)
from .recruitment import replenish_free_agents
from .sampling import RandomSource
from .schemas import CampaignState, EventType


class WeekReport(BaseModel):
    """Summary of one advanced week, for listeners and presentation."""

    week: int
    season: int
    month: int
    missions: List[MissionDebrief] = Field(default_factory=list)
    recovered: List[str] = Field(default_factory=list, description="Agents back to healthy")
    income: int = 0
    expenses: int = 0
    loans_repaid: List[str] = Field(default_factory=list)
    month_changed: bool = False
    season_ended: bool = False
    board_refreshed: bool = False
    free_agents_added: int = 0
    missions_unlocked: List[str] = Field(default_factory=list)
    treasury: int = 0
    in_debt: bool = False
    reserves_low: bool = False
    confidence: float = 0.0
    confidence_delta: float = 0.0
    band: ConfidenceBand = ConfidenceBand.STABLE
    ultimatum_resolved: Optional[bool] = Field(None, description="Set by the caller applying band consequences")

    @property
    def net(self) -> int:
        return self.income - self.expenses


def advance_week(state: CampaignState, rng: RandomSource) -> WeekReport:
    """Advance ``state`` by one week in place and report what happened."""
    state.total_weeks += 1
    report = WeekReport(week=state.total_weeks, season=state.season, month=state.month)
    ledger_mark = len(state.guild.ledger)

    report.recovered = recover_injuries(state)

    for mission in missions_due(state):
        report.missions.append(run_mission(state, mission, rng))

    pay_operating_costs(state)
    report.loans_repaid = service_loans(state)
    wear_facilities(state)

    advance_calendar(state, rng, report)
    report.missions_unlocked = unlock_eligible_missions(state)

    for transaction in state.guild.ledger.transactions[ledger_mark:]:
        if transaction.amount > 0:
            report.income += transaction.amount
        else:
            report.expenses -= transaction.amount

    check_treasury(state, report)

    report.confidence_delta = council.update_confidence(state)
    report.confidence = state.guild.council.overall_confidence
    report.band = council.confidence_band(report.confidence)
    report.season = state.season
    report.month = state.month

    state.log_event(
        EventType.WEEK_ADVANCED,
        f"Week {state.total_weeks} ({state.season_phase.value.replace('_', ' ')}, season {state.season})",
    )
    return report


def recover_injuries(state: CampaignState) -> List[str]:
    """Count down injuries; return agents who are healthy again."""
    recovered = []
    for agent in state.agents.values():
        if not agent.is_alive or not agent.injuries:
            continue

        remaining = []
        for injury in agent.injuries:
            if injury.is_permanent:
                remaining.append(injury)
                continue
            injury.weeks_remaining = max(0, injury.weeks_remaining - 1)
            if injury.weeks_remaining > 0:
                remaining.append(injury)
        agent.injuries = remaining

        if not remaining and agent.condition is AgentCondition.INJURED:
            agent.condition = AgentCondition.HEALTHY
            recovered.append(agent.agent_id)
            state.log_event(
                EventType.AGENT_RECOVERED,
                f"{agent.full_name} has recovered",
                related_entity_id=agent.agent_id,
            )
    return recovered


def pay_operating_costs(state: CampaignState) -> None:
    guild = state.guild
    week = state.total_weeks

    guild.post(
        week=week,
        amount=-state.weekly_wage_bill,
        category=TransactionCategory.AGENT_WAGES,
        description="Weekly agent wages",
    )
    guild.post(
        week=week,
        amount=-guild.weekly_staff_salaries,
        category=TransactionCategory.STAFF_SALARIES,
        description="Weekly staff salaries",
    )
    guild.post(
        week=week,
        amount=-guild.facilities.weekly_maintenance,
        category=TransactionCategory.FACILITY_MAINTENANCE,
        description="Weekly facility maintenance",
    )
    guild.post(
        week=week,
        amount=guild.facilities.tavern_income,
        category=TransactionCategory.TAVERN_INCOME,
        description="Weekly tavern income",
    )


def service_loans(state: CampaignState) -> List[str]:
    """Make each loan's weekly payment; drop and announce loans paid off."""
    guild = state.guild
    repaid = []
    for loan in guild.loans:
        payment = loan.amortize()
        guild.post(
            week=state.total_weeks,
            amount=-payment,
            category=TransactionCategory.LOAN_REPAYMENT,
            description=f"Loan payment to {loan.lender_name}",
            related_entity_id=loan.loan_id,
        )
        if loan.is_paid_off:
            repaid.append(loan.loan_id)
            state.log_event(
                EventType.LOAN_REPAID,
                f"Loan from {loan.lender_name} has been paid off",
                related_entity_id=loan.loan_id,
            )
    guild.loans = [loan for loan in guild.loans if not loan.is_paid_off]
    return repaid


def wear_facilities(state: CampaignState) -> None:
    for facility in state.guild.facilities.by_type.values():
        facility.condition = max(0, facility.condition - FACILITY_WEEKLY_WEAR)


def advance_calendar(state: CampaignState, rng: RandomSource, report: WeekReport) -> None:
    """Roll the month and season over and keep the board and market stocked."""
    needs_refresh = state.total_weeks % BOARD_REFRESH_WEEKS == 0

    if state.total_weeks % WEEKS_PER_MONTH == 0:
        report.month_changed = True
        state.month += 1
        if state.month > MONTHS_PER_SEASON:
            state.month = 1
            state.season += 1
            report.season_ended = True
            end_season(state)
            needs_refresh = True
        else:
            state.log_event(EventType.MONTH_CHANGED, f"Month {state.month} begins")

        report.free_agents_added = replenish_free_agents(state, rng)

    if needs_refresh:
        refresh_mission_board(state, rng)
        report.board_refreshed = True


def end_season(state: CampaignState) -> None:
    finances = state.guild.finances
    state.log_event(
        EventType.SEASON_ENDED,
        f"Season {state.season - 1} closed with {finances.season_income} gold in "
        f"and {finances.season_expenses} gold out",
    )
    finances.season_income = 0
    finances.season_expenses = 0
    state.guild.statistics.seasons_active += 1


def check_treasury(state: CampaignState, report: WeekReport) -> None:
    finances = state.guild.finances
    report.treasury = finances.treasury

    if finances.in_debt:
        report.in_debt = True
        state.log_event(
            EventType.IN_DEBT,
            f"The guild is {-finances.treasury} gold in debt",
            related_entity_id=state.guild.guild_id,
        )
    elif finances.treasury < RESERVE_WARNING_WEEKS * state.weekly_operating_costs:
        report.reserves_low = True
        state.log_event(
            EventType.TREASURY_LOW,
            "Reserves cover less than a month of operating costs",
            related_entity_id=state.guild.guild_id,
        )
