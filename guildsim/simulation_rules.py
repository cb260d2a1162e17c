"""
SimulationRules interface for defining how a guild campaign evolves each week.

This module provides the abstract base class the campaign runner drives, plus
``GuildRules``, the default weekly rules.

Key responsibilities:
- Apply one week (calendar, economy, mission resolution, council)
- Decide whether the campaign should stop early
- Lifecycle hooks around the whole campaign

Design principle: a week is a pure function of (state, rng). Rules return a
new state rather than mutating the one they were given, so listeners can
compare the week before with the week after.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .catalog import MissionStatus
from .council import apply_band_consequences
from .missions import accept_mission, is_agent_available
from .resolution import preview_success_chance
from .sampling import RandomSource
from .schemas import Agent, CampaignState, Mission
from .time_controller import WeekReport, advance_week


def format_week_summary(state: CampaignState, report: WeekReport) -> str:
    """Format the week's headline numbers for console output.

    Example output:
    "Treasury=4810g (+45/-235), Confidence=62.0 (stable), Missions=1, Roster=4"
    """
    parts = [
        f"Treasury={report.treasury}g (+{report.income}/-{report.expenses})",
        f"Confidence={report.confidence:.1f} ({report.band.value})",
        f"Missions={len(report.missions)}",
        f"Roster={len(state.guild.roster)}",
    ]
    if state.guild.loans:
        parts.append(f"Loans={len(state.guild.loans)}")
    return ", ".join(parts)


class SimulationRules(ABC):
    """Abstract base class for weekly campaign rules.

    Subclasses are dependency-injected into ``Campaign``. Swapping rules
    changes how the guild is run (automatic dispatch, scripted scenarios,
    tutorial constraints) without touching the engines underneath.
    """

    @abstractmethod
    def apply_week(
        self, state: CampaignState, week: int, rng: RandomSource
    ) -> Tuple[CampaignState, WeekReport]:
        """
        Advance the campaign by one week.

        Important: all randomness must come from ``rng`` so a seeded run is
        reproducible.

        Args:
            state: State at the start of the week (must not be mutated)
            week: Week number within this run (1-indexed)
            rng: Injected random source

        Returns:
            The new state and the week's report
        """
        pass

    def should_stop(self, state: CampaignState, week: int) -> bool:
        """Return True to end the campaign before the requested week count."""
        return False

    def on_campaign_start(self, state: CampaignState) -> CampaignState:
        """Hook called once before the first week."""
        return state

    def on_campaign_end(self, state: CampaignState, week: int) -> CampaignState:
        """Hook called once after the final week."""
        return state

    def format_week_summary(self, state: CampaignState, report: WeekReport) -> str:
        return format_week_summary(state, report)


class GuildRules(SimulationRules):
    """Default rules: optional automatic dispatch, then the weekly tick.

    With ``auto_dispatch`` enabled, idle roster agents are sent to available
    missions before each tick, strongest agents first, whenever the
    previewed success chance reaches ``min_success_chance``. Dispatch draws
    no randomness.
    """

    def __init__(self, *, auto_dispatch: bool = True, min_success_chance: float = 0.5):
        self.auto_dispatch = auto_dispatch
        self.min_success_chance = min_success_chance

    def apply_week(
        self, state: CampaignState, week: int, rng: RandomSource
    ) -> Tuple[CampaignState, WeekReport]:
        new_state = state.model_copy(deep=True)
        if self.auto_dispatch:
            self.dispatch_idle_agents(new_state)

        report = advance_week(new_state, rng)
        report.ultimatum_resolved = apply_band_consequences(new_state, report.band)
        return new_state, report

    def should_stop(self, state: CampaignState, week: int) -> bool:
        # A council at zero confidence has removed the guild master.
        return state.guild.council.overall_confidence <= 0

    def dispatch_idle_agents(self, state: CampaignState) -> List[str]:
        """Accept every available mission a strong enough party can take.

        Returns:
            Ids of the missions accepted.
        """
        accepted = []
        for mission in state.missions_with_status(MissionStatus.AVAILABLE):
            party = self._pick_party(state, mission)
            if party is None:
                continue
            if accept_mission(state, mission.mission_id, [a.agent_id for a in party]).ok:
                accepted.append(mission.mission_id)
        return accepted

    def _pick_party(self, state: CampaignState, mission: Mission) -> Optional[List[Agent]]:
        idle = [
            agent
            for agent in state.roster_agents()
            if agent.is_fit_for_duty and is_agent_available(state, agent.agent_id)
        ]
        if len(idle) < mission.min_party_size:
            return None

        idle.sort(key=lambda agent: (agent.level.rank, agent.overall_average), reverse=True)
        party = idle[: mission.min_party_size]
        while (
            preview_success_chance(mission, party, state.difficulty) < self.min_success_chance
            and len(party) < min(mission.max_party_size, len(idle))
        ):
            party = idle[: len(party) + 1]

        if preview_success_chance(mission, party, state.difficulty) < self.min_success_chance:
            return None
        return party
