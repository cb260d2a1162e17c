"""
Campaign runner.

Fully decoupled from file I/O and config: the initial state, random source,
rules and persistence strategy are all injected.

Coordinates the weekly loop:
1. Apply the week's rules (dispatch, tick, council consequences)
2. Persist the new snapshot via the injected strategy
3. Print the week's summary
4. Notify week listeners
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from uuid import UUID, uuid4

from .config import Config
from .logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    LOG_TAG_WARNING,
    Color,
    colored,
    log_deterministic,
    log_success,
)
from .persistence import InMemoryPersistence, PersistenceStrategy
from .sampling import RandomSource, make_rng
from .schemas import CampaignRun, CampaignState
from .simulation_rules import GuildRules, SimulationRules
from .time_controller import WeekReport

WeekListener = Callable[[int, CampaignState, CampaignState, WeekReport], None]


class CampaignError(Exception):
    """Raised when a week fails to apply.

    Wraps the underlying exception with the week number and guidance on
    common remediation steps.
    """

    def __init__(self, *, week: int, underlying: Exception) -> None:
        self.week = week
        self.underlying = underlying
        message = (
            f"Campaign failed at week {week}: {underlying}\n\n"
            "Remediation tips:\n"
            "  - Re-run with the same GUILDSIM_SEED to reproduce the failure\n"
            "  - Enable GUILDSIM_VERBOSE=true to see each resolved mission\n"
            "  - Load the last persisted snapshot to inspect the state before the failing week"
        )
        super().__init__(message)


class Campaign:
    """
    Campaign runner.

    Fully decoupled - accepts all dependencies as parameters.
    No file I/O, no global game state.
    """

    def __init__(
        self,
        state: CampaignState,
        *,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        rules: Optional[SimulationRules] = None,
        persistence: Optional[PersistenceStrategy] = None,
        week_listeners: Optional[List[WeekListener]] = None,
        verbose: Optional[bool] = None,
    ):
        """Initialize the runner with all dependencies injected.

        Args:
            state: Initial CampaignState
            seed: Seed for a fresh ``random.Random`` (ignored when ``rng`` is given)
            rng: Explicit random source
            rules: Weekly rules (defaults to GuildRules)
            persistence: Optional persistence strategy (defaults to InMemory)
            week_listeners: Optional callables invoked after each week with
                (week, previous_state, new_state, report)
            verbose: Print per-mission detail lines (defaults to GUILDSIM_VERBOSE)
        """
        self.seed = seed
        self.rng: RandomSource = rng if rng is not None else make_rng(seed)
        self.rules = rules or GuildRules()
        self.persistence = persistence or InMemoryPersistence()
        self.week_listeners = week_listeners or []
        self.verbose = Config.VERBOSE if verbose is None else verbose
        self.reports: List[WeekReport] = []

        self.current_state = self.rules.on_campaign_start(state)

        # Run ids tag persisted snapshots; they never touch the simulation stream.
        self.run_id: UUID = uuid4()

    def step(self) -> WeekReport:
        """Apply one week synchronously without persistence or console output."""
        week = len(self.reports) + 1
        previous_state = self.current_state
        new_state, report = self._apply(week)
        self.current_state = new_state
        self.reports.append(report)
        self._notify(week, previous_state, new_state, report)
        return report

    async def run(self, num_weeks: int) -> Dict:
        """Run the campaign for N weeks.

        Args:
            num_weeks: Number of weeks to simulate

        Returns:
            Dict with run_id, final_state, weeks_completed and reports

        Raises:
            CampaignError: If a week fails to apply
        """
        await self.persistence.initialize()

        try:
            await self.persistence.save_run_metadata(
                CampaignRun(
                    id=self.run_id,
                    campaign_name=self.current_state.campaign_name,
                    start_time=datetime.now(timezone.utc),
                    num_weeks=num_weeks,
                    seed=self.seed,
                    config={
                        "difficulty": self.current_state.settings.difficulty.value,
                        "permadeath": self.current_state.settings.permadeath,
                        "rules": type(self.rules).__name__,
                    },
                )
            )
            await self.persistence.save_state(self.run_id, len(self.reports), self.current_state)

            print(f"Starting campaign run {self.run_id}")
            print(
                f"Guild: {self.current_state.guild.name}, "
                f"Roster: {len(self.current_state.guild.roster)}, Weeks: {num_weeks}\n"
            )

            weeks_completed = 0
            stopped_early = False
            start_week = len(self.reports)
            for offset in range(1, num_weeks + 1):
                week = start_week + offset
                print(f"=== Week {offset}/{num_weeks} ===")

                previous_state = self.current_state
                new_state, report = self._apply(week)

                await self.persistence.save_state(self.run_id, week, new_state)
                self._print_week_summary(new_state, report)

                self.current_state = new_state
                self.reports.append(report)
                self._notify(week, previous_state, new_state, report)
                weeks_completed = offset

                if self.rules.should_stop(self.current_state, week):
                    stopped_early = True
                    print(f"\nCampaign stopped early at week {offset} (signaled by rules).")
                    break

            self.current_state = self.rules.on_campaign_end(self.current_state, weeks_completed)
            await self.persistence.update_run_status(
                self.run_id, "completed", datetime.now(timezone.utc)
            )

            if not stopped_early:
                log_success(f"\n{LOG_TAG_SUCCESS} Campaign complete!")

            return {
                "run_id": self.run_id,
                "final_state": self.current_state,
                "weeks_completed": weeks_completed,
                "reports": list(self.reports),
            }

        except CampaignError:
            await self.persistence.update_run_status(
                self.run_id, "failed", datetime.now(timezone.utc)
            )
            raise

        finally:
            await self.persistence.close()

    def _apply(self, week: int):
        try:
            return self.rules.apply_week(self.current_state, week, self.rng)
        except Exception as exc:
            print(colored(f"ERROR at week {week}: {exc}", Color.RED))
            raise CampaignError(week=week, underlying=exc) from exc

    def _notify(
        self, week: int, previous_state: CampaignState, new_state: CampaignState, report: WeekReport
    ) -> None:
        # Listener failures are reported but never abort the campaign.
        for listener in self.week_listeners:
            try:
                listener(week, previous_state, new_state, report)
            except Exception as exc:  # pragma: no cover - diagnostic hook
                print(f"  [Analysis] Listener failed: {exc}")

    def _print_week_summary(self, state: CampaignState, report: WeekReport) -> None:
        log_deterministic(f"  {LOG_TAG_DETERMINISTIC} {self.rules.format_week_summary(state, report)}")

        for debrief in report.missions:
            tag, color = (
                (LOG_TAG_SUCCESS, Color.GREEN) if debrief.outcome.is_success else (LOG_TAG_WARNING, Color.YELLOW)
            )
            print(colored(f"  {tag} {debrief.mission_name}: {debrief.outcome.value}", color))
            if self.verbose:
                if debrief.summary:
                    print(colored(f"      {debrief.summary}", Color.CYAN))
                for level_up in debrief.level_ups:
                    agent = state.agents[level_up.agent_id]
                    print(
                        colored(
                            f"      {LOG_TAG_INFO} {agent.full_name} → {level_up.new_level.value}",
                            Color.CYAN,
                        )
                    )

        if report.in_debt:
            print(colored(f"  {LOG_TAG_WARNING} Treasury in debt ({report.treasury}g)", Color.YELLOW))
        elif report.reserves_low:
            print(colored(f"  {LOG_TAG_WARNING} Reserves low ({report.treasury}g)", Color.YELLOW))
        if report.season_ended:
            print(colored(f"  {LOG_TAG_INFO} Season {report.season - 1} ended", Color.CYAN))

        print()  # Blank line for readability


def run_seeded(state: CampaignState, num_weeks: int, seed: int, **kwargs) -> CampaignState:
    """Run ``num_weeks`` synchronously from ``seed`` and return the final state."""
    campaign = Campaign(state, rng=make_rng(seed), seed=seed, **kwargs)
    for _ in range(num_weeks):
        campaign.step()
    return campaign.current_state
