"""
Pydantic schemas for the guildsim state graph.

All data structures the simulation core reads and mutates are defined here.

Design Philosophy:
- One explicit ``CampaignState`` is passed into every component; there is no
  ambient game-state object
- Closed-set tags are str-valued enums, so ``model_dump(mode="json")`` writes
  stable string tags and ``model_validate`` reads them back
- Invariants that must always hold (attribute clamp, mission result/status
  pairing, confidence range) are enforced by validators and by the only
  methods allowed to change those fields
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional
from uuid import UUID

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from .catalog import (
    COMBAT_ATTRIBUTES,
    MENTAL_ATTRIBUTES,
    PHYSICAL_AVERAGE_ATTRIBUTES,
    STARTER_FACILITIES,
    STARTING_CONFIDENCE,
    STARTING_TREASURY,
    AgentClass,
    AgentCondition,
    AgentLevel,
    ArmorSlot,
    AttributeType,
    ConfidenceBand,
    DifficultyLevel,
    FacilityRating,
    FacilityType,
    GuildTier,
    InjurySeverity,
    InjuryType,
    ItemCategory,
    ItemRarity,
    LootTier,
    MissionOutcome,
    MissionStakes,
    MissionStatus,
    MissionType,
    PatronPersonality,
    PatronType,
    Race,
    SeasonPhase,
    StaffRole,
    TAVERN_BASE_INCOME,
    UltimatumType,
    clamp_attribute,
)
from .ledger import Ledger, Loan, Transaction, TransactionCategory


# ============================================================================
# Agent Schemas
# ============================================================================


class AgentAttributes(BaseModel):
    """Fixed record of every ``AttributeType`` score, clamped to [1, 20].

    Scores live in a private table. ``scores`` is a read-only view and
    ``agent.attributes[attr] = value`` is the only write path, so the clamp
    cannot be skipped. Construction and deserialization clamp every score and
    reject a record with missing keys. Serialized form: ``{"scores": {...}}``.
    """

    _scores: Dict[AttributeType, int] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _load_scores(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> "AgentAttributes":
        if isinstance(data, cls):
            return handler(data)
        if not isinstance(data, Mapping) or not isinstance(data.get("scores"), Mapping):
            raise ValueError("Attribute record needs a 'scores' mapping")

        raw = {AttributeType(key): value for key, value in data["scores"].items()}
        missing = [attr.value for attr in AttributeType if attr not in raw]
        if missing:
            raise ValueError(f"Missing attribute scores: {', '.join(missing)}")

        instance = handler({})
        instance._scores = {attr: clamp_attribute(int(raw[attr])) for attr in AttributeType}
        return instance

    @model_serializer(mode="plain")
    def _dump_scores(self) -> Dict[str, Dict[str, int]]:
        return {"scores": {attr.value: score for attr, score in self._scores.items()}}

    @classmethod
    def uniform(cls, value: int) -> "AgentAttributes":
        return cls(scores={attr: value for attr in AttributeType})

    @property
    def scores(self) -> Mapping[AttributeType, int]:
        return MappingProxyType(self._scores)

    def __getitem__(self, attr: AttributeType) -> int:
        return self._scores[attr]

    def __setitem__(self, attr: AttributeType, value: int) -> None:
        self._scores[attr] = clamp_attribute(value)

    def increase(self, attr: AttributeType, amount: int = 1) -> int:
        """Raise a score (respecting the cap) and return the new value."""
        self[attr] = self[attr] + amount
        return self[attr]

    def average(self, attrs: Iterable[AttributeType]) -> float:
        selected = list(attrs)
        if not selected:
            return 0.0
        return sum(self._scores[attr] for attr in selected) / len(selected)

    @property
    def combat_average(self) -> float:
        return self.average(COMBAT_ATTRIBUTES)

    @property
    def mental_average(self) -> float:
        return self.average(MENTAL_ATTRIBUTES)

    @property
    def physical_average(self) -> float:
        return self.average(PHYSICAL_AVERAGE_ATTRIBUTES)

    @property
    def overall_average(self) -> float:
        return (self.combat_average + self.mental_average + self.physical_average) / 3


class Injury(BaseModel):
    """An active injury and its remaining recovery time."""

    injury_type: InjuryType
    severity: InjurySeverity
    weeks_remaining: int = Field(..., ge=0)
    week_sustained: int = Field(0, ge=0)

    @property
    def is_permanent(self) -> bool:
        return self.severity is InjurySeverity.PERMANENT


class AgentStatistics(BaseModel):
    """Cumulative career counters for a single agent."""

    missions_completed: int = 0
    missions_failed: int = 0
    perfect_victories: int = 0
    gold_earned: int = 0
    injuries_sustained: int = 0
    rating_total: float = 0.0
    ratings_count: int = 0

    @property
    def average_rating(self) -> float:
        if self.ratings_count == 0:
            return 0.0
        return round(self.rating_total / self.ratings_count, 2)


class Agent(BaseModel):
    """A hirable adventurer.

    Identity, race and class are frozen fields. Everything else evolves
    week to week through the progression system and mission results.
    Deceased agents keep their record for history.
    """

    agent_id: str = Field(..., frozen=True)
    first_name: str
    last_name: str
    age: int = Field(..., ge=0)
    race: Race = Field(..., frozen=True)
    agent_class: AgentClass = Field(..., frozen=True)
    level: AgentLevel = AgentLevel.APPRENTICE
    attributes: AgentAttributes
    condition: AgentCondition = AgentCondition.HEALTHY
    injuries: List[Injury] = Field(default_factory=list)
    statistics: AgentStatistics = Field(default_factory=AgentStatistics)
    weekly_wage: int = Field(..., ge=0)
    current_experience: int = Field(0, ge=0)
    lifetime_experience: int = Field(0, ge=0)
    hired_week: Optional[int] = Field(None, description="Week the agent joined the roster")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_alive(self) -> bool:
        return self.condition is not AgentCondition.DECEASED

    @property
    def is_fit_for_duty(self) -> bool:
        return self.condition is AgentCondition.HEALTHY and not self.injuries

    @property
    def overall_average(self) -> float:
        return self.attributes.overall_average

    @property
    def estimated_value(self) -> int:
        """Market value, also used as the hiring fee."""
        return int(self.overall_average * 1000 * self.level.value_multiplier)


# ============================================================================
# Mission Schemas
# ============================================================================


class SimulationResult(BaseModel):
    """Everything the resolution engine decided about one mission attempt."""

    mission_id: str
    outcome: MissionOutcome
    success_chance: float = Field(..., ge=0.0, le=1.0)
    roll: float = Field(..., ge=0.0, lt=1.0)
    party_power: float = Field(..., ge=0.0)
    difficulty: float
    gold_reward: int = Field(..., ge=0)
    experience_reward: int = Field(..., ge=0)
    injuries: Dict[str, Injury] = Field(default_factory=dict, description="Keyed by agent_id")
    deaths: List[str] = Field(default_factory=list, description="Agent ids killed in action")
    performance_ratings: Dict[str, float] = Field(default_factory=dict, description="Keyed by agent_id")
    summary: str = ""


class Mission(BaseModel):
    """A quest instance moving through the six-state status machine.

    locked → available → in_progress → {completed | partial_success | failed}

    ``result`` is present exactly when the status is terminal. ``conclude()``
    is the only way to set it after construction.
    """

    mission_id: str
    name: str
    mission_type: MissionType
    stakes: MissionStakes
    status: MissionStatus = MissionStatus.AVAILABLE
    recommended_level: AgentLevel
    min_party_size: int = Field(..., ge=1)
    max_party_size: int = Field(..., ge=1)
    base_gold_reward: int = Field(..., ge=0)
    base_experience_reward: int = Field(..., ge=0)
    segments: int = Field(3, ge=1)
    duration_weeks: int = Field(1, ge=1)
    posted_week: int = 0
    required_tier: GuildTier = Field(GuildTier.FLEDGLING, description="Lowest guild tier that may take the mission")
    party: List[str] = Field(default_factory=list)
    started_week: Optional[int] = None
    result: Optional[SimulationResult] = None

    @model_validator(mode="after")
    def _result_matches_status(self) -> "Mission":
        if self.status.is_terminal != (self.result is not None):
            raise ValueError(
                f"Mission {self.mission_id}: status '{self.status.value}' "
                f"{'requires' if self.status.is_terminal else 'forbids'} a result"
            )
        if self.min_party_size > self.max_party_size:
            raise ValueError("min_party_size cannot exceed max_party_size")
        return self

    @property
    def is_available(self) -> bool:
        return self.status is MissionStatus.AVAILABLE

    @property
    def is_in_progress(self) -> bool:
        return self.status is MissionStatus.IN_PROGRESS

    @property
    def due_week(self) -> Optional[int]:
        if self.started_week is None:
            return None
        return self.started_week + self.duration_weeks

    def conclude(self, result: SimulationResult) -> None:
        """Record the resolution and move to the matching terminal status.

        Raises:
            ValueError: If the mission already has a result.
        """
        if self.result is not None or self.status.is_terminal:
            raise ValueError(f"Mission {self.mission_id} has already been resolved")
        self.status = result.outcome.mission_status
        self.result = result


class GeneratedItem(BaseModel):
    """A concrete piece of loot produced by the loot engine."""

    item_id: str
    name: str
    category: ItemCategory
    rarity: ItemRarity
    tier: LootTier
    value: int = Field(..., ge=0)
    subtype: Optional[str] = Field(None, description="Weapon, armor, accessory or consumable tag")
    slot: Optional[ArmorSlot] = None
    source_mission_id: Optional[str] = None


class LevelUpResult(BaseModel):
    """Summary of one (possibly chained) level-up."""

    agent_id: str
    previous_level: AgentLevel
    new_level: AgentLevel
    attribute_gains: Dict[AttributeType, int] = Field(default_factory=dict)
    wage_increase: int = 0

    @property
    def levels_gained(self) -> int:
        return self.new_level.rank - self.previous_level.rank


# ============================================================================
# Guild Schemas
# ============================================================================


class Facility(BaseModel):
    facility_type: FacilityType
    rating: FacilityRating = FacilityRating.ADEQUATE
    condition: int = Field(100, ge=0, le=100)

    @property
    def effective_rating(self) -> FacilityRating:
        """Rating discounted by poor upkeep, never below 1."""
        penalty = 0
        if self.condition < 25:
            penalty = 2
        elif self.condition < 50:
            penalty = 1
        return FacilityRating(max(1, self.rating.value - penalty))

    @property
    def effectiveness(self) -> float:
        return self.effective_rating.effectiveness

    @property
    def weekly_maintenance(self) -> int:
        return int(self.facility_type.base_maintenance * self.rating.value * 0.5)

    @property
    def is_max_rating(self) -> bool:
        return self.rating is FacilityRating.LEGENDARY


class Facilities(BaseModel):
    """The seven guild facilities, keyed by type."""

    by_type: Dict[FacilityType, Facility]

    @field_validator("by_type")
    @classmethod
    def _all_present(cls, by_type: Dict[FacilityType, Facility]) -> Dict[FacilityType, Facility]:
        missing = [ft.value for ft in FacilityType if ft not in by_type]
        if missing:
            raise ValueError(f"Missing facilities: {', '.join(missing)}")
        return by_type

    @classmethod
    def starter(cls) -> "Facilities":
        return cls(
            by_type={
                facility_type: Facility(facility_type=facility_type, rating=rating, condition=condition)
                for facility_type, (rating, condition) in STARTER_FACILITIES.items()
            }
        )

    def __getitem__(self, facility_type: FacilityType) -> Facility:
        return self.by_type[facility_type]

    @property
    def weekly_maintenance(self) -> int:
        return sum(facility.weekly_maintenance for facility in self.by_type.values())

    @property
    def roster_capacity(self) -> int:
        return self.by_type[FacilityType.GUILD_HALL].effective_rating.roster_capacity

    @property
    def tavern_income(self) -> int:
        return int(TAVERN_BASE_INCOME * self.by_type[FacilityType.TAVERN].effectiveness)


class StaffMember(BaseModel):
    staff_id: str
    name: str
    role: StaffRole
    skill_level: int = Field(10, ge=1, le=20)
    weekly_salary: int = Field(..., ge=0)
    morale: int = Field(70, ge=0, le=100)
    hired_week: int = 0


class Finances(BaseModel):
    """Treasury plus per-season counters. Treasury may be negative (debt)."""

    treasury: int = STARTING_TREASURY
    season_budget: int = 20000
    season_income: int = 0
    season_expenses: int = 0

    @property
    def in_debt(self) -> bool:
        return self.treasury < 0


class Patron(BaseModel):
    patron_id: str
    name: str
    patron_type: PatronType
    personality: PatronPersonality = PatronPersonality.MEDIUM
    influence: int = Field(50, ge=0, le=100)
    satisfaction: float = Field(60.0, ge=0.0, le=100.0)
    relationship: int = Field(0, ge=-10, le=10, description="Standing with the guild master")

    @property
    def effective_satisfaction(self) -> float:
        return max(0.0, min(100.0, self.satisfaction + self.relationship / 10))


class Ultimatum(BaseModel):
    ultimatum_type: UltimatumType
    description: str
    target: int
    progress: int = 0
    issued_week: int
    deadline_week: int
    baseline: Optional[int] = Field(None, description="Reference value captured at issue")

    @property
    def is_met(self) -> bool:
        return self.progress >= self.target

    def is_expired(self, week: int) -> bool:
        return week > self.deadline_week and not self.is_met


class Council(BaseModel):
    """Patrons plus the overall confidence scalar, always kept in [0, 100]."""

    patrons: List[Patron] = Field(default_factory=list)
    overall_confidence: float = STARTING_CONFIDENCE
    active_ultimatum: Optional[Ultimatum] = None
    last_band: Optional[ConfidenceBand] = None
    pending_reputation: int = Field(0, description="Reputation earned since the last weekly review")

    @field_validator("overall_confidence")
    @classmethod
    def _clamp_confidence(cls, value: float) -> float:
        return max(0.0, min(100.0, float(value)))

    def set_confidence(self, value: float) -> None:
        self.overall_confidence = max(0.0, min(100.0, float(value)))

    @property
    def weighted_satisfaction(self) -> float:
        """Influence-weighted patron satisfaction (falls back to confidence)."""
        total_weight = sum(p.influence for p in self.patrons)
        if total_weight == 0:
            return self.overall_confidence
        return sum(p.effective_satisfaction * p.influence for p in self.patrons) / total_weight

    @property
    def generosity(self) -> float:
        if not self.patrons:
            return 1.0
        return sum(p.personality.budget_multiplier for p in self.patrons) / len(self.patrons)


class GuildStatistics(BaseModel):
    missions_completed: int = 0
    missions_failed: int = 0
    total_gold_earned: int = 0
    agents_lost: int = 0
    loot_items_found: int = 0
    seasons_active: int = 0


class Guild(BaseModel):
    """The player's organization: roster, staff, facilities and money."""

    guild_id: str
    name: str
    motto: str = ""
    tier: GuildTier = GuildTier.FLEDGLING
    roster: List[str] = Field(default_factory=list, description="Agent ids on the roster")
    staff: List[StaffMember] = Field(default_factory=list)
    facilities: Facilities = Field(default_factory=Facilities.starter)
    finances: Finances = Field(default_factory=Finances)
    ledger: Ledger = Field(default_factory=Ledger)
    loans: List[Loan] = Field(default_factory=list)
    council: Council = Field(default_factory=Council)
    inventory: List[GeneratedItem] = Field(default_factory=list)
    statistics: GuildStatistics = Field(default_factory=GuildStatistics)

    def post(
        self,
        *,
        week: int,
        amount: int,
        category: TransactionCategory,
        description: str = "",
        related_entity_id: Optional[str] = None,
    ) -> Optional[Transaction]:
        """Move gold in or out of the treasury and record it in the ledger.

        Every treasury change goes through here so the ledger and the
        finances record never disagree. Debt is allowed.
        """
        transaction = self.ledger.record(
            week=week,
            amount=amount,
            category=category,
            description=description,
            related_entity_id=related_entity_id,
        )
        if transaction is None:
            return None

        self.finances.treasury += amount
        if amount > 0:
            self.finances.season_income += amount
        else:
            self.finances.season_expenses += -amount
        return transaction

    @property
    def roster_capacity(self) -> int:
        return self.facilities.roster_capacity

    @property
    def has_roster_space(self) -> bool:
        return len(self.roster) < self.roster_capacity

    @property
    def weekly_staff_salaries(self) -> int:
        return sum(member.weekly_salary for member in self.staff)

    @property
    def weekly_loan_payments(self) -> int:
        return sum(min(loan.weekly_payment, max(0, loan.remaining_balance)) for loan in self.loans)


# ============================================================================
# Campaign State
# ============================================================================


class EventType(str, Enum):
    WEEK_ADVANCED = "week_advanced"
    MONTH_CHANGED = "month_changed"
    SEASON_ENDED = "season_ended"
    BOARD_REFRESHED = "board_refreshed"
    MISSION_POSTED = "mission_posted"
    MISSION_UNLOCKED = "mission_unlocked"
    MISSION_ACCEPTED = "mission_accepted"
    MISSION_COMPLETED = "mission_completed"
    MISSION_FAILED = "mission_failed"
    AGENT_INJURED = "agent_injured"
    AGENT_RECOVERED = "agent_recovered"
    AGENT_DIED = "agent_died"
    LEVEL_UP = "level_up"
    LOOT_OBTAINED = "loot_obtained"
    AGENT_HIRED = "agent_hired"
    AGENT_DISMISSED = "agent_dismissed"
    FACILITY_UPGRADED = "facility_upgraded"
    STAFF_HIRED = "staff_hired"
    STAFF_DISMISSED = "staff_dismissed"
    LOAN_TAKEN = "loan_taken"
    LOAN_REPAID = "loan_repaid"
    IN_DEBT = "in_debt"
    TREASURY_LOW = "treasury_low"
    BUDGET_REVIEW = "budget_review"
    COUNCIL_WARNING = "council_warning"
    ULTIMATUM_ISSUED = "ultimatum_issued"
    ULTIMATUM_MET = "ultimatum_met"
    ULTIMATUM_EXPIRED = "ultimatum_expired"
    DISMISSAL_IMMINENT = "dismissal_imminent"


class GameEvent(BaseModel):
    """One entry in the campaign's event log, stamped with the calendar."""

    event_id: str
    event_type: EventType
    message: str
    season: int
    month: int
    week: int
    related_entity_id: Optional[str] = None


class CampaignSettings(BaseModel):
    difficulty: DifficultyLevel = DifficultyLevel.NORMAL
    permadeath: bool = False


class CampaignState(BaseModel):
    """The complete, explicitly passed simulation state.

    ``total_weeks`` counts elapsed weeks; ``month`` runs 1-12 and ``season``
    increments each time the month wraps.
    """

    campaign_name: str
    season: int = Field(1, ge=1)
    month: int = Field(1, ge=1, le=12)
    total_weeks: int = Field(0, ge=0)
    settings: CampaignSettings = Field(default_factory=CampaignSettings)
    guild: Guild
    agents: Dict[str, Agent] = Field(default_factory=dict, description="Every agent ever generated")
    free_agents: List[str] = Field(default_factory=list, description="Agent ids available for hire")
    missions: Dict[str, Mission] = Field(default_factory=dict)
    events: List[GameEvent] = Field(default_factory=list)
    event_counter: int = 0

    @property
    def season_phase(self) -> SeasonPhase:
        return SeasonPhase.for_month(self.month)

    @property
    def difficulty(self) -> DifficultyLevel:
        return self.settings.difficulty

    def log_event(
        self,
        event_type: EventType,
        message: str,
        related_entity_id: Optional[str] = None,
    ) -> GameEvent:
        self.event_counter += 1
        event = GameEvent(
            event_id=f"evt-{self.event_counter:06d}",
            event_type=event_type,
            message=message,
            season=self.season,
            month=self.month,
            week=self.total_weeks,
            related_entity_id=related_entity_id,
        )
        self.events.append(event)
        return event

    def events_of_type(self, event_type: EventType) -> List[GameEvent]:
        return [event for event in self.events if event.event_type is event_type]

    def roster_agents(self) -> List[Agent]:
        return [self.agents[agent_id] for agent_id in self.guild.roster if agent_id in self.agents]

    def missions_with_status(self, status: MissionStatus) -> List[Mission]:
        return [mission for mission in self.missions.values() if mission.status is status]

    def assigned_agent_ids(self) -> set[str]:
        """Agents currently committed to an in-progress mission."""
        assigned: set[str] = set()
        for mission in self.missions_with_status(MissionStatus.IN_PROGRESS):
            assigned.update(mission.party)
        return assigned

    @property
    def weekly_wage_bill(self) -> int:
        return sum(agent.weekly_wage for agent in self.roster_agents() if agent.is_alive)

    @property
    def weekly_operating_costs(self) -> int:
        """Wages, staff salaries and maintenance for one week (loans excluded)."""
        return (
            self.weekly_wage_bill
            + self.guild.weekly_staff_salaries
            + self.guild.facilities.weekly_maintenance
        )


# ============================================================================
# Run Metadata
# ============================================================================


class CampaignRun(BaseModel):
    """Metadata for one campaign run, stored alongside its weekly snapshots.

    Lifecycle:
    1. Created before the first week (status="running")
    2. Finalized when the runner exits (status="completed" or "failed")

    ``seed`` and ``config`` are recorded so a run can be replayed exactly.
    """

    id: UUID = Field(..., description="Unique run identifier")
    campaign_name: str
    start_time: datetime
    end_time: Optional[datetime] = None
    num_weeks: int = Field(..., ge=0, description="Weeks requested")
    seed: Optional[int] = None
    status: str = Field("running", description="running, completed or failed")
    config: Dict[str, Any] = Field(default_factory=dict)
