"""Reason-tagged results for caller-facing guild operations.

Operations that a player can legitimately attempt but that break a game
precondition (a full roster, an empty purse) return an ``OperationResult``
instead of raising. Programming errors still raise.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class FailureReason(str, Enum):
    # Missions
    MISSION_NOT_FOUND = "mission_not_found"
    MISSION_NOT_AVAILABLE = "mission_not_available"
    MISSION_NOT_IN_PROGRESS = "mission_not_in_progress"
    PARTY_TOO_SMALL = "party_too_small"
    PARTY_TOO_LARGE = "party_too_large"
    AGENT_NOT_AVAILABLE = "agent_not_available"
    AGENT_ON_MISSION = "agent_on_mission"
    MISSION_NOT_LOCKED = "mission_not_locked"
    TIER_TOO_LOW = "tier_too_low"

    # Roster
    AGENT_NOT_FOUND = "agent_not_found"
    NOT_FREE_AGENT = "not_free_agent"
    NOT_IN_ROSTER = "not_in_roster"
    NO_ROSTER_SPACE = "no_roster_space"

    # Guild operations
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ALREADY_MAX_RATING = "already_max_rating"
    ROLE_ALREADY_FILLED = "role_already_filled"
    STAFF_NOT_FOUND = "staff_not_found"
    INVALID_AMOUNT = "invalid_amount"


class OperationResult(BaseModel):
    """Outcome of a guild operation: ``ok`` plus either a value or a reason."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: bool
    reason: Optional[FailureReason] = None
    value: Any = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "OperationResult":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, reason: FailureReason, message: str = "") -> "OperationResult":
        return cls(ok=False, reason=reason, message=message or reason.value.replace("_", " "))

    def __bool__(self) -> bool:
        return self.ok
