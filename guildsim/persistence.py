"""
PersistenceStrategy interface for pluggable campaign storage.

This module provides the abstract PersistenceStrategy interface and two
concrete implementations for storing weekly campaign snapshots. Persistence
is OPTIONAL: a campaign runs entirely in memory by default.

Two included implementations:
1. InMemoryPersistence - Dict-based storage, data lost on exit (testing, prototyping)
2. JsonPersistence - File-based storage, human-readable JSON (saves, debugging)

Key responsibilities:
- Save/retrieve CampaignState snapshots by week
- Track run metadata (seed, status, timing)
- List and delete stored runs

Async design rationale:
- The simulation itself is synchronous; only storage is awaited
- initialize() and close() manage the backend lifecycle (directories, handles)

Usage pattern:
    persistence = InMemoryPersistence()  # or JsonPersistence("campaign_runs")
    await persistence.initialize()
    await persistence.save_state(run_id, week, state)
    await persistence.close()
"""

import asyncio
import json
import shutil
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
from uuid import UUID

from .schemas import CampaignRun, CampaignState


class PersistenceStrategy(ABC):
    """Abstract base class for campaign persistence.

    Method categories:
    1. Lifecycle: initialize(), close()
    2. Run metadata: save_run_metadata(), update_run_status()
    3. State snapshots: save_state(), get_state(), list_weeks()
    4. Cleanup: delete_run()

    Snapshots must round-trip exactly: a state read back with get_state()
    compares equal to the state that was saved.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Prepare the backend. Called once before the first week."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release backend resources. Called once after the last week."""
        pass

    @abstractmethod
    async def save_run_metadata(self, run: CampaignRun) -> None:
        pass

    @abstractmethod
    async def update_run_status(
        self, run_id: UUID, status: str, end_time: Optional[datetime] = None
    ) -> None:
        pass

    @abstractmethod
    async def save_state(self, run_id: UUID, week: int, state: CampaignState) -> None:
        """
        Save the campaign state at the end of ``week``.

        Args:
            run_id: Unique run identifier
            week: Week number within the run (0 = initial state)
            state: Complete campaign state to save
        """
        pass

    @abstractmethod
    async def get_state(self, run_id: UUID, week: int) -> Optional[CampaignState]:
        """
        Retrieve a saved snapshot.

        Returns:
            CampaignState if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_weeks(self, run_id: UUID) -> List[int]:
        """Weeks with a saved snapshot for ``run_id``, ascending."""
        pass

    @abstractmethod
    async def delete_run(self, run_id: UUID) -> None:
        pass


class InMemoryPersistence(PersistenceStrategy):
    """In-memory persistence using Python dicts (no files).

    Storage structure:
    - runs: Dict[UUID, CampaignRun] - run metadata
    - states: Dict[(run_id, week), CampaignState] - snapshots by (run, week) key

    Snapshots are deep-copied on the way in and out, so later mutation by the
    caller never reaches stored data.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self.runs: Dict[UUID, CampaignRun] = {}
        self.states: Dict[tuple[UUID, int], CampaignState] = {}

    async def initialize(self) -> None:
        pass

    async def close(self) -> None:
        """
        No-op: data is kept after close so callers can read results
        post-run. Use delete_run() for explicit cleanup.
        """
        pass

    async def save_run_metadata(self, run: CampaignRun) -> None:
        self.runs[run.id] = run.model_copy(deep=True)

    async def update_run_status(
        self, run_id: UUID, status: str, end_time: Optional[datetime] = None
    ) -> None:
        if run_id in self.runs:
            self.runs[run_id].status = status
            if end_time:
                self.runs[run_id].end_time = end_time

    async def save_state(self, run_id: UUID, week: int, state: CampaignState) -> None:
        self.states[(run_id, week)] = state.model_copy(deep=True)

    async def get_state(self, run_id: UUID, week: int) -> Optional[CampaignState]:
        state = self.states.get((run_id, week))
        return state.model_copy(deep=True) if state is not None else None

    async def list_weeks(self, run_id: UUID) -> List[int]:
        return sorted(week for stored_run, week in self.states if stored_run == run_id)

    async def delete_run(self, run_id: UUID) -> None:
        self.runs.pop(run_id, None)

        state_keys = [key for key in self.states if key[0] == run_id]
        for key in state_keys:
            del self.states[key]


class JsonPersistence(PersistenceStrategy):
    """File-based persistence using JSON for human-readable storage.

    Directory structure:
    ```
    {base_path}/
      {run_id}/
        run.json                  # CampaignRun metadata
        states/
          00000.json              # CampaignState before week 1
          00001.json              # CampaignState after week 1
          ...
    ```

    File format details:
    - Pretty-printed JSON (indent=2) via ``model_dump(mode="json")``
    - Week padding: 5 digits for lexicographic sorting
    - All file I/O runs in a thread (asyncio.to_thread)
    """

    def __init__(self, base_path: Path | str = "campaign_runs"):
        self.base_path = Path(base_path)

    async def initialize(self) -> None:
        await asyncio.to_thread(self.base_path.mkdir, parents=True, exist_ok=True)

    async def close(self) -> None:
        # Nothing to clean up for JSON persistence
        return None

    async def save_run_metadata(self, run: CampaignRun) -> None:
        run_dir = self._run_dir(run.id)
        await asyncio.to_thread(run_dir.mkdir, parents=True, exist_ok=True)
        path = run_dir / "run.json"
        data = run.model_dump(mode="json")
        await asyncio.to_thread(
            path.write_text, json.dumps(data, indent=2), "utf-8"
        )

    async def update_run_status(
        self, run_id: UUID, status: str, end_time: Optional[datetime] = None
    ) -> None:
        path = self._run_dir(run_id) / "run.json"
        if not path.exists():  # Nothing to update yet
            return

        def _update() -> None:
            payload = json.loads(path.read_text("utf-8"))
            payload["status"] = status
            payload["end_time"] = end_time.isoformat() if end_time else None
            path.write_text(json.dumps(payload, indent=2), "utf-8")

        await asyncio.to_thread(_update)

    async def save_state(self, run_id: UUID, week: int, state: CampaignState) -> None:
        path = self._state_path(run_id, week)
        await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
        payload = state.model_dump(mode="json")
        await asyncio.to_thread(
            path.write_text, json.dumps(payload, indent=2), "utf-8"
        )

    async def get_state(self, run_id: UUID, week: int) -> Optional[CampaignState]:
        path = self._state_path(run_id, week)
        if not path.exists():
            return None

        payload = await asyncio.to_thread(json.loads, path.read_text("utf-8"))
        return CampaignState.model_validate(payload)

    async def list_weeks(self, run_id: UUID) -> List[int]:
        directory = self._run_dir(run_id) / "states"
        if not directory.exists():
            return []

        def _scan() -> List[int]:
            return sorted(int(path.stem) for path in directory.glob("*.json"))

        return await asyncio.to_thread(_scan)

    async def delete_run(self, run_id: UUID) -> None:
        run_dir = self._run_dir(run_id)
        if run_dir.exists():
            await asyncio.to_thread(shutil.rmtree, run_dir)

    def _run_dir(self, run_id: UUID) -> Path:
        return self.base_path / str(run_id)

    def _state_path(self, run_id: UUID, week: int) -> Path:
        return self._run_dir(run_id) / "states" / f"{week:05d}.json"
