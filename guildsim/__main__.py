"""Run a scenario from the command line.

Example usage (runs the starter scenario for 12 weeks from seed 42):

    python -m guildsim --scenario starter_guild --weeks 12 --seed 42

Pass ``--save-dir`` to write weekly JSON snapshots under that directory.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from .campaign import Campaign, CampaignError
from .config import Config
from .logging_utils import LOG_TAG_INFO, LOG_TAG_WARNING, log_error, log_info, log_warning
from .persistence import JsonPersistence, PersistenceStrategy
from .sampling import make_rng
from .scenario import ScenarioLoader


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a guildsim campaign scenario")
    parser.add_argument("--scenario", default="starter_guild", help="Scenario name (without .json)")
    parser.add_argument("--weeks", type=int, default=Config.DEFAULT_WEEKS, help="Weeks to simulate")
    parser.add_argument(
        "--seed",
        type=int,
        default=Config.SEED,
        help="Random seed; omit for a non-reproducible run",
    )
    parser.add_argument(
        "--save-dir",
        default=None,
        help=f"Write JSON snapshots here (e.g. {Config.SAVE_DIR})",
    )
    parser.add_argument("--scenarios-dir", default=None, help="Directory holding scenario files")
    parser.add_argument("--verbose", action="store_true", default=Config.VERBOSE, help="Print per-mission detail")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    Config.validate()
    if args.weeks < 0:
        raise ValueError("--weeks cannot be negative")

    rng = make_rng(args.seed)
    loader = ScenarioLoader(Path(args.scenarios_dir) if args.scenarios_dir else None)
    state = loader.load(args.scenario, rng)

    persistence: Optional[PersistenceStrategy] = None
    if args.save_dir:
        persistence = JsonPersistence(args.save_dir)

    log_info(f"{LOG_TAG_INFO} {Config.display()}")
    campaign = Campaign(state, seed=args.seed, rng=rng, persistence=persistence, verbose=args.verbose)
    result = await campaign.run(args.weeks)

    final = result["final_state"]
    guild = final.guild
    log_info(
        f"{LOG_TAG_INFO} {guild.name}: treasury {guild.finances.treasury}g, "
        f"{guild.statistics.missions_completed} missions won, "
        f"{guild.statistics.missions_failed} lost, "
        f"confidence {guild.council.overall_confidence:.1f}"
    )
    if args.save_dir:
        log_info(f"{LOG_TAG_INFO} Snapshots saved under {Path(args.save_dir) / str(result['run_id'])}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return asyncio.run(run(args))
    except (FileNotFoundError, ValueError) as exc:
        log_warning(f"{LOG_TAG_WARNING} {exc}")
        return 2
    except CampaignError as exc:
        log_error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
