"""Tests for colored console output, message tags and configuration checks.

These tests assert that:
- GUILDSIM_NO_COLOR strips ANSI codes from every message
- Weekly summaries carry the [•] tag and warnings carry [!]
- Config rejects unknown difficulties
"""

from __future__ import annotations

import pytest

from factories import make_state

from guildsim.campaign import Campaign
from guildsim.catalog import DifficultyLevel
from guildsim.config import Config
from guildsim.logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_SUCCESS,
    LOG_TAG_WARNING,
    Color,
    colored,
    log_warning,
)
from guildsim.simulation_rules import GuildRules


def test_colored_wraps_text(monkeypatch):
    monkeypatch.delenv("GUILDSIM_NO_COLOR", raising=False)
    assert colored("hello", Color.GREEN) == f"{Color.GREEN.value}hello{Color.RESET.value}"
    assert colored("hello", Color.RED, bold=True).startswith(Color.BOLD.value + Color.RED.value)


def test_no_color_env_disables_codes(monkeypatch, capsys):
    monkeypatch.setenv("GUILDSIM_NO_COLOR", "1")
    assert colored("plain", Color.CYAN) == "plain"

    log_warning(f"{LOG_TAG_WARNING} careful")
    assert capsys.readouterr().out == "[!] careful\n"


@pytest.mark.asyncio
async def test_week_summary_and_debt_warning_tags(monkeypatch, capsys):
    monkeypatch.setenv("GUILDSIM_NO_COLOR", "1")
    state = make_state(treasury=-100)

    campaign = Campaign(state, seed=3, rules=GuildRules(auto_dispatch=False), verbose=False)
    await campaign.run(1)

    out = capsys.readouterr().out
    assert "\033[" not in out
    assert f"{LOG_TAG_DETERMINISTIC} Treasury=" in out
    assert f"{LOG_TAG_WARNING} Treasury in debt" in out
    assert f"{LOG_TAG_SUCCESS} Campaign complete!" in out


@pytest.mark.asyncio
async def test_healthy_treasury_has_no_warning(monkeypatch, capsys):
    monkeypatch.setenv("GUILDSIM_NO_COLOR", "1")
    campaign = Campaign(make_state(treasury=50_000), seed=3, rules=GuildRules(auto_dispatch=False))
    await campaign.run(1)

    assert LOG_TAG_WARNING not in capsys.readouterr().out


def test_config_difficulty(monkeypatch):
    monkeypatch.setattr(Config, "DIFFICULTY", " Hard ")
    assert Config.difficulty() is DifficultyLevel.HARD
    Config.validate()


def test_config_rejects_unknown_difficulty(monkeypatch):
    monkeypatch.setattr(Config, "DIFFICULTY", "nightmare")
    with pytest.raises(ValueError, match="GUILDSIM_DIFFICULTY"):
        Config.validate()


def test_config_rejects_negative_weeks(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_WEEKS", -1)
    with pytest.raises(ValueError, match="GUILDSIM_WEEKS"):
        Config.validate()


def test_config_display_mentions_seed(monkeypatch):
    monkeypatch.setattr(Config, "SEED", 42)
    assert "Seed: 42" in Config.display()
