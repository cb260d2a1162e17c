"""Tests for the command-line entry point."""

from pathlib import Path

from guildsim.__main__ import main, parse_args

SCENARIOS_DIR = str(Path(__file__).resolve().parent.parent / "examples" / "scenarios")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.scenario == "starter_guild"
    assert args.save_dir is None


def test_runs_scenario(monkeypatch, capsys):
    monkeypatch.setenv("GUILDSIM_NO_COLOR", "1")
    code = main(["--scenarios-dir", SCENARIOS_DIR, "--weeks", "2", "--seed", "3"])

    assert code == 0
    out = capsys.readouterr().out
    assert "=== Week 2/2 ===" in out
    assert "The Iron Lanterns: treasury" in out


def test_save_dir_writes_snapshots(tmp_path):
    code = main(
        [
            "--scenarios-dir", SCENARIOS_DIR,
            "--scenario", "debt_crisis",
            "--weeks", "1",
            "--seed", "8",
            "--save-dir", str(tmp_path),
        ]
    )

    assert code == 0
    (run_dir,) = list(tmp_path.iterdir())
    assert (run_dir / "run.json").exists()
    assert sorted(p.name for p in (run_dir / "states").iterdir()) == ["00000.json", "00001.json"]


def test_missing_scenario_exits_with_usage_error(tmp_path, capsys):
    assert main(["--scenarios-dir", str(tmp_path), "--scenario", "ghost", "--weeks", "1"]) == 2
    assert "ghost" in capsys.readouterr().out


def test_negative_weeks_rejected(capsys):
    assert main(["--scenarios-dir", SCENARIOS_DIR, "--weeks", "-1"]) == 2
