"""Tests for the command-line interface."""

import csv

import pytest
import yaml
from expert_router.main import main, parse_args


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        """Test defaults leave config values untouched."""
        parsed = parse_args([])
        assert parsed.config is None
        assert parsed.pool_size is None
        assert parsed.tier is None
        assert parsed.step == 0
        assert not parsed.quiet

    def test_overrides(self):
        """Test override flags are parsed."""
        parsed = parse_args(["--pool-size", "32", "--tiers", "nano,pro", "--quiet"])
        assert parsed.pool_size == 32
        assert parsed.tiers == "nano,pro"
        assert parsed.quiet


class TestSingleDecision:
    """Test routing one step from the CLI."""

    def test_route_standard(self, capsys):
        """Test the printed decision for Standard step 1."""
        assert main(["--tier", "standard", "--step", "1", "--pool-size", "8"]) == 0
        out = capsys.readouterr().out
        assert "experts=[4, 5, 6, 7]" in out

    def test_route_with_ids(self, capsys):
        """Test expert ids are printed on request."""
        assert main(["--tier", "nano", "--pool-size", "4", "--ids"]) == 0
        out = capsys.readouterr().out
        assert "01" + "00" * 31 in out

    def test_insufficient_pool(self, capsys):
        """Test an unservable tier exits with an error."""
        assert main(["--tier", "max", "--pool-size", "10"]) == 1
        assert "needs 16" in capsys.readouterr().err

    def test_unknown_tier(self, capsys):
        """Test an unknown tier name exits with an error."""
        assert main(["--tier", "ultra"]) == 1
        assert "Unknown tier" in capsys.readouterr().err


class TestReplay:
    """Test replay mode."""

    def test_replay_prints_table(self, capsys):
        """Test replay prints configuration and results."""
        assert main(["--pool-size", "16", "--num-steps", "4"]) == 0
        out = capsys.readouterr().out
        assert "Pool size: 16" in out
        assert "Results:" in out
        assert "standard" in out

    def test_replay_quiet(self, capsys):
        """Test quiet mode prints nothing."""
        assert main(["--pool-size", "10", "--quiet"]) == 0
        assert capsys.readouterr().out == ""

    def test_replay_output_csv(self, tmp_path):
        """Test results are written to CSV."""
        path = tmp_path / "results.csv"
        code = main(
            ["--pool-size", "8", "--tiers", "nano,pro", "--output", str(path), "--quiet"]
        )
        assert code == 0
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [row["tier"] for row in rows] == ["nano", "pro"]

    def test_replay_from_config(self, tmp_path, capsys):
        """Test replay reads a YAML config file."""
        path = tmp_path / "replay.yaml"
        path.write_text(yaml.dump({"pool_size": 20, "num_steps": 3, "tiers": ["pro"]}))
        assert main(["--config", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Pool size: 20" in out
        assert "Tiers: pro" in out

    def test_scalar_tier_in_config(self, tmp_path, capsys):
        """Test a single tier name in YAML replays that tier."""
        path = tmp_path / "replay.yaml"
        path.write_text("pool_size: 8\nnum_steps: 2\ntiers: nano\n")
        assert main(["--config", str(path)]) == 0
        assert "Tiers: nano" in capsys.readouterr().out

    @pytest.mark.parametrize("pool_size", [8.0, True])
    def test_non_int_pool_in_config(self, tmp_path, capsys, pool_size):
        """Test a float or bool pool size exits with an error."""
        path = tmp_path / "replay.yaml"
        path.write_text(
            yaml.dump({"pool_size": pool_size, "num_steps": 2, "tiers": ["nano"]})
        )
        assert main(["--config", str(path), "--quiet"]) == 1
        assert "pool_size must be an int" in capsys.readouterr().err

    def test_no_servable_tier_writes_header(self, tmp_path, capsys):
        """Test a pool too small for every tier still writes the CSV."""
        path = tmp_path / "results.csv"
        assert main(["--pool-size", "1", "--output", str(path)]) == 0
        out = capsys.readouterr().out
        assert "No results to display." in out
        assert f"Results written to: {path}" in out
        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert rows == []
        assert path.read_text().startswith("tier,budget,pool_size")

    def test_missing_config(self, tmp_path, capsys):
        """Test a missing config file exits with an error."""
        assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_unknown_strategy(self, capsys):
        """Test an unknown strategy exits with an error."""
        assert main(["--strategy", "load_aware"]) == 1
        assert "load_aware" in capsys.readouterr().err

    def test_invalid_num_steps(self, capsys):
        """Test invalid overrides are validated."""
        assert main(["--num-steps", "0"]) == 1
        assert "num_steps" in capsys.readouterr().err
