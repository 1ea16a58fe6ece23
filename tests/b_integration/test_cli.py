"""Integration tests for the primesieve command-line entry points."""

from __future__ import annotations

from pathlib import Path

import pytest

import primesieve
from primesieve import known
from primesieve.benchmark import cli


@pytest.fixture
def wrong_table(monkeypatch: pytest.MonkeyPatch) -> None:
    """Known-count table with a wrong entry for 1000."""
    monkeypatch.setattr(known, "KNOWN_PRIME_COUNTS", {1000: 169})


class TestBenchmarkRun:
    """Tests for `primesieve-benchmark run`."""

    def test_run_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the result line of a valid run."""
        code = cli.main(["run", "--size", "1000", "--time-limit", "0.05", "--quiet"])
        out = capsys.readouterr().out.strip().splitlines()

        assert code == 0
        label, passes, duration, threads, tags = out[-1].split(";")
        assert label == "primesieve"
        assert int(passes) >= 1
        assert float(duration) > 0
        assert threads == "1"
        assert tags == "algorithm=base,faithful=yes,bits=1"

    def test_run_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test verbose output with a custom label."""
        code = cli.main(
            [
                "run",
                "--size", "100",
                "--time-limit", "0.02",
                "--verbose",
                "--show", "10",
                "--label", "me",
                "--quiet",
            ]
        )
        out = capsys.readouterr().out

        assert code == 0
        assert "me;" in out
        assert "The first 10 found primes are: 2, 3, 5, 7, 11, 13, 17, 19, 23, 29" in out
        assert "Primes: 25, Valid: True" in out

    def test_run_unknown_limit_warns(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an untabulated size warns and still exits 0."""
        code = cli.main(["run", "--size", "500", "--time-limit", "0.02", "--quiet"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Warning: cannot validate result of 95 primes" in out

    @pytest.mark.usefixtures("wrong_table")
    def test_run_mismatch(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a wrong count prints the error line and exits 1."""
        code = cli.main(["run", "--size", "1000", "--time-limit", "0.02", "--quiet"])
        lines = capsys.readouterr().out.strip().splitlines()

        assert code == 1
        assert lines == [
            "Error: invalid result. Limit for 1000 should be 169 "
            "but result contains 168 primes"
        ]

    @pytest.mark.usefixtures("wrong_table")
    def test_run_mismatch_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the verbose report is still printed after a mismatch."""
        code = cli.main(
            ["run", "--size", "1000", "--time-limit", "0.02", "-v", "--show", "3", "--quiet"]
        )
        out = capsys.readouterr().out

        assert code == 1
        assert "Error: invalid result. Limit for 1000 should be 169" in out
        assert "The first 3 found primes are: 2, 3, 5" in out
        assert "Sieve size: 1000, Primes: 168, Valid: False" in out
        assert "Per pass: " in out
        assert "primesieve;" not in out

    def test_run_with_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test loading settings from a YAML file."""
        path = tmp_path / "sieve.yaml"
        path.write_text("sieveSize: 10000\ntimeLimitSeconds: 0.02\nlabel: fromfile\n")

        code = cli.main(["run", "--config", str(path), "--quiet"])
        out = capsys.readouterr().out

        assert code == 0
        assert out.strip().startswith("fromfile;")

    def test_cli_overrides_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that command-line options win over the file."""
        path = tmp_path / "sieve.yaml"
        path.write_text("sieve_size: 10000\ntime_limit_seconds: 60\n")

        code = cli.main(
            ["run", "--config", str(path), "--time-limit", "0.02", "--size", "100", "-v", "--quiet"]
        )
        out = capsys.readouterr().out

        assert code == 0
        assert "Sieve size: 100," in out

    def test_run_missing_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a missing config file is reported."""
        code = cli.main(["run", "--config", str(tmp_path / "nope.yaml")])
        assert code == 1
        assert "Error loading configuration" in capsys.readouterr().out

    def test_run_bad_config_type(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a mistyped config value is reported."""
        path = tmp_path / "sieve.yaml"
        path.write_text("sieve_size: 1.5\n")

        code = cli.main(["run", "--config", str(path)])
        assert code == 1
        assert "sieve_size must be an integer" in capsys.readouterr().out

    def test_run_bad_time_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a zero time limit is reported."""
        code = cli.main(["run", "--time-limit", "0"])
        assert code == 1
        assert "time_limit_seconds must be positive" in capsys.readouterr().out

    def test_run_progress_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that progress is shown without --quiet."""
        code = cli.main(["run", "--size", "1000", "--time-limit", "0.25"])
        out = capsys.readouterr().out

        assert code == 0
        assert "passes," in out


class TestOtherCommands:
    """Tests for `known`, `primes` and the bare command."""

    def test_known(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the known-count listing."""
        assert cli.main(["known"]) == 0
        out = capsys.readouterr().out
        assert "100000000" in out
        assert "5761455" in out

    def test_primes(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a single pass with a listing."""
        assert cli.main(["primes", "1000", "--show", "10"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Primes below 1000: 168"
        assert lines[1] == "2, 3, 5, 7, 11, 13, 17, 19, 23, 29"

    def test_primes_no_listing(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --show 0 prints only the count."""
        assert cli.main(["primes", "10", "--show", "0"]) == 0
        assert capsys.readouterr().out.strip() == "Primes below 10: 4"

    @pytest.mark.usefixtures("wrong_table")
    def test_primes_mismatch(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a wrong count exits 1 with the expected value."""
        assert cli.main(["primes", "1000", "--show", "0"]) == 1
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["Primes below 1000: 168", "Error: expected 169 primes"]

    @pytest.mark.parametrize("limit", ["0", "1"])
    def test_primes_degenerate(self, limit: str, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that limits 0 and 1 report no primes."""
        assert cli.main(["primes", limit, "--show", "0"]) == 0
        assert capsys.readouterr().out.strip() == f"Primes below {limit}: 0"

    def test_primes_negative(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a negative limit is rejected."""
        assert cli.main(["primes", "-5"]) == 1
        assert "Error" in capsys.readouterr().out

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that no subcommand prints help."""
        assert cli.main([]) == 0
        assert "primesieve-benchmark" in capsys.readouterr().out


class TestQuickCommand:
    """Tests for the `primesieve` entry point."""

    def test_count(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the one-shot count."""
        monkeypatch.setattr("sys.argv", ["primesieve", "100000"])
        primesieve.main()
        assert capsys.readouterr().out.strip() == "9592"

    def test_usage(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the usage message without arguments."""
        monkeypatch.setattr("sys.argv", ["primesieve"])
        with pytest.raises(SystemExit) as excinfo:
            primesieve.main()
        assert excinfo.value.code == 1
        assert "Usage" in capsys.readouterr().out

    def test_not_a_number(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a non-integer limit."""
        monkeypatch.setattr("sys.argv", ["primesieve", "many"])
        with pytest.raises(SystemExit):
            primesieve.main()
        assert "Error" in capsys.readouterr().out
