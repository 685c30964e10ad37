"""Tests for the report job."""

from pathlib import Path

import pytest

from decktally.jobs.report import main, run_report
from decktally.models.errors import GameParseError, SourceReadError


class TestRunReport:
    def test_renders_requested_selections(self, sample_game_log_path: Path) -> None:
        lines = run_report(sample_game_log_path, ["Rb", "5c Atraxa"], ["Noah"])

        assert lines[0] == "Raw Matchup data:"
        assert "Rb Midrange vs. field: 1 - 2" in lines
        assert "5c Atraxa vs. field: 1 - 1" in lines
        assert lines[-1] == "Noah's record: 1 - 1"

    def test_missing_log_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(SourceReadError):
            run_report(tmp_path / "missing.csv", ["Rb"], ["Noah"])

    def test_bad_report_deck(self, sample_game_log_path: Path) -> None:
        with pytest.raises(GameParseError):
            run_report(sample_game_log_path, ["Zz"], [])


class TestMain:
    def test_prints_report(
        self, sample_game_log_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(
            [
                "--data-path",
                str(sample_game_log_path),
                "--deck",
                "Grixis",
                "--player",
                "Grant",
                "--player",
                "Isaac",
            ]
        )

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Raw Matchup data:"
        assert "Grixis Midrange vs. field: 2 - 1" in out
        assert out[-2:] == ["Grant's record: 2 - 0", "Isaac's record: 0 - 1"]

    def test_uses_configured_selections(
        self, sample_game_log_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--data-path", str(sample_game_log_path)])

        out = capsys.readouterr().out.splitlines()
        assert "White Midrange vs. field: 0 - 0" in out
        assert "5c Atraxa vs. field: 1 - 1" in out
        assert "Eamonn's record: 0 - 1" in out

    def test_missing_log_exits_nonzero(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--data-path", str(tmp_path / "missing.csv")])

        assert exc_info.value.code == 1

    def test_directory_as_log_exits_nonzero(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--data-path", str(tmp_path)])

        assert exc_info.value.code == 1

    def test_bad_deck_option_is_usage_error(
        self, sample_game_log_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--data-path", str(sample_game_log_path), "--deck", "Zz"])

        assert exc_info.value.code == 2
        assert "invalid report deck" in capsys.readouterr().err
