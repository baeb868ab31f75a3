"""Tests for results.py — results CSV import."""

from datetime import date, time

import pytest

from goalfut.errors import ConfigurationError
from goalfut.models import MatchStatus
from goalfut.results import parse_results_csv


def _write(tmp_path, text):
    path = tmp_path / "results.csv"
    path.write_text(text)
    return path


class TestParseResultsCsv:
    def test_full_rows(self, tmp_path):
        path = _write(tmp_path, (
            "tournament_id,home_id,away_id,group,matchday,date,time,status,home_goals,away_goals\n"
            "t1,a,b,A,1,2026-03-07,09:00,finalizado,2,1\n"
            "t1,c,d,A,1,2026-03-07,10:30,programado,,\n"
        ))
        first, second = parse_results_csv(path)
        assert (first.home_id, first.away_id) == ("a", "b")
        assert first.status is MatchStatus.FINISHED
        assert (first.home_goals, first.away_goals) == (2, 1)
        assert first.date == date(2026, 3, 7)
        assert first.time == time(9, 0)
        assert first.matchday == 1
        assert second.status is MatchStatus.SCHEDULED
        assert second.home_goals is None

    def test_minimal_columns_infer_finished(self, tmp_path):
        path = _write(tmp_path, (
            "home_id,away_id,home_goals,away_goals\n"
            "a,b,0,0\n"
            "a,c,,\n"
        ))
        drawn, pending = parse_results_csv(path, tournament_id="copa")
        assert drawn.is_finished
        assert drawn.tournament_id == "copa"
        assert drawn.date is None
        assert not pending.is_finished

    def test_skips_rows_without_teams(self, tmp_path):
        path = _write(tmp_path, (
            "home_id,away_id,home_goals,away_goals\n"
            ",b,1,0\n"
            "a,b,1,0\n"
        ))
        assert len(parse_results_csv(path)) == 1

    def test_english_status(self, tmp_path):
        path = _write(tmp_path, (
            "home_id,away_id,status,home_goals,away_goals\n"
            "a,b,finished,3,2\n"
        ))
        (m,) = parse_results_csv(path)
        assert m.status is MatchStatus.FINISHED

    def test_unknown_status(self, tmp_path):
        path = _write(tmp_path, (
            "home_id,away_id,status,home_goals,away_goals\n"
            "a,b,finalizado,1,0\n"
            "a,c,done,2,2\n"
        ))
        with pytest.raises(ConfigurationError, match="line 3"):
            parse_results_csv(path)

    def test_non_integer_goals(self, tmp_path):
        path = _write(tmp_path, (
            "home_id,away_id,home_goals,away_goals\n"
            "a,b,dos,1\n"
        ))
        with pytest.raises(ConfigurationError, match="line 2"):
            parse_results_csv(path)

    def test_bad_date(self, tmp_path):
        path = _write(tmp_path, (
            "home_id,away_id,date,home_goals,away_goals\n"
            "a,b,2026-03,1,1\n"
        ))
        with pytest.raises(ConfigurationError, match="line 2"):
            parse_results_csv(path)
