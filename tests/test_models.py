"""Tests for models.py — data classes and enums."""

from dataclasses import FrozenInstanceError
from datetime import date, time

import pytest

from goalfut.models import (
    DayOfWeek, GROUP_LETTERS, Match, MatchStatus, Pairing, PointsRules, Team,
)


class TestDayOfWeek:
    def test_from_str_full(self):
        assert DayOfWeek.from_str("Monday") == DayOfWeek.Mon
        assert DayOfWeek.from_str("Saturday") == DayOfWeek.Sat

    def test_from_str_short(self):
        assert DayOfWeek.from_str("Thu") == DayOfWeek.Thu
        assert DayOfWeek.from_str("sun") == DayOfWeek.Sun

    def test_from_str_spanish(self):
        assert DayOfWeek.from_str("sabado") == DayOfWeek.Sat
        assert DayOfWeek.from_str("Domingo") == DayOfWeek.Sun
        assert DayOfWeek.from_str("miércoles") == DayOfWeek.Wed
        assert DayOfWeek.from_str("miercoles") == DayOfWeek.Wed
        assert DayOfWeek.from_str("lunes") == DayOfWeek.Mon

    def test_from_str_unknown(self):
        with pytest.raises(KeyError):
            DayOfWeek.from_str("someday")

    def test_of_date(self):
        # 2026-03-07 is a Saturday
        assert DayOfWeek.of(date(2026, 3, 7)) == DayOfWeek.Sat
        assert DayOfWeek.of(date(2026, 3, 9)) == DayOfWeek.Mon

    def test_is_weekend(self):
        assert DayOfWeek.Sat.is_weekend()
        assert DayOfWeek.Sun.is_weekend()
        assert not DayOfWeek.Fri.is_weekend()


class TestMatchStatus:
    def test_values_are_stored_strings(self):
        assert MatchStatus.SCHEDULED.value == "programado"
        assert MatchStatus.FINISHED.value == "finalizado"

    def test_from_str(self):
        assert MatchStatus.from_str("finalizado") is MatchStatus.FINISHED
        assert MatchStatus.from_str("FINISHED") is MatchStatus.FINISHED
        assert MatchStatus.from_str(" programado ") is MatchStatus.SCHEDULED
        assert MatchStatus.from_str("en_juego") is MatchStatus.LIVE

    def test_from_str_unknown(self):
        with pytest.raises(ValueError):
            MatchStatus.from_str("cancelled-ish")


class TestTeam:
    def test_short_name_default(self):
        assert Team(id="1", name="Tigres").short_name == "TIG"

    def test_short_name_explicit(self):
        assert Team(id="1", name="Tigres", short_name="TGR").short_name == "TGR"

    def test_goal_difference(self):
        t = Team(id="1", name="X", goals_for=7, goals_against=10)
        assert t.goal_difference == -3

    def test_defaults(self):
        t = Team(id="1", name="X")
        assert t.points == 0
        assert t.yellow_cards == t.blue_cards == t.red_cards == 0
        assert t.group == ""

    def test_frozen(self):
        t = Team(id="1", name="X")
        with pytest.raises(FrozenInstanceError):
            t.points = 3


class TestPairing:
    def test_fields(self):
        a, b = Team(id="a", name="A"), Team(id="b", name="B")
        p = Pairing(group="A", home=a, away=b, round_index=0)
        assert p.home.id == "a"
        assert p.away.id == "b"


class TestMatch:
    def _match(self, **kwargs):
        defaults = dict(
            tournament_id="t", home_id="a", away_id="b", group="A",
            matchday=1, date=date(2026, 3, 7), time=time(9, 0),
        )
        defaults.update(kwargs)
        return Match(**defaults)

    def test_defaults(self):
        m = self._match()
        assert m.status is MatchStatus.SCHEDULED
        assert m.phase == "grupos"
        assert m.home_goals is None
        assert not m.is_finished

    def test_involves(self):
        m = self._match()
        assert m.involves("a")
        assert m.involves("b")
        assert not m.involves("c")

    def test_is_between(self):
        m = self._match()
        assert m.is_between("a", "b")
        assert m.is_between("b", "a")
        assert not m.is_between("a", "c")

    def test_goals(self):
        m = self._match(status=MatchStatus.FINISHED, home_goals=2, away_goals=1)
        assert m.is_finished
        assert m.goals_for("a") == 2
        assert m.goals_for("b") == 1
        assert m.goals_against("a") == 1
        assert m.goals_against("b") == 2


def test_points_rules_defaults():
    rules = PointsRules()
    assert (rules.win, rules.draw, rules.loss) == (3, 1, 0)


def test_group_letters():
    assert GROUP_LETTERS == list("ABCDEFGH")
