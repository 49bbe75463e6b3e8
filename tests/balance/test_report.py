"""Tests for report generation."""

from __future__ import annotations

from autobattle.balance.models import FieldStats, MatchupStats
from autobattle.balance.report import generate_field_report, generate_text_report


def _make_matchup(
    deck_b: str = "Archer Control",
    wins_a: int = 7,
    games: int = 10,
    timeout_ties: int = 0,
) -> MatchupStats:
    return MatchupStats(
        deck_a="Goblin Rush",
        deck_b=deck_b,
        games=games,
        wins_a=wins_a,
        wins_b=games - wins_a,
        win_rate_a=wins_a / games * 100,
        avg_turns=6.4,
        reasons={"player-hp": 6, "deck-out": 3, "timeout": 1},
        timeout_ties=timeout_ties,
    )


class TestTextReport:
    def test_contains_record_and_rates(self) -> None:
        report = generate_text_report(_make_matchup())

        assert "Goblin Rush vs Archer Control (10 games)" in report
        assert "7-3" in report
        assert "Win rate:        70.0%" in report
        assert "Avg game length: 6.4 turns" in report

    def test_end_reasons(self) -> None:
        report = generate_text_report(_make_matchup())

        assert "## End Reasons" in report
        assert "player-hp" in report
        assert "deck-out" in report
        assert "timeout" in report
        assert "equal HP" not in report

    def test_timeout_ties_listed(self) -> None:
        report = generate_text_report(_make_matchup(timeout_ties=1))
        assert "timeouts with equal HP: 1" in report

    def test_large_game_count_formatting(self) -> None:
        report = generate_text_report(_make_matchup(wins_a=600, games=1000))
        assert "(1,000 games)" in report


class TestFieldReport:
    def test_sorted_by_win_rate(self) -> None:
        stats = FieldStats(
            deck="Goblin Rush",
            wins=9,
            games=20,
            win_rate=45.0,
            matchups=[
                _make_matchup("Skeleton Wall", wins_a=2),
                _make_matchup("Archer Control", wins_a=7),
            ],
        )

        report = generate_field_report(stats)

        assert "Goblin Rush vs field (2 opponents)" in report
        assert "Overall: 9/20 (45.0%)" in report
        assert "## Matchups" in report
        assert report.index("Archer Control") < report.index("Skeleton Wall")
