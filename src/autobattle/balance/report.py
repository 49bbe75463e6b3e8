"""Report generation for trial aggregates.

Human-readable summaries for the terminal: record, win rate and average
game length, then the breakdown of how games ended.
"""

from __future__ import annotations

from autobattle.balance.models import FieldStats, MatchupStats

_REASONS = ("player-hp", "deck-out", "timeout")


def generate_text_report(stats: MatchupStats) -> str:
    """Generate a summary of one matchup."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"{stats.deck_a} vs {stats.deck_b} ({stats.games:,} games)")
    lines.append("=" * 60)
    lines.append(f"  Record:          {stats.wins_a}-{stats.wins_b}")
    lines.append(f"  Win rate:        {stats.win_rate_a:.1f}%")
    lines.append(f"  Avg game length: {stats.avg_turns:.1f} turns")

    lines.append("")
    lines.append("## End Reasons")
    for reason in _REASONS:
        lines.append(f"  {reason:15s}  {stats.reasons.get(reason, 0)}")
    if stats.timeout_ties:
        lines.append(f"  (timeouts with equal HP: {stats.timeout_ties})")

    lines.append("")
    return "\n".join(lines)


def generate_field_report(stats: FieldStats) -> str:
    """Generate a summary of one deck against a field of opponents."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"{stats.deck} vs field ({len(stats.matchups)} opponents)")
    lines.append("=" * 60)
    lines.append(f"  Overall: {stats.wins}/{stats.games} ({stats.win_rate:.1f}%)")

    lines.append("")
    lines.append("## Matchups")
    for m in sorted(stats.matchups, key=lambda m: m.win_rate_a, reverse=True):
        lines.append(
            f"  {m.deck_b:30s}  {m.wins_a}-{m.wins_b}"
            f"  wr={m.win_rate_a:.1f}%  turns={m.avg_turns:.1f}"
        )

    lines.append("")
    return "\n".join(lines)
