# match_core/report.py
from __future__ import annotations
from typing import Sequence

from .models import Attendee, MatchResult

HEADER = "Optimal Pairs (Hungarian Algorithm):"


def describe(a: Attendee) -> str:
    return (
        f"Attendee {a.id} (Interest: {a.interest}, Role: {a.role}, Country: {a.country}, "
        f"Industry: {a.industry}, Company Size: {a.company_size})"
    )


def format_report(result: MatchResult, attendees: Sequence[Attendee]) -> str:
    """One line per directed assignment, in row order."""
    by_id = {a.id: a for a in attendees}
    lines = [HEADER]
    for p in result.pairs:
        lines.append(f"{describe(by_id[p.left_id])} matched with {describe(by_id[p.right_id])}")
    lines.append(
        f"Total score: {result.total_score} ({len(result.mutual_pairs)} mutual pairs)"
    )
    return "\n".join(lines) + "\n"
