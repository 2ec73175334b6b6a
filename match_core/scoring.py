# FILE: match_core/scoring.py
from __future__ import annotations
from typing import Dict, FrozenSet, List, Optional, Sequence

import numpy as np

from .errors import InvalidInput
from .models import Attendee, AttributeRule, Number, ScoringConfig


class RuleTable:
    """
    One AttributeRule compiled into explicit lookup tables:
    value -> frozenset of similar values, and value -> ordinal rank.
    """

    def __init__(self, rule: AttributeRule):
        self.rule = rule
        self.similar: Dict[str, FrozenSet[str]] = {
            value: frozenset(others) for value, others in rule.similar.items()
        }
        self.rank: Optional[Dict[str, int]] = None
        if rule.order is not None:
            self.rank = {value: i for i, value in enumerate(rule.order)}

    @property
    def name(self) -> str:
        return self.rule.name

    def rank_of(self, value: str) -> int:
        if self.rank is None:
            raise InvalidInput(f"{self.name} has no declared ordering")
        if value not in self.rank:
            raise InvalidInput(
                f"{self.name} value {value!r} has no declared bucket in {self.rule.order}"
            )
        return self.rank[value]

    def is_similar(self, a: str, b: str) -> bool:
        return b in self.similar.get(a, frozenset())

    def contribution(self, a: str, b: str) -> Number:
        r = self.rule
        score: Number = 0
        if a == b:
            score += r.exact_weight
        if r.similar_weight and self.is_similar(a, b):
            score += r.similar_weight
        if self.rank is not None and abs(self.rank_of(a) - self.rank_of(b)) > r.max_gap:
            score -= r.gap_penalty
        return score

    def contribution_matrix(self, values: Sequence[str]) -> np.ndarray:
        """contribution(values[i], values[j]) for every ordered (i, j)."""
        r = self.rule
        vocab = sorted(set(values) | set(self.similar) | {s for v in self.similar.values() for s in v})
        index = {v: k for k, v in enumerate(vocab)}
        codes = np.array([index[v] for v in values], dtype=np.int64)

        out = r.exact_weight * (codes[:, None] == codes[None, :])
        if r.similar_weight and self.similar:
            sim = np.zeros((len(vocab), len(vocab)), dtype=bool)
            for a, others in self.similar.items():
                for b in others:
                    sim[index[a], index[b]] = True
            out = out + r.similar_weight * sim[codes[:, None], codes[None, :]]
        if self.rank is not None:
            ranks = np.array([self.rank_of(v) for v in values], dtype=np.int64)
            gap = np.abs(ranks[:, None] - ranks[None, :]) > r.max_gap
            out = out - r.gap_penalty * gap
        return out


def compile_rules(config: ScoringConfig) -> List[RuleTable]:
    return [RuleTable(rule) for rule in config.rules]


def pair_score(a: Attendee, b: Attendee, tables: List[RuleTable]) -> Number:
    """Compatibility score of assigning a (row) to b (column)."""
    return sum(t.contribution(a.attribute(t.name), b.attribute(t.name)) for t in tables)


def score_pair(a: Attendee, b: Attendee, config: ScoringConfig) -> Number:
    return pair_score(a, b, compile_rules(config))
