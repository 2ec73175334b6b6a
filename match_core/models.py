# match_core/models.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import ATTRIBUTES, FORBIDDEN_COST, HIGH_COST, MAX_ATTENDEES, MIN_ACCEPTABLE_SCORE
from .errors import InvalidInput

Number = Union[int, float]


class Attendee(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    interest: str
    role: str
    country: str
    industry: str
    company_size: str

    def attribute(self, name: str) -> str:
        if name not in ATTRIBUTES:
            raise InvalidInput(f"Unknown attendee attribute: {name}")
        return getattr(self, name)


class AttributeRule(BaseModel):
    """Scoring rule for one attendee attribute.

    exact_weight is added when both values are equal, similar_weight when the
    column value is listed in similar[row value]. When order is given, a
    gap of more than max_gap steps between the two values subtracts
    gap_penalty.
    """
    name: str
    exact_weight: Number = 0
    similar_weight: Number = 0
    similar: Dict[str, List[str]] = Field(default_factory=dict)
    order: Optional[List[str]] = None
    gap_penalty: Number = 0
    max_gap: int = 1

    @field_validator("name")
    @classmethod
    def _known_attribute(cls, v):
        if v not in ATTRIBUTES:
            raise ValueError(f"unknown attribute {v!r}; expected one of {ATTRIBUTES}")
        return v

    @field_validator("exact_weight", "similar_weight", "gap_penalty")
    @classmethod
    def _non_negative(cls, v):
        if v < 0:
            raise ValueError("weights and penalties must be non-negative")
        return v

    @field_validator("order")
    @classmethod
    def _unique_order(cls, v):
        if v is not None and len(set(v)) != len(v):
            raise ValueError("order must not repeat values")
        return v

    @field_validator("max_gap")
    @classmethod
    def _gap_positive(cls, v):
        if v < 0:
            raise ValueError("max_gap must be >= 0")
        return v

    def max_contribution(self) -> Number:
        return self.exact_weight + self.similar_weight


class ScoringConfig(BaseModel):
    rules: List[AttributeRule]
    min_score: Number = MIN_ACCEPTABLE_SCORE
    high_cost: Number = HIGH_COST
    forbidden_cost: Number = FORBIDDEN_COST

    @field_validator("rules")
    @classmethod
    def _unique_rules(cls, v):
        if not v:
            raise ValueError("at least one attribute rule is required")
        names = [r.name for r in v]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate attribute rules: {names}")
        return v

    @model_validator(mode="after")
    def _sentinels(self):
        if self.high_cost <= 0:
            raise ValueError("high_cost must be positive")
        if self.forbidden_cost <= self.high_cost:
            raise ValueError("forbidden_cost must exceed high_cost")
        # One forbidden entry must outweigh any full matching of legal entries
        if self.forbidden_cost <= MAX_ATTENDEES * (self.high_cost + self.max_score()):
            raise ValueError("forbidden_cost too small to dominate legal costs")
        return self

    def max_score(self) -> Number:
        return sum(r.max_contribution() for r in self.rules)

    def is_integral(self) -> bool:
        values = [self.min_score, self.high_cost, self.forbidden_cost]
        for r in self.rules:
            values += [r.exact_weight, r.similar_weight, r.gap_penalty]
        return all(isinstance(x, int) or float(x).is_integer() for x in values)


class Pair(BaseModel):
    left_id: int
    right_id: int
    score: Optional[Number] = None  # None when the pair was suppressed
    mutual: bool = False


class MatchResult(BaseModel):
    assignment: List[int]
    pairs: List[Pair]
    total_cost: Number
    total_score: Number
    mutual_pairs: List[Tuple[int, int]] = Field(default_factory=list)
    method: str = "hungarian"
