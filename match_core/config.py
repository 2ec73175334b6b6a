# match_core/config.py
"""
Scoring configuration: built-in defaults and YAML loading.
"""
from __future__ import annotations
import logging
import textwrap
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from .constants import (
    COMPANY_SIZES, COMPANY_SIZE_GAP_PENALTY, COMPANY_SIZE_WEIGHT, COUNTRY_WEIGHT,
    FORBIDDEN_COST, HIGH_COST, INDUSTRY_WEIGHT, INTEREST_WEIGHT, MIN_ACCEPTABLE_SCORE,
    ROLE_WEIGHT, SIMILAR_INDUSTRIES, SIMILAR_INDUSTRY_WEIGHT, SIMILAR_ROLES,
    SIMILAR_ROLE_WEIGHT,
)
from .errors import InvalidInput
from .models import ScoringConfig

logger = logging.getLogger(__name__)

# ===== Default scoring rules =====
DEFAULT_SCORING: Dict[str, Any] = {
    "min_score": MIN_ACCEPTABLE_SCORE,
    "high_cost": HIGH_COST,
    "forbidden_cost": FORBIDDEN_COST,
    "rules": [
        {"name": "interest", "exact_weight": INTEREST_WEIGHT},
        {
            "name": "role",
            "exact_weight": ROLE_WEIGHT,
            "similar_weight": SIMILAR_ROLE_WEIGHT,
            "similar": SIMILAR_ROLES,
        },
        {"name": "country", "exact_weight": COUNTRY_WEIGHT},
        {
            "name": "industry",
            "exact_weight": INDUSTRY_WEIGHT,
            "similar_weight": SIMILAR_INDUSTRY_WEIGHT,
            "similar": SIMILAR_INDUSTRIES,
        },
        {
            "name": "company_size",
            "exact_weight": COMPANY_SIZE_WEIGHT,
            "order": COMPANY_SIZES,
            "gap_penalty": COMPANY_SIZE_GAP_PENALTY,
            "max_gap": 1,
        },
    ],
}

# Same rules as DEFAULT_SCORING, as an editable template
DEFAULT_SCORING_YAML = textwrap.dedent("""\
min_score: 5
high_cost: 9999
forbidden_cost: 1000000000
rules:
  - name: interest
    exact_weight: 10
  - name: role
    exact_weight: 8
    similar_weight: 5
    similar:
      Dev: [Architect, Tester]
      PM: [Manager]
      Architect: [Dev]
      Tester: [Dev]
      Manager: [PM]
  - name: country
    exact_weight: 2
  - name: industry
    exact_weight: 5
    similar_weight: 2
    similar:
      Tech: [Finance]
      Finance: [Tech, Retail]
      Healthcare: [Education]
      Education: [Healthcare]
      Retail: [Finance]
  - name: company_size
    exact_weight: 7
    order: [Small, Medium, Large, Enterprise]
    gap_penalty: 10
    max_gap: 1
""")


def default_scoring_config() -> ScoringConfig:
    return ScoringConfig(**DEFAULT_SCORING)


def scoring_config_from_dict(obj: Dict[str, Any]) -> ScoringConfig:
    try:
        return ScoringConfig(**obj)
    except ValidationError as e:
        raise InvalidInput(f"Invalid scoring configuration: {e}") from e


def parse_scoring_yaml(text: str) -> ScoringConfig:
    try:
        obj = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidInput(f"Scoring configuration is not valid YAML: {e}") from e
    if not obj:
        raise InvalidInput("Scoring configuration is empty")
    if not isinstance(obj, dict):
        raise InvalidInput("Scoring configuration must be a mapping")
    return scoring_config_from_dict(obj)


def load_scoring_config(path: str) -> ScoringConfig:
    """
    Load a ScoringConfig from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidInput: If the YAML is empty, malformed or fails validation
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Scoring configuration not found: {path}")
    logger.info(f"Loading scoring configuration from {path}")
    with open(p, "r", encoding="utf-8") as f:
        return parse_scoring_yaml(f.read())


def validate_scoring_config(config: ScoringConfig) -> List[str]:
    """
    Return a list of warnings about rules that load but are probably wrong
    (empty if none).
    """
    issues = []
    for rule in config.rules:
        for value, similar in rule.similar.items():
            if value in similar:
                issues.append(f"{rule.name}: {value!r} lists itself as similar")
            if rule.order is not None:
                unknown = [s for s in [value] + list(similar) if s not in rule.order]
                if unknown:
                    issues.append(f"{rule.name}: similar values {unknown} missing from order")
        if rule.similar and not rule.similar_weight:
            issues.append(f"{rule.name}: similar table given but similar_weight is 0")
        if rule.gap_penalty and rule.order is None:
            issues.append(f"{rule.name}: gap_penalty set without an order")
    if config.min_score > config.max_score():
        issues.append(
            f"min_score {config.min_score} exceeds max attainable score {config.max_score()}"
        )
    return issues
