# FILE: match_core/constants.py
from __future__ import annotations

# --- Attendee vocabularies ---
INTERESTS = ["AI", "Cloud", "Security", "IoT", "Microservices"]
ROLES = ["Dev", "PM", "Architect", "Tester", "Manager"]
COUNTRIES = ["US", "UK", "Germany", "France", "Canada"]
INDUSTRIES = ["Tech", "Finance", "Healthcare", "Education", "Retail"]

SIMILAR_ROLES = {
    "Dev": ["Architect", "Tester"],
    "PM": ["Manager"],
    "Architect": ["Dev"],
    "Tester": ["Dev"],
    "Manager": ["PM"],
}

SIMILAR_INDUSTRIES = {
    "Tech": ["Finance"],
    "Finance": ["Tech", "Retail"],
    "Healthcare": ["Education"],
    "Education": ["Healthcare"],
    "Retail": ["Finance"],
}

# Declaration order is the ordinal order (Small < Medium < Large < Enterprise)
COMPANY_SIZE_RANGES = {
    "Small": (1, 50),
    "Medium": (51, 500),
    "Large": (501, 5000),
    "Enterprise": (5001, 50000),
}
COMPANY_SIZES = list(COMPANY_SIZE_RANGES)

ATTRIBUTES = ["interest", "role", "country", "industry", "company_size"]

# --- Scoring weights ---
INTEREST_WEIGHT = 10
ROLE_WEIGHT = 8
SIMILAR_ROLE_WEIGHT = 5
COUNTRY_WEIGHT = 2
INDUSTRY_WEIGHT = 5
SIMILAR_INDUSTRY_WEIGHT = 2
COMPANY_SIZE_WEIGHT = 7
COMPANY_SIZE_GAP_PENALTY = 10

# --- Sentinels ---
MIN_ACCEPTABLE_SCORE = 5
HIGH_COST = 9999             # discourages a low-score pair
FORBIDDEN_COST = 10 ** 9     # forbids a pair outright (diagonal)

# N * FORBIDDEN_COST must stay well inside int64 / exact float64
MAX_ATTENDEES = 1000

DEFAULT_NUM_ATTENDEES = 150


def company_size_category(size: int) -> str:
    """Bucket a head count into its company size category."""
    for name, (lo, hi) in COMPANY_SIZE_RANGES.items():
        if lo <= size <= hi:
            return name
    raise ValueError(f"Company size out of range: {size}")
