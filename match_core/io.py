# match_core/io.py
from __future__ import annotations
import io
import logging
from typing import List, Sequence

import pandas as pd
from pydantic import ValidationError

from .constants import ATTRIBUTES
from .errors import InvalidInput
from .models import Attendee, MatchResult

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["id"] + ATTRIBUTES

PAIR_COLUMNS = ["attendee", "partner", "score", "mutual"] + \
    [f"attendee_{a}" for a in ATTRIBUTES] + [f"partner_{a}" for a in ATTRIBUTES]


def attendees_to_dataframe(attendees: Sequence[Attendee]) -> pd.DataFrame:
    return pd.DataFrame([a.model_dump() for a in attendees], columns=REQUIRED_COLUMNS)


def dataframe_to_attendees(df: pd.DataFrame) -> List[Attendee]:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInput(f"Missing required columns: {missing}")
    if df["id"].isna().any():
        raise InvalidInput("Every attendee needs an id.")

    df = df.copy()
    df["id"] = pd.to_numeric(df["id"], errors="coerce")
    if df["id"].isna().any() or (df["id"] % 1 != 0).any():
        raise InvalidInput("Attendee ids must be integers.")
    for c in ATTRIBUTES:
        df[c] = df[c].fillna("").astype(str).str.strip()

    try:
        return [
            Attendee(id=int(row["id"]), **{c: row[c] for c in ATTRIBUTES})
            for _, row in df.iterrows()
        ]
    except ValidationError as e:
        raise InvalidInput(f"Invalid attendee row: {e}") from e


def load_attendees_csv(file_like) -> List[Attendee]:
    df = pd.read_csv(file_like)
    attendees = dataframe_to_attendees(df)
    logger.info(f"Loaded {len(attendees)} attendees")
    return attendees


def pairs_to_dataframe(result: MatchResult, attendees: Sequence[Attendee]) -> pd.DataFrame:
    by_id = {a.id: a for a in attendees}
    rows = []
    for p in result.pairs:
        a, b = by_id[p.left_id], by_id[p.right_id]
        row = {"attendee": p.left_id, "partner": p.right_id, "score": p.score, "mutual": p.mutual}
        for attr in ATTRIBUTES:
            row[f"attendee_{attr}"] = a.attribute(attr)
            row[f"partner_{attr}"] = b.attribute(attr)
        rows.append(row)
    return pd.DataFrame(rows, columns=PAIR_COLUMNS)


def save_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def generate_template_csv_bytes() -> bytes:
    return save_csv_bytes(pd.DataFrame(columns=REQUIRED_COLUMNS))
