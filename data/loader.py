"""File upload parsing: roster and matching result CSV/XLSX into typed models."""

import logging
from typing import Dict, List

import pandas as pd

from models.occupant import Group, Occupant

logger = logging.getLogger(__name__)


def _cell(row, column: str) -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_roster(df: pd.DataFrame) -> List[Occupant]:
    """Convert a roster DataFrame into Occupant objects."""
    occupants = []
    for _, row in df.iterrows():
        score = 0.0
        if "Score" in df.columns and pd.notna(row.get("Score")):
            score = float(row["Score"])
        occupants.append(Occupant(
            occupant_id=_cell(row, "Student ID"),
            name=_cell(row, "Name"),
            group=Group.parse(row["Gender"]),
            score=score,
        ))
    return occupants


def roster_index(occupants: List[Occupant]) -> Dict[str, Occupant]:
    return {o.occupant_id: o for o in occupants}


def parse_matching(df: pd.DataFrame) -> List[dict]:
    """Convert a matching result DataFrame into rows shaped like the backend response."""
    rows = []
    for _, row in df.iterrows():
        score = row.get("Score")
        rows.append({
            "roomId": _cell(row, "Room ID"),
            "score": float(score) if pd.notna(score) else 0.0,
            "memberA": _cell(row, "Member A"),
            "memberB": _cell(row, "Member B"),
        })
    return rows


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    # Student ids keep their leading zeros
    if name.endswith(".csv"):
        df = pd.read_csv(uploaded_file, dtype=str)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        df = pd.read_excel(uploaded_file, engine="openpyxl", dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
    logger.info("Loaded %s: %d rows", uploaded_file.name, len(df))
    return _coerce_scores(df)


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path."""
    return _coerce_scores(pd.read_csv(path, dtype=str))


def _coerce_scores(df: pd.DataFrame) -> pd.DataFrame:
    df.columns = [str(c).strip() for c in df.columns]
    if "Score" in df.columns:
        df["Score"] = pd.to_numeric(df["Score"], errors="coerce")
    return df
