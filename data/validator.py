"""Schema validation for uploaded roster and matching files."""

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from config.defaults import GENDER_ALIASES, MATCHING_REQUIRED_COLUMNS, ROSTER_REQUIRED_COLUMNS


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def _member_ids(df: pd.DataFrame) -> pd.Series:
    members = pd.concat([df["Member A"], df["Member B"]]).dropna().astype(str).str.strip()
    return members[members != ""]


def validate_roster(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ROSTER_REQUIRED_COLUMNS, "Roster")
    if not result.is_valid:
        return result

    ids = df["Student ID"].astype(str).str.strip()
    dupes = ids[ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Roster: Duplicate student ids: {sorted(dupes.unique().tolist())}")

    genders = df["Gender"].astype(str).str.strip().str.lower()
    unknown = sorted(set(df["Gender"][~genders.isin(list(GENDER_ALIASES))].astype(str)))
    if unknown:
        result.is_valid = False
        result.errors.append(f"Roster: Unknown gender values: {unknown}")

    if "Score" in df.columns and df["Score"].isna().any():
        result.warnings.append("Roster: Some students have no score; 0 will be used.")

    return result


def validate_matching(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, MATCHING_REQUIRED_COLUMNS, "Matching Result")
    if not result.is_valid:
        return result

    room_ids = df["Room ID"].astype(str).str.strip()
    dupes = room_ids[room_ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Matching Result: Duplicate room ids: {sorted(dupes.unique().tolist())}")

    members = _member_ids(df)
    placed_twice = members[members.duplicated(keep=False)]
    if not placed_twice.empty:
        result.is_valid = False
        result.errors.append(
            f"Matching Result: Students placed in more than one slot: {sorted(placed_twice.unique().tolist())}"
        )

    return result


def validate_cross_file(roster_df: pd.DataFrame, matching_df: pd.DataFrame) -> ValidationResult:
    """Check that matched students exist in the roster and note unplaced ones."""
    result = ValidationResult()
    roster_ids = set(roster_df["Student ID"].astype(str).str.strip())
    matched_ids = set(_member_ids(matching_df))

    unknown = matched_ids - roster_ids
    unplaced = roster_ids - matched_ids

    if unknown:
        result.is_valid = False
        result.errors.append(f"Matching Result: Students not in the roster: {', '.join(sorted(unknown))}")
    if unplaced:
        result.warnings.append(
            f"Students without a room: {', '.join(sorted(unplaced))}. "
            "They will not appear in the editor."
        )
    return result
