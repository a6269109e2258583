"""Generate a synthetic roster and matching result for demos and tests."""

import os
import random

import pandas as pd

from config.defaults import DEFAULT_ROOMS_PER_GROUP, ROOM_CAPACITY, ROOM_ID_PREFIX


def generate_roster_df(rooms_per_group: int = DEFAULT_ROOMS_PER_GROUP) -> pd.DataFrame:
    """Two students per room for each gender, ids 2024NNNN."""
    random.seed(42)
    rows = []
    counter = 1
    for gender, label in [("M", "Male"), ("F", "Female")]:
        for i in range(1, rooms_per_group * ROOM_CAPACITY + 1):
            rows.append({
                "Student ID": f"2024{counter:04d}",
                "Name": f"{label} Student {i}",
                "Gender": gender,
                "Score": random.randint(0, 99),
            })
            counter += 1
    return pd.DataFrame(rows)


def generate_matching_df(roster_df: pd.DataFrame) -> pd.DataFrame:
    """Pair students in roster order; room score is the floored mean of the pair."""
    rows = []
    for gender in ["M", "F"]:
        students = roster_df[roster_df["Gender"] == gender].to_dict("records")
        for n, i in enumerate(range(0, len(students), ROOM_CAPACITY), start=1):
            pair = students[i:i + ROOM_CAPACITY]
            rows.append({
                "Room ID": f"{ROOM_ID_PREFIX[gender]}{n}",
                "Score": sum(s["Score"] for s in pair) // len(pair),
                "Member A": pair[0]["Student ID"],
                "Member B": pair[1]["Student ID"] if len(pair) > 1 else "",
            })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    roster = generate_roster_df()
    roster.to_csv(os.path.join(output_dir, "roster.csv"), index=False)
    generate_matching_df(roster).to_csv(os.path.join(output_dir, "matching.csv"), index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    print("Sample CSV files generated in sample_files/")
