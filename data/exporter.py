"""Persistence collaborators that receive the finalized assignment."""

import logging
import os
from typing import List, Optional

import pandas as pd

from engine.export import export_dataframe

logger = logging.getLogger(__name__)


class InMemoryAssignmentSink:
    """Keeps the last saved rows; used by the UI download button and tests."""

    def __init__(self):
        self.rows: Optional[List[dict]] = None
        self.saves = 0

    def save(self, rows: List[dict]):
        self.rows = rows
        self.saves += 1

    def dataframe(self) -> pd.DataFrame:
        return export_dataframe(self.rows or [])


class CsvAssignmentSink:
    def __init__(self, path: str):
        self.path = path

    def save(self, rows: List[dict]):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        export_dataframe(rows).to_csv(self.path, index=False)
        logger.info("Wrote %d rooms to %s", len(rows), self.path)


class ExcelAssignmentSink:
    def __init__(self, path: str, sheet_name: str = "Assignments"):
        self.path = path
        self.sheet_name = sheet_name

    def save(self, rows: List[dict]):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with pd.ExcelWriter(self.path, engine="openpyxl") as writer:
            export_dataframe(rows).to_excel(writer, sheet_name=self.sheet_name, index=False)
        logger.info("Wrote %d rooms to %s", len(rows), self.path)


def sink_for(path: str):
    """Pick a file sink from the path's extension."""
    if path.lower().endswith(".csv"):
        return CsvAssignmentSink(path)
    if path.lower().endswith(".xlsx"):
        return ExcelAssignmentSink(path)
    raise ValueError(f"Unsupported export format: {path}. Use CSV or XLSX.")
