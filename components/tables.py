"""Room and move-log table helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.audit import MoveLogEntry
from models.room import Room


def occupant_label(occupant) -> str:
    """'name (id) [score]', or blank for an empty slot."""
    if occupant is None:
        return ""
    return f"{occupant.name} ({occupant.occupant_id}) [{occupant.score:g}]"


def rooms_dataframe(rooms: List[Room]) -> pd.DataFrame:
    """One row per room with both slots labelled by occupant_label."""
    return pd.DataFrame([{
        "Room": r.room_id,
        "Slot 1": occupant_label(r.slots[0]),
        "Slot 2": occupant_label(r.slots[1]),
        "Score": r.score,
        "Full": r.is_full(),
    } for r in rooms])


def move_log_dataframe(entries: List[MoveLogEntry]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Time": e.timestamp.strftime("%H:%M:%S"),
        "Group": e.group.value if e.group else "",
        "From": f"{e.request.source_room_id} #{e.request.source_slot_index + 1}",
        "To": f"{e.request.dest_room_id} #{e.request.dest_slot_index + 1}",
        "Result": "Accepted" if e.accepted else (e.reason.value if e.reason else "Rejected"),
        "Detail": e.message,
    } for e in entries], columns=["Time", "Group", "From", "To", "Result", "Detail"])


def render_room_table(rooms: List[Room], title: Optional[str] = None):
    """Render rooms with empty slots highlighted."""
    if title:
        st.subheader(title)
    df = rooms_dataframe(rooms)
    if df.empty:
        st.info("No rooms.")
        return

    def highlight_empty(val):
        return "background-color: #f0f0f0; color: #999999" if val == "" else ""

    styled = df.style.map(highlight_empty, subset=["Slot 1", "Slot 2"])
    st.dataframe(styled, use_container_width=True, hide_index=True)


def render_move_log(entries: List[MoveLogEntry]):
    """Render the move log with rejected moves in red."""
    df = move_log_dataframe(entries)

    def color_result(val):
        if val == "Accepted":
            return "color: #155724; font-weight: bold"
        return "color: #cc0000; font-weight: bold"

    styled = df.style.map(color_result, subset=["Result"])
    st.dataframe(styled, use_container_width=True, hide_index=True)
