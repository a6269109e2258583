"""Tab 2: Import & Export: load the matching result, download the final assignment, review moves."""

import io

import pandas as pd
import streamlit as st

from components.charts import occupancy_donut
from components.tables import render_move_log
from config.defaults import DEFAULT_EXPORT_FORMAT, EXPORT_FORMATS, ROOM_CAPACITY
from data.loader import load_file, parse_matching, parse_roster, roster_index
from data.sample_data import generate_matching_df, generate_roster_df
from data.session_store import (
    get_controller, get_editor_config, get_last_export, set_editor_config, set_roster, start_session,
)
from data.validator import validate_cross_file, validate_matching, validate_roster
from engine.seeding import partitions_from_matching


def _load_and_validate(roster_df, matching_df):
    """Validate and seed a new editing session."""
    errors = []
    warnings = []

    for r in [validate_roster(roster_df), validate_matching(matching_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if not errors:
        cross = validate_cross_file(roster_df, matching_df)
        errors.extend(cross.errors)
        warnings.extend(cross.warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    for w in warnings:
        st.warning(w)

    roster = parse_roster(roster_df)
    try:
        partitions = partitions_from_matching(parse_matching(matching_df), roster_index(roster))
    except ValueError as e:
        st.error(f"Could not build rooms: {e}")
        return False

    set_roster(roster)
    start_session(partitions)
    st.session_state["last_move_result"] = None

    room_count = sum(len(p.rooms) for p in partitions.values())
    st.success(f"Loaded {len(roster)} students into {room_count} rooms.")
    return True


def render():
    """Render the Import & Export tab."""
    st.header("Import & Export")

    st.subheader("Matching Result")
    st.caption(
        "Roster columns: **Student ID, Name, Gender** (optional **Score**). "
        "Matching columns: **Room ID, Score, Member A, Member B**."
    )
    col1, col2 = st.columns(2)
    with col1:
        roster_file = st.file_uploader("Student roster", type=["csv", "xlsx"], key="upload_roster")
    with col2:
        matching_file = st.file_uploader("Matching result", type=["csv", "xlsx"], key="upload_matching")

    config = get_editor_config()
    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload"):
            if roster_file and matching_file:
                try:
                    _load_and_validate(load_file(roster_file), load_file(matching_file))
                except ValueError as e:
                    st.error(f"Error loading files: {e}")
            else:
                st.warning("Please upload both files.")
    with col_sample:
        rooms_per_group = st.number_input(
            "Sample rooms per group", min_value=1, max_value=50,
            value=config.get("rooms_per_group", 5), key="sample_rooms",
        )
        if st.button("Load Sample Data", key="btn_sample"):
            set_editor_config({**config, "rooms_per_group": int(rooms_per_group)})
            roster_df = generate_roster_df(int(rooms_per_group))
            _load_and_validate(roster_df, generate_matching_df(roster_df))

    controller = get_controller()
    if controller is None:
        return

    st.divider()
    st.subheader("Occupancy")
    rooms = controller.rooms() if controller.is_open else []
    if rooms:
        placed = sum(len(r.occupants()) for r in rooms)
        st.plotly_chart(occupancy_donut(placed, len(rooms) * ROOM_CAPACITY), use_container_width=True)

    st.subheader("Saved Assignment")
    export_df = get_last_export()
    if export_df is None:
        st.info("Nothing saved yet. Use **Save assignment** in the Room Editor.")
    else:
        st.dataframe(export_df, use_container_width=True, hide_index=True)
        fmt = st.radio(
            "Format", EXPORT_FORMATS, horizontal=True, key="export_format",
            index=EXPORT_FORMATS.index(config.get("export_format", DEFAULT_EXPORT_FORMAT)),
        )
        if fmt != config.get("export_format"):
            set_editor_config({**config, "export_format": fmt})
        if fmt == "xlsx":
            buffer = io.BytesIO()
            with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
                export_df.to_excel(writer, sheet_name="Assignments", index=False)
            data, mime = buffer.getvalue(), "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        else:
            data, mime = export_df.to_csv(index=False).encode("utf-8"), "text/csv"
        st.download_button(
            f"Download {fmt.upper()}",
            data,
            file_name=f"room_assignment.{fmt}",
            mime=mime,
            key="btn_download",
        )

    st.subheader("Move Log")
    if controller.move_log:
        render_move_log(controller.move_log)
    else:
        st.caption("No moves yet.")
