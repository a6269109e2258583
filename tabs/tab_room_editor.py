"""Tab 1: Room Editor: move students between slots and finish the session."""

import streamlit as st

from components.charts import room_score_bar
from components.metrics_cards import render_metric_row, render_move_feedback
from components.tables import occupant_label, render_room_table
from data.exporter import InMemoryAssignmentSink
from data.session_store import get_controller, is_data_loaded, restart_session, set_last_export
from engine.export import assignment_summary
from models.move import MoveRequest
from models.occupant import Group


def _slot_label(room, index):
    occupant = room.slots[index]
    return f"Slot {index + 1}: {occupant_label(occupant) if occupant else 'empty'}"


def _render_move_form(controller):
    rooms = {r.room_id: r for r in controller.rooms()}
    room_ids = list(rooms.keys())

    # Plain widgets, not a form: slot labels must follow the selected rooms
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**From**")
        source_id = st.selectbox("Source room", room_ids, key="move_source_room")
        source_slot = st.radio(
            "Source slot", [0, 1], horizontal=True, key="move_source_slot",
            format_func=lambda i: _slot_label(rooms[source_id], i),
        )
    with col2:
        st.markdown("**To**")
        dest_id = st.selectbox("Destination room", room_ids, key="move_dest_room")
        dest_slot = st.radio(
            "Destination slot", [0, 1], horizontal=True, key="move_dest_slot",
            format_func=lambda i: _slot_label(rooms[dest_id], i),
        )

    if st.button("Move", type="primary", key="btn_move"):
        result = controller.request_move(MoveRequest(source_id, source_slot, dest_id, dest_slot))
        st.session_state["last_move_result"] = result
        st.rerun()


def render():
    """Render the Room Editor tab."""
    st.header("Room Editor")

    if not is_data_loaded():
        st.info("No assignment loaded. Import a matching result or load sample data in the Import & Export tab.")
        return

    controller = get_controller()
    if controller is None or not controller.is_open:
        status = controller.status if controller else "closed"
        st.info(f"The editing session is {status}.")
        if st.button("Start again from the original assignment", key="btn_restart"):
            restart_session()
            st.rerun()
        return

    summary = assignment_summary(controller.partitions)
    render_metric_row(
        [{"label": f"{s['label']} rooms", "value": s["rooms"]} for s in summary]
        + [{"label": f"{s['label']} students", "value": s["occupants"]} for s in summary]
        + [{"label": "Accepted moves", "value": controller.accepted_moves}]
    )

    last = st.session_state.get("last_move_result")
    if last is not None:
        render_move_feedback(last)

    _render_move_form(controller)

    col_m, col_f = st.columns(2)
    with col_m:
        render_room_table(controller.partition(Group.MALE).room_list(), "Male Rooms")
    with col_f:
        render_room_table(controller.partition(Group.FEMALE).room_list(), "Female Rooms")

    st.plotly_chart(room_score_bar(controller.rooms()), use_container_width=True)

    st.divider()
    col_save, col_cancel = st.columns(2)
    with col_save:
        if st.button("Save assignment", type="primary", key="btn_finalize"):
            sink = InMemoryAssignmentSink()
            controller.sink = sink
            controller.finalize()
            set_last_export(sink.dataframe())
            st.session_state["last_move_result"] = None
            st.rerun()
    with col_cancel:
        if st.button("Cancel edits", key="btn_cancel"):
            controller.cancel()
            st.session_state["last_move_result"] = None
            st.rerun()
