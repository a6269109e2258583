"""Reusable KPI metric card widgets."""

import streamlit as st

from models.move import MoveResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], delta=m.get("delta"))


def render_move_feedback(result: MoveResult):
    """Tell the operator what happened to their last move."""
    if result.accepted:
        st.success("Move applied.", icon="✅")
    else:
        st.warning(f"{result.reason.value}: {result.message}", icon="🟡")
