"""Plotly chart builders for the room editor."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from models.room import Room


def room_score_bar(rooms: List[Room], title: str = "Room Scores") -> go.Figure:
    """Bar chart of fixed room scores, colored by group."""
    df = pd.DataFrame([{
        "room_id": r.room_id,
        "score": r.score,
        "group": r.group.label,
        "occupancy": len(r.occupants()),
    } for r in rooms])
    if df.empty:
        return go.Figure()

    fig = px.bar(
        df, x="room_id", y="score", color="group",
        hover_data=["occupancy"],
        labels={"room_id": "Room", "score": "Score", "group": ""},
        title=title,
        color_discrete_map={"Male": "#4A90D9", "Female": "#E8734A"},
    )
    fig.update_layout(height=350, yaxis_range=[0, 100])
    return fig


def occupancy_donut(placed: int, capacity: int, title: str = "Bed Occupancy") -> go.Figure:
    """Donut chart of filled vs empty beds."""
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Empty"],
        values=[placed, capacity - placed],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{placed}/{capacity}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
