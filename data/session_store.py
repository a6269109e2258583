"""Typed wrapper around st.session_state for the editing session."""

import streamlit as st
from typing import Dict, List, Optional

from config.defaults import DEFAULT_EXPORT_FORMAT, DEFAULT_ROOMS_PER_GROUP
from engine.session_controller import SessionController
from models.occupant import Group, Occupant
from models.partition import Partition


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "roster": [],
        "seed_partitions": None,
        "controller": None,
        "last_export": None,
        "data_loaded": False,
        "editor_config": {
            "rooms_per_group": DEFAULT_ROOMS_PER_GROUP,
            "export_format": DEFAULT_EXPORT_FORMAT,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_roster() -> List[Occupant]:
    return st.session_state.get("roster", [])


def get_controller() -> Optional[SessionController]:
    return st.session_state.get("controller")


def get_editor_config() -> dict:
    return st.session_state.get("editor_config", {})


def get_last_export():
    return st.session_state.get("last_export")


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_roster(roster: List[Occupant]):
    st.session_state["roster"] = roster


def set_editor_config(config: dict):
    st.session_state["editor_config"] = config


def set_last_export(df):
    st.session_state["last_export"] = df


# --- Session lifecycle ---

def start_session(partitions: Dict[Group, Partition], sink=None) -> SessionController:
    """Remember the seed and open a fresh controller on it."""
    st.session_state["seed_partitions"] = partitions
    controller = SessionController(partitions, sink=sink)
    st.session_state["controller"] = controller
    st.session_state["data_loaded"] = True
    return controller


def restart_session(sink=None) -> Optional[SessionController]:
    """Re-seed from the original assignment after a cancel or finalize."""
    seed = st.session_state.get("seed_partitions")
    if seed is None:
        return None
    controller = SessionController(seed, sink=sink)
    st.session_state["controller"] = controller
    return controller
