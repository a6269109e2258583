"""Dorm Room Planner: Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.logging_config import configure_logging
from data.session_store import initialize_session_state
from tabs import tab_import_export, tab_room_editor


def main():
    st.set_page_config(
        page_title="Dorm Room Planner",
        page_icon="🛏️",
        layout="wide",
    )

    configure_logging()
    initialize_session_state()

    tab1, tab2 = st.tabs([
        "🛏️ Room Editor",
        "📁 Import & Export",
    ])

    with tab1:
        tab_room_editor.render()
    with tab2:
        tab_import_export.render()


if __name__ == "__main__":
    main()
