"""
MMM Data Explorer - Main Entry Point
Daily spend, revenue and channel mix from the Conjura MMM dataset
"""
import logging
import sys
from pathlib import Path

import streamlit as st

# Add repo root to path for imports
root = Path(__file__).parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from mmm_explorer.data_loader import load_mmm_data
from mmm_explorer.schema import DEFAULT_DATA_SOURCE, LOG_LEVEL
from mmm_explorer.session import DashboardSession
from mmm_explorer.ui.components import (
    render_charts,
    render_filters,
    render_header,
    render_scorecards,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="MMM Data Explorer",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2rem;
        font-weight: 700;
        margin-bottom: 0.25rem;
    }
    .sub-header {
        font-size: 1rem;
        color: #9CA3AF;
        margin-bottom: 1.5rem;
    }
    .kpi {
        background: #25262b;
        border-radius: 12px;
        padding: 1.25rem;
        border: 1px solid #373a40;
        margin-bottom: 1rem;
    }
    .kpi-label {
        font-size: 0.8rem;
        text-transform: uppercase;
        letter-spacing: 0.08em;
        color: #9CA3AF;
    }
    .kpi-value {
        font-size: 1.8rem;
        font-weight: 700;
        color: #F9FAFB;
    }
</style>
""", unsafe_allow_html=True)


def get_session() -> DashboardSession:
    """One dashboard session per browser session."""
    if "mmm_session" not in st.session_state:
        st.session_state["mmm_session"] = DashboardSession()
    return st.session_state["mmm_session"]


def main():
    session = get_session()

    with st.spinner("Loading Conjura MMM Data..."):
        session.load(lambda: load_mmm_data(str(DEFAULT_DATA_SOURCE)))

    if not session.is_ready:
        st.error(session.error or "Data is not loaded.")
        return

    view = session.view()
    if not view.vertical_options:
        st.warning("The MMM dataset contains no rows.")
        return

    vertical, territory = render_filters(
        view.vertical_options,
        view.territory_options,
        session.selected_vertical,
        session.selected_territory,
    )
    if (vertical, territory) != (session.selected_vertical, session.selected_territory):
        session.select(vertical=vertical, territory=territory)
        view = session.view()

    render_header(view)
    render_scorecards(view.metrics)
    st.markdown("---")
    render_charts(view)


if __name__ == "__main__":
    main()
