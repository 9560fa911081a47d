"""
Performance Dashboard - Streamlit Application

Shows the agent roster with editable scores, the team overview and the
performance scale legend.
"""

import streamlit as st
import sys
from pathlib import Path

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Add repository root to path so `dashboard.*` imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import LOG_LEVEL, PAGE_ICON, PAGE_SUBTITLE, PAGE_TITLE
from utils.logging import setup_logging, dashboard_logger
from dashboard.components import agents, legend, summary
from dashboard.components.layout import apply_custom_css
from dashboard.state import get_store


def main():
    """Main dashboard application."""
    setup_logging(LOG_LEVEL)

    # Page configuration
    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon=PAGE_ICON,
        layout="wide",
        initial_sidebar_state="collapsed"
    )
    apply_custom_css()

    st.title(PAGE_TITLE)
    st.markdown(PAGE_SUBTITLE)

    store = get_store()

    st.sidebar.title("Session")
    st.sidebar.caption("Edits are kept for this browser session only.")
    st.sidebar.metric("Edits applied", store.revision)

    render_summary_panel(store)
    render_agents_panel(store)
    render_legend_panel()


def render_summary_panel(store):
    """Render the team overview panel."""
    try:
        panel_result = summary.render_panel(store.snapshot())
        st.sidebar.metric("Team average", f"{panel_result['average']}%")
    except Exception as e:
        dashboard_logger.exception("Team overview panel failed")
        st.error(f"❌ Error rendering Team Overview panel: {e}")
        st.sidebar.error("❌ Panel Error")


def render_agents_panel(store):
    """Render the per-agent rows."""
    try:
        panel_result = agents.render_panel(store)
        st.sidebar.caption(f"{panel_result.get('rows', 0)} agents tracked")
    except Exception as e:
        dashboard_logger.exception("Agent performance panel failed")
        st.error(f"❌ Error rendering Agent Performance panel: {e}")
        st.sidebar.error("❌ Panel Error")


def render_legend_panel():
    """Render the performance scale legend."""
    try:
        legend.render_panel()
    except Exception as e:
        dashboard_logger.exception("Legend panel failed")
        st.error(f"❌ Error rendering Performance Scale panel: {e}")


if __name__ == "__main__":
    main()
