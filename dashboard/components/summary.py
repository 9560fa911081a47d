"""
Team overview panel component.

Shows the team average and how many agents sit in each performance category.
"""

from typing import Sequence
import streamlit as st

from config.schemas import CategoryTile, PanelStatus, TeamSummary
from performance import Agent, average, count_by_category
from dashboard.components.layout import badge_html, count_tile_html


def _build_summary(agents: Sequence[Agent]) -> TeamSummary:
    """Derive the average and per-category tiles from a snapshot."""
    counts = count_by_category(agents)
    tiles = [
        CategoryTile(label=category.label, count=count, color=category.color)
        for category, count in counts.items()
    ]
    return TeamSummary(average=average(agents), total=len(agents), tiles=tiles)


def render_panel(agents: Sequence[Agent]) -> PanelStatus:
    """
    Render the team overview panel.

    Returns:
        Dict containing panel state for the sidebar.
    """
    summary = _build_summary(agents)

    with st.container(border=True):
        col_title, col_avg = st.columns([3, 1])
        with col_title:
            st.subheader("Team Overview")
        with col_avg:
            st.markdown(
                badge_html(f"Avg: {summary['average']}%", "secondary"),
                unsafe_allow_html=True,
            )

        for column, tile in zip(st.columns(len(summary["tiles"])), summary["tiles"]):
            with column:
                st.markdown(
                    count_tile_html(tile["count"], tile["label"], tile["color"]),
                    unsafe_allow_html=True,
                )

    return {
        "status": "success",
        "average": summary["average"],
        "agent_count": summary["total"],
    }
