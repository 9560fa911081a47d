"""Performance scale legend. Static; does not depend on agent data."""

from typing import List
import streamlit as st

from config.schemas import LegendEntry, PanelStatus
from performance import Category
from dashboard.components.layout import swatch_html


def _legend_entries() -> List[LegendEntry]:
    return [
        LegendEntry(
            range_text=category.range_text,
            label=category.label,
            color=category.color,
        )
        for category in Category
    ]


def render_panel() -> PanelStatus:
    entries = _legend_entries()

    with st.container(border=True):
        st.subheader("Performance Scale")
        for column, entry in zip(st.columns(len(entries)), entries):
            with column:
                st.markdown(
                    f"{swatch_html(entry['color'])}{entry['range_text']} {entry['label']}",
                    unsafe_allow_html=True,
                )

    return {"status": "success", "entries": len(entries)}
