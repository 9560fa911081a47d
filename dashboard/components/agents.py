"""
Agent performance panel component.

One row per agent in store order: name, category badge, an editable score
field and a progress bar. Edits go straight to ``AgentStore.update``; the
field is then rewritten with the stored (coerced and clamped) value.
"""

from typing import List, Sequence
import streamlit as st

from config.config import SCORE_MAX, SCORE_MIN
from config.schemas import AgentRow, PanelStatus
from performance import Agent, AgentStore, classify
from dashboard.components.layout import badge_html


def _widget_key(agent_id: str) -> str:
    return f"score_input_{agent_id}"


def _build_rows(agents: Sequence[Agent]) -> List[AgentRow]:
    """Attach category label, variant and colour to each agent, keeping order."""
    rows = []
    for agent in agents:
        info = classify(agent.percentage)
        rows.append(AgentRow(
            agent_id=agent.id,
            name=agent.name,
            percentage=agent.percentage,
            label=info.label,
            variant=info.variant,
            color=info.color,
        ))
    return rows


def _apply_edit(store: AgentStore, agent_id: str, raw: object) -> str:
    """Push raw field text into the store and return the text to show back."""
    store.update(agent_id, raw)
    agent = store.get(agent_id)
    return "" if agent is None else str(agent.percentage)


def _on_score_change(store: AgentStore, agent_id: str) -> None:
    key = _widget_key(agent_id)
    st.session_state[key] = _apply_edit(store, agent_id, st.session_state.get(key))


def render_panel(store: AgentStore) -> PanelStatus:
    """
    Render the per-agent rows.

    Returns:
        Dict containing panel state for the sidebar.
    """
    rows = _build_rows(store.snapshot())

    with st.container(border=True):
        st.subheader("Agent Performance")

        for row in rows:
            key = _widget_key(row["agent_id"])
            if key not in st.session_state:
                st.session_state[key] = str(row["percentage"])

            col_name, col_input, col_unit = st.columns([6, 1, 1])
            with col_name:
                st.markdown(
                    f"**{row['name']}** &nbsp; {badge_html(row['label'], row['variant'])}",
                    unsafe_allow_html=True,
                )
            with col_input:
                st.text_input(
                    f"Score for {row['name']}",
                    key=key,
                    on_change=_on_score_change,
                    args=(store, row["agent_id"]),
                    help=f"Whole number from {SCORE_MIN} to {SCORE_MAX}",
                    label_visibility="collapsed",
                )
            with col_unit:
                st.write("%")

            col_bar, col_pct = st.columns([7, 1])
            with col_bar:
                st.progress(row["percentage"])
            with col_pct:
                st.write(f"**{row['percentage']}%**")

    return {"status": "success", "rows": len(rows)}
