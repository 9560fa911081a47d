"""Session-owned agent store.

Streamlit reruns the script on every interaction, so the store lives in
``st.session_state``: one store per browser session, discarded on reload.
"""

import streamlit as st

from performance import AgentStore, average
from utils.logging import dashboard_logger

STORE_KEY = "agent_store"


def _log_team_average(snapshot) -> None:
    dashboard_logger.info("Team average now %d%%", average(snapshot))


def create_store() -> AgentStore:
    """Seeded store with the dashboard's snapshot listener attached."""
    store = AgentStore.from_seed()
    store.subscribe(_log_team_average)
    return store


def get_store() -> AgentStore:
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = create_store()
        dashboard_logger.info("Created agent store with %d agents", len(st.session_state[STORE_KEY]))
    return st.session_state[STORE_KEY]
