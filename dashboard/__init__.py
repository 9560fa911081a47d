"""Dashboard package namespace.

This package contains the Streamlit UI for the performance dashboard. Each
component keeps its derivations in small pure helpers (``_build_*``) that
return plain dicts, and exposes a ``render_panel`` function that draws them
with Streamlit and returns a status dict for the sidebar.
"""
