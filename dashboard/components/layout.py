"""
Shared layout helpers for dashboard components.

Provides common UI utilities for colors, badges, and layout consistency.
"""

from html import escape
import streamlit as st


# Swatch/bar colours (500 shade) and text colours (600 shade)
SWATCH_HEX = {
    "green": "#22c55e",
    "blue": "#3b82f6",
    "yellow": "#eab308",
    "red": "#ef4444",
}
TEXT_HEX = {
    "green": "#16a34a",
    "blue": "#2563eb",
    "yellow": "#ca8a04",
    "red": "#dc2626",
}

BADGE_VARIANTS = ("default", "secondary", "outline", "destructive")


def badge_html(label: str, variant: str = "default") -> str:
    """
    Build the markup for a labelled badge.

    Args:
        label: Badge text (escaped)
        variant: One of BADGE_VARIANTS; unknown values fall back to "default"

    Returns:
        HTML span styled by the classes from apply_custom_css()
    """
    if variant not in BADGE_VARIANTS:
        variant = "default"
    return f'<span class="perf-badge perf-badge-{variant}">{escape(label)}</span>'


def swatch_html(color: str) -> str:
    """Small coloured square used by the legend."""
    hex_color = SWATCH_HEX.get(color, "#9ca3af")
    return f'<span class="perf-swatch" style="background-color: {hex_color};"></span>'


def count_tile_html(count: int, label: str, color: str) -> str:
    """Big coloured number with a caption underneath."""
    hex_color = TEXT_HEX.get(color, "#111827")
    return (
        f'<div class="perf-tile">'
        f'<p class="perf-tile-count" style="color: {hex_color};">{count}</p>'
        f'<p class="perf-tile-label">{escape(label)}</p>'
        f'</div>'
    )


def apply_custom_css() -> None:
    """Apply custom CSS styling for badges, tiles and swatches."""
    st.markdown("""
    <style>
    .perf-badge {
        display: inline-block;
        padding: 0.1rem 0.6rem;
        border-radius: 9999px;
        font-size: 0.8rem;
        font-weight: 600;
        border: 1px solid transparent;
    }

    .perf-badge-default {
        background-color: #111827;
        color: #f9fafb;
    }

    .perf-badge-secondary {
        background-color: #f3f4f6;
        color: #111827;
    }

    .perf-badge-outline {
        background-color: transparent;
        border-color: #d1d5db;
        color: #111827;
    }

    .perf-badge-destructive {
        background-color: #ef4444;
        color: #f9fafb;
    }

    .perf-tile {
        text-align: center;
    }

    .perf-tile-count {
        font-size: 1.5rem;
        font-weight: 700;
        margin: 0;
    }

    .perf-tile-label {
        font-size: 0.875rem;
        color: #4b5563;
        margin: 0;
    }

    .perf-swatch {
        display: inline-block;
        width: 1rem;
        height: 1rem;
        border-radius: 0.25rem;
        vertical-align: middle;
        margin-right: 0.5rem;
    }
    </style>
    """, unsafe_allow_html=True)
