"""Tests for the pure helpers behind the dashboard panels."""

from dashboard.components.agents import _apply_edit, _build_rows, _widget_key
from dashboard.components.layout import badge_html, count_tile_html
from dashboard.components.legend import _legend_entries
from dashboard.components.summary import _build_summary
from dashboard.state import create_store


def test_build_rows_keeps_store_order(store):
    rows = _build_rows(store.snapshot())

    assert [row["agent_id"] for row in rows] == [str(i) for i in range(1, 9)]
    first = rows[0]
    assert first["name"] == "Sarah Johnson"
    assert first["percentage"] == 85
    assert first["label"] == "Good"
    assert first["variant"] == "secondary"
    assert first["color"] == "blue"
    assert rows[2]["label"] == "Excellent"


def test_build_summary_seed(store):
    summary = _build_summary(store.snapshot())

    assert summary["average"] == 80
    assert summary["total"] == 8
    assert [(t["label"], t["count"]) for t in summary["tiles"]] == [
        ("Excellent", 2),
        ("Good", 3),
        ("Average", 3),
        ("Needs Improvement", 0),
    ]


def test_summary_follows_edits(store):
    store.update("1", "10")
    summary = _build_summary(store.snapshot())

    counts = {t["label"]: t["count"] for t in summary["tiles"]}
    assert counts["Needs Improvement"] == 1
    assert counts["Good"] == 2
    assert sum(counts.values()) == 8
    # (637 - 85 + 10) / 8 = 70.25
    assert summary["average"] == 70


def test_apply_edit_returns_stored_value(store):
    assert _apply_edit(store, "5", "250") == "100"
    assert _apply_edit(store, "5", "oops") == "0"
    assert _apply_edit(store, "5", "07") == "7"
    assert store.get("5").percentage == 7


def test_apply_edit_unknown_agent(store):
    assert _apply_edit(store, "nope", "50") == ""
    assert store.revision == 0


def test_widget_keys_are_unique(store):
    keys = {_widget_key(agent.id) for agent in store.snapshot()}
    assert len(keys) == len(store)


def test_legend_is_static():
    entries = _legend_entries()
    assert [(e["range_text"], e["label"]) for e in entries] == [
        ("90-100%", "Excellent"),
        ("75-89%", "Good"),
        ("60-74%", "Average"),
        ("0-59%", "Needs Improvement"),
    ]
    assert [e["color"] for e in entries] == ["green", "blue", "yellow", "red"]


def test_badge_html_escapes_and_defaults_variant():
    assert badge_html("Good", "secondary") == (
        '<span class="perf-badge perf-badge-secondary">Good</span>'
    )
    assert "perf-badge-default" in badge_html("x", "sparkly")
    assert "&lt;b&gt;" in badge_html("<b>")


def test_count_tile_uses_category_color():
    html = count_tile_html(3, "Good", "blue")
    assert "#2563eb" in html
    assert ">3<" in html


def test_create_store_logs_average_on_update(caplog):
    store = create_store()
    with caplog.at_level("INFO", logger="dashboard"):
        store.update("8", "100")
    assert "Team average now 84%" in caplog.text
