"""Schema definitions for structured data handed to the dashboard layer."""

from typing import TypedDict, Dict, List


class AgentRow(TypedDict):
    agent_id: str
    name: str
    percentage: int
    label: str
    variant: str  # "default" | "secondary" | "outline" | "destructive"
    color: str


class CategoryTile(TypedDict):
    label: str
    count: int
    color: str


class TeamSummary(TypedDict):
    average: int
    total: int
    tiles: List[CategoryTile]


class LegendEntry(TypedDict):
    range_text: str  # e.g. "75-89%"
    label: str
    color: str


PanelStatus = Dict[str, object]
