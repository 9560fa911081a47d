"""Agent performance tracking: records, categories, aggregates and the store."""

from .models import Agent, Category, CategoryInfo
from .classifier import category_of, classify
from .aggregator import average, count_by_category
from .store import AgentStore, clamp_score, parse_score

__all__ = [
    "Agent",
    "Category",
    "CategoryInfo",
    "category_of",
    "classify",
    "average",
    "count_by_category",
    "AgentStore",
    "clamp_score",
    "parse_score",
]
