"""Team-level aggregates over a snapshot of agents."""

from typing import Dict, Sequence

from .classifier import category_of
from .models import Agent, Category


def average(agents: Sequence[Agent]) -> int:
    """Mean percentage rounded half-up to the nearest integer.

    Raises:
        ValueError: If ``agents`` is empty.
    """
    if not agents:
        raise ValueError("average() requires at least one agent")
    total = sum(agent.percentage for agent in agents)
    n = len(agents)
    # Integer form of floor(total / n + 0.5)
    return (2 * total + n) // (2 * n)


def count_by_category(agents: Sequence[Agent]) -> Dict[Category, int]:
    """Number of agents per category, zero-filled, best category first."""
    counts = {category: 0 for category in Category}
    for agent in agents:
        counts[category_of(agent.percentage)] += 1
    return counts
