"""Tests for team average and category counts."""

import pytest

from performance import Agent, Category, average, count_by_category


def _agents(*percentages):
    return [Agent(id=str(i), name=f"Agent {i}", percentage=p) for i, p in enumerate(percentages)]


def test_average_of_seed_roster(store):
    # 637 / 8 = 79.625
    assert average(store.snapshot()) == 80


def test_average_rounds_half_up():
    assert average(_agents(70, 71)) == 71      # 70.5
    assert average(_agents(0, 1)) == 1         # 0.5
    assert average(_agents(70, 70, 71)) == 70  # 70.33


def test_average_single_agent():
    assert average(_agents(42)) == 42


def test_average_empty_raises():
    with pytest.raises(ValueError):
        average([])


def test_count_by_category(sample_agents):
    counts = count_by_category(sample_agents)
    assert counts == {
        Category.EXCELLENT: 1,
        Category.GOOD: 1,
        Category.AVERAGE: 1,
        Category.NEEDS_IMPROVEMENT: 1,
    }


def test_count_by_category_seed(store):
    counts = count_by_category(store.snapshot())
    assert counts[Category.EXCELLENT] == 2
    assert counts[Category.GOOD] == 3
    assert counts[Category.AVERAGE] == 3
    assert counts[Category.NEEDS_IMPROVEMENT] == 0
    assert sum(counts.values()) == len(store)


def test_count_by_category_zero_fills_and_sums():
    agents = _agents(90, 90, 89, 60, 59, 0, 100)
    counts = count_by_category(agents)
    assert list(counts) == list(Category)
    assert sum(counts.values()) == len(agents)
    assert counts[Category.EXCELLENT] == 3
    assert counts[Category.NEEDS_IMPROVEMENT] == 2
