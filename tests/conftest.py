"""Test configuration and shared fixtures."""

import pytest

from performance import Agent, AgentStore


@pytest.fixture
def store():
    """Store holding the fixed seed roster."""
    return AgentStore.from_seed()


@pytest.fixture
def sample_agents():
    """Small roster with one agent per category."""
    return [
        Agent(id="a", name="Alpha", percentage=95),
        Agent(id="b", name="Bravo", percentage=80),
        Agent(id="c", name="Charlie", percentage=65),
        Agent(id="d", name="Delta", percentage=40),
    ]
