"""In-memory store of agent records.

:class:`AgentStore` owns the ordered roster and is the only place a
percentage changes. Every applied update produces a new immutable snapshot
which is handed to subscribed listeners, so a view can re-render from it.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from config.config import SCORE_MAX, SCORE_MIN, SEED_AGENTS
from utils.logging import get_logger

from .models import Agent

logger = get_logger(__name__)

Snapshot = Tuple[Agent, ...]
Listener = Callable[[Snapshot], None]

_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# More significant digits than this is already outside [SCORE_MIN, SCORE_MAX]
_MAX_SCORE_DIGITS = len(str(SCORE_MAX))


def parse_score(raw: object) -> int:
    """Parse user input into an integer, falling back to 0.

    Strings are read up to the first non-digit after an optional sign, so
    ``"12abc"`` gives 12 and ``"3.9"`` gives 3. Only ASCII digits count.
    ``None``, blanks and anything without leading digits give 0. Numbers too
    long to be a score saturate to ``SCORE_MAX`` (or ``SCORE_MIN`` when
    negative). Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return 0
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_SCORE_DIGITS:
        return SCORE_MIN if sign == "-" else SCORE_MAX
    return int(sign + digits)


def clamp_score(value: int) -> int:
    """Clamp a score into [SCORE_MIN, SCORE_MAX]."""
    return max(SCORE_MIN, min(SCORE_MAX, value))


class AgentStore:
    """Ordered, exclusively-owned collection of :class:`Agent` records."""

    def __init__(self, agents: Iterable[Agent]) -> None:
        self._agents: Snapshot = tuple(agents)
        self._index: Dict[str, int] = {}
        for position, agent in enumerate(self._agents):
            if agent.id in self._index:
                raise ValueError(f"Duplicate agent id: {agent.id!r}")
            self._index[agent.id] = position
        self._listeners: List[Listener] = []
        self.revision = 0

    @classmethod
    def from_seed(cls) -> "AgentStore":
        """Build a store holding the fixed seed roster."""
        return cls(
            Agent(id=agent_id, name=name, percentage=clamp_score(percentage))
            for agent_id, name, percentage in SEED_AGENTS
        )

    # ------------------------------------------------------------------
    def snapshot(self) -> Snapshot:
        return self._agents

    def get(self, agent_id: str) -> Optional[Agent]:
        position = self._index.get(agent_id)
        return None if position is None else self._agents[position]

    def __len__(self) -> int:
        return len(self._agents)

    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new snapshots.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, agent_id: str, raw_input: object) -> Snapshot:
        """Set an agent's percentage from raw user input.

        The input is parsed with :func:`parse_score` and clamped with
        :func:`clamp_score`. Unknown ids leave the store untouched.

        Returns:
            The snapshot after the update.
        """
        position = self._index.get(agent_id)
        if position is None:
            logger.debug("Ignoring update for unknown agent id %r", agent_id)
            return self._agents

        parsed = parse_score(raw_input)
        percentage = clamp_score(parsed)
        if not isinstance(raw_input, str) or raw_input.strip() != str(percentage):
            logger.debug(
                "Coerced score input %r to %d for agent %s", raw_input, percentage, agent_id
            )

        agents = list(self._agents)
        agents[position] = replace(agents[position], percentage=percentage)
        self._agents = tuple(agents)
        self.revision += 1
        logger.info("Agent %s set to %d%%", agent_id, percentage)

        for listener in list(self._listeners):
            listener(self._agents)
        return self._agents
