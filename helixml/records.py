"""Records shared by the levels of topological memory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class MemoryLevel(Enum):
    """Level of topological memory to retrieve from."""

    M0 = "motifs"
    M1 = "cycles"
    M2 = "stable_cores"


@dataclass(frozen=True)
class MemoryStats:
    """Counts of what each memory level and link set currently holds."""

    motif_count: int
    cycle_count: int
    stable_core_count: int
    temporal_link_count: int
    intermediate_link_count: int
    stable_link_count: int


@dataclass(eq=False)
class Motif:
    """A short recurring pattern found in a sequence."""

    pattern: np.ndarray
    frequency: float
    stability: float
    position: int

    def copy(self) -> Motif:
        return Motif(self.pattern.copy(), self.frequency, self.stability, self.position)


@dataclass(eq=False)
class Cycle:
    """A medium-term dependency made of several node patterns."""

    nodes: list[np.ndarray]
    strength: float
    period: int
    stability: float

    def copy(self) -> Cycle:
        return Cycle([n.copy() for n in self.nodes], self.strength, self.period, self.stability)


@dataclass(eq=False)
class StableCore:
    """A long-term pattern that persists across cycles."""

    core_pattern: np.ndarray
    stability_score: float
    persistence: float
    connections: list[int] = field(default_factory=list)

    def copy(self) -> StableCore:
        return StableCore(
            self.core_pattern.copy(),
            self.stability_score,
            self.persistence,
            list(self.connections),
        )