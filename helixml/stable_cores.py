"""Level M2 of topological memory: extraction of long-term stable cores."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from helixml.records import Cycle, StableCore


@dataclass(frozen=True)
class CoreStats:
    """Summary of the stable cores held by an extractor."""

    count: int
    average_stability: float
    average_persistence: float
    max_stability: float


def _as_sequence(sequence: np.ndarray) -> np.ndarray:
    array = np.asarray(sequence)
    if array.ndim != 2:
        raise ValueError(f"sequence must be 2-D (length, features), got shape {array.shape}")
    return array


class StableCoreExtractor:
    """Distils persistent patterns from cycles and from long stretches of a sequence."""

    max_core_size = 100
    min_persistence = 0.8
    time_scales = (10, 50, 100, 200)
    consistency_factor = 0.9
    pattern_similarity = 0.85
    shared_pattern_threshold = 0.8
    cross_persistence_factor = 0.95

    def __init__(self, d_model: int, stability_threshold: float, rng=None) -> None:
        generator = np.random.default_rng(rng)
        self.d_model = d_model
        self.stability_threshold = stability_threshold
        self.core_weights = generator.normal(0.0, 0.1, (d_model, d_model))
        self.stable_cores: list[StableCore] = []

    def extract_cores(self, sequence: np.ndarray, cycles: Sequence[Cycle]) -> list[StableCore]:
        """Cores from stable cycles, then long time scales, then cycle pairs."""
        sequence = _as_sequence(sequence)
        extracted = [
            core
            for core in map(self._core_from_cycle, self._stable_cycles(cycles))
            if core.persistence >= self.min_persistence
        ]
        extracted.extend(self._long_term_cores(sequence))
        extracted.extend(self._cross_cycle_cores(cycles))
        return extracted

    def _stable_cycles(self, cycles: Sequence[Cycle]) -> list[Cycle]:
        stable = [c for c in cycles if c.stability >= self.stability_threshold]
        return sorted(stable, key=lambda c: c.stability, reverse=True)

    def _core_from_cycle(self, cycle: Cycle) -> StableCore:
        if not cycle.nodes:
            raise ValueError("cycle has no nodes to take a core pattern from")
        period_factor = min(cycle.period / self.max_core_size, 1.0)
        return StableCore(
            core_pattern=cycle.nodes[0].copy(),
            stability_score=cycle.stability * cycle.strength * self.consistency_factor,
            persistence=cycle.stability * period_factor,
            connections=[],
        )

    def _time_scale_windows(self, sequence: np.ndarray, scale: int) -> Iterator[np.ndarray]:
        seq_len = sequence.shape[0]
        for start in range(0, seq_len, scale):
            if start + scale <= seq_len:
                yield sequence[start:start + scale].copy()

    def _long_term_cores(self, sequence: np.ndarray) -> list[StableCore]:
        seq_len = sequence.shape[0]
        cores = []
        for scale in self.time_scales:
            if scale * 2 > seq_len:
                break
            persistence = 0.8 * min(scale / 100.0, 1.0)
            if persistence < self.min_persistence:
                continue
            cores.extend(
                StableCore(
                    core_pattern=window,
                    stability_score=persistence * self.consistency_factor,
                    persistence=persistence,
                    connections=[],
                )
                for window in self._time_scale_windows(sequence, scale)
            )
        return cores

    def _shared_pattern(self, first: Cycle, second: Cycle) -> np.ndarray | None:
        for node in first.nodes:
            for other in second.nodes:
                if self._similarity(node, other) > self.shared_pattern_threshold:
                    return node
        return None

    def _cross_cycle_cores(self, cycles: Sequence[Cycle]) -> list[StableCore]:
        cores = []
        for i, first in enumerate(cycles):
            for second in cycles[i + 1:]:
                pattern = self._shared_pattern(first, second)
                if pattern is None:
                    continue
                stability = (first.stability + second.stability) / 2.0 * self.consistency_factor
                if stability >= self.stability_threshold:
                    cores.append(
                        StableCore(
                            core_pattern=pattern.copy(),
                            stability_score=stability,
                            persistence=stability * self.cross_persistence_factor,
                            connections=[0, 1],
                        )
                    )
        return cores

    def _similarity(self, first: np.ndarray, second: np.ndarray) -> float:
        return self.pattern_similarity

    def retrieve_by_cores(self, query: np.ndarray) -> np.ndarray:
        """Pattern of the most stable stored core, or the query itself."""
        best = None
        for core in self.stable_cores:
            if best is None or core.stability_score >= best.stability_score:
                best = core
        if best is not None:
            return best.core_pattern.copy()
        return np.array(query, copy=True)

    def update_cores(self, new_cores: Sequence[StableCore]) -> None:
        """Merge cores into the stored set, keeping at most ``max_core_size``."""
        for new in new_cores:
            best, best_similarity = None, 0.0
            for existing in self.stable_cores:
                similarity = self._similarity(new.core_pattern, existing.core_pattern)
                if similarity > best_similarity:
                    best, best_similarity = existing, similarity
            if best is not None:
                best.stability_score = (best.stability_score + new.stability_score) / 2.0
                best.persistence = (best.persistence + new.persistence) / 2.0
            else:
                self.stable_cores.append(new.copy())
        if len(self.stable_cores) > self.max_core_size:
            self.stable_cores.sort(key=lambda c: c.stability_score, reverse=True)
            del self.stable_cores[self.max_core_size:]

    def core_count(self) -> int:
        return len(self.stable_cores)

    def core_stats(self) -> CoreStats:
        count = len(self.stable_cores)
        stabilities = [c.stability_score for c in self.stable_cores]
        persistences = [c.persistence for c in self.stable_cores]
        return CoreStats(
            count=count,
            average_stability=sum(stabilities) / count if count else 0.0,
            average_persistence=sum(persistences) / count if count else 0.0,
            max_stability=max([0.0, *stabilities]),
        )