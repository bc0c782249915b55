"""Level M1 of topological memory: analysis of cycles and recurring patterns."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from helixml.records import Cycle, Motif


@dataclass(frozen=True)
class CycleStats:
    """Summary of the cycles held by an analyzer."""

    count: int
    average_strength: float
    average_period: float
    average_stability: float


def _as_sequence(sequence: np.ndarray) -> np.ndarray:
    array = np.asarray(sequence)
    if array.ndim != 2:
        raise ValueError(f"sequence must be 2-D (length, features), got shape {array.shape}")
    return array


class CycleAnalyzer:
    """Finds cycles in the motif dependency graph and periodic patterns in time."""

    max_cycle_length = 20
    min_cycle_strength = 0.6
    motif_similarity = 0.75
    pattern_similarity = 0.8
    consistency_factor = 0.9

    def __init__(self, d_model: int, detection_threshold: float, rng=None) -> None:
        generator = np.random.default_rng(rng)
        self.d_model = d_model
        self.detection_threshold = detection_threshold
        self.cycle_weights = generator.normal(0.0, 0.1, (d_model, d_model))
        self.cycles: list[Cycle] = []

    def analyze_cycles(self, sequence: np.ndarray, motifs: Sequence[Motif]) -> list[Cycle]:
        """Cycles found among the motifs, followed by temporal cycles."""
        sequence = _as_sequence(sequence)
        graph = self._dependency_graph(sequence.shape[0], motifs)
        detected = []
        for node_set in self._cycle_node_sets(graph):
            cycle = self._extract_cycle(sequence, node_set)
            if cycle.strength >= self.min_cycle_strength:
                detected.append(cycle)
        detected.extend(self._temporal_cycles(sequence))
        return detected

    def _dependency_graph(self, seq_len: int, motifs: Sequence[Motif]) -> dict[int, list[int]]:
        graph: dict[int, list[int]] = {position: [] for position in range(seq_len)}
        for i, first in enumerate(motifs):
            for j, second in enumerate(motifs):
                if i == j:
                    continue
                if self._motif_similarity(first, second) > self.detection_threshold:
                    neighbours = graph.get(first.position)
                    if neighbours is not None:
                        neighbours.append(second.position)
        return graph

    @staticmethod
    def _cycle_node_sets(graph: dict[int, list[int]]) -> list[set[int]]:
        """Depth-first search collecting the nodes of every back edge's cycle."""
        found: list[set[int]] = []
        visited: set[int] = set()
        for root in graph:
            if root in visited:
                continue
            path = [root]
            on_path = {root}
            visited.add(root)
            stack = [iter(graph.get(root, ()))]
            while stack:
                neighbour = next(stack[-1], None)
                if neighbour is None:
                    stack.pop()
                    on_path.discard(path.pop())
                    continue
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_path.add(neighbour)
                    path.append(neighbour)
                    stack.append(iter(graph.get(neighbour, ())))
                elif neighbour in on_path:
                    start = path.index(neighbour)
                    found.append(set(path[start:]))
        return found

    def _extract_cycle(self, sequence: np.ndarray, node_set: Iterable[int]) -> Cycle:
        node_ids = sorted(node_set)
        nodes = [sequence[node:node + 1].copy() for node in node_ids]
        strength = self._cycle_strength(nodes)
        return Cycle(
            nodes=nodes,
            strength=strength,
            period=len(node_ids),
            stability=self._cycle_stability(strength),
        )

    def _temporal_cycles(self, sequence: np.ndarray) -> list[Cycle]:
        seq_len = sequence.shape[0]
        found = []
        for period in range(2, self.max_cycle_length + 1):
            if period * 2 > seq_len:
                break
            starts = range(seq_len - period * 2 + 1)
            matches = sum(
                1
                for start in starts
                if self._pattern_similarity(
                    sequence[start:start + period],
                    sequence[start + period:start + 2 * period],
                )
                > self.detection_threshold
            )
            strength = matches / len(starts)
            if strength >= self.min_cycle_strength:
                nodes = [sequence[:period].copy(), sequence[period:2 * period].copy()]
                found.append(Cycle(nodes, strength, period, self._cycle_stability(strength)))
        return found

    def _motif_similarity(self, first: Motif, second: Motif) -> float:
        return self.motif_similarity

    def _pattern_similarity(self, first: np.ndarray, second: np.ndarray) -> float:
        return self.pattern_similarity

    def _cycle_strength(self, nodes: Sequence[np.ndarray]) -> float:
        similarities = [
            self._pattern_similarity(first, second)
            for i, first in enumerate(nodes)
            for second in nodes[i + 1:]
        ]
        if not similarities:
            return 0.0
        return sum(similarities) / len(similarities)

    def _cycle_stability(self, strength: float) -> float:
        return strength * self.consistency_factor

    @staticmethod
    def _cycle_similarity(first: Cycle, second: Cycle) -> float:
        period_similarity = 1.0 if first.period == second.period else 0.0
        strength_similarity = 1.0 - abs(first.strength - second.strength)
        return (period_similarity + strength_similarity) / 2.0

    def retrieve_by_cycles(self, query: np.ndarray) -> np.ndarray:
        """First node of the strongest stored cycle, or the query itself."""
        best = None
        for cycle in self.cycles:
            if best is None or cycle.strength >= best.strength:
                best = cycle
        if best is not None and best.nodes:
            return best.nodes[0].copy()
        return np.array(query, copy=True)

    def update_cycles(self, new_cycles: Sequence[Cycle]) -> None:
        """Merge cycles into the stored set, averaging with the closest match."""
        for new in new_cycles:
            best, best_similarity = None, 0.0
            for existing in self.cycles:
                similarity = self._cycle_similarity(new, existing)
                if similarity > best_similarity:
                    best, best_similarity = existing, similarity
            if best is not None:
                best.strength = (best.strength + new.strength) / 2.0
                best.stability = (best.stability + new.stability) / 2.0
            else:
                self.cycles.append(new.copy())

    def cycle_count(self) -> int:
        return len(self.cycles)