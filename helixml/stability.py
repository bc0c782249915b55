"""Stability of topological memory: S = f(R, E, C, Phi, S)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from helixml.records import Cycle, Motif, StableCore


@dataclass(frozen=True)
class StabilityMetrics:
    """The components of the stability formula and their weighted total."""

    relevance: float
    energy: float
    coherence: float
    phase: float
    self_stability: float
    total_stability: float


def _mean(values: Iterable[float]) -> float:
    items = list(values)
    return sum(items) / len(items) if items else 0.0


class StabilityCalculator:
    """Combines relevance, energy, coherence, phase and self-stability."""

    relevance_weight = 0.3
    energy_weight = 0.2
    coherence_weight = 0.2
    phase_weight = 0.15
    self_weight = 0.15

    motif_energy = 0.1
    cycle_energy = 0.2
    core_energy = 0.3

    motif_coherence = 0.8
    cycle_coherence = 0.85
    core_coherence = 0.9

    motif_phase = 0.7
    core_phase = 0.9
    period_scale = 20.0

    noise_std = 0.01

    def __init__(self, rng=None) -> None:
        self._generator = np.random.default_rng(rng)
        self.stability_weights = self._generator.normal(0.0, 0.1, (5, 1))

    def calculate_stability(
        self,
        motifs: Sequence[Motif],
        cycles: Sequence[Cycle],
        stable_cores: Sequence[StableCore],
    ) -> np.ndarray:
        """A one-element array drawn around the total stability."""
        total = self.metrics(motifs, cycles, stable_cores).total_stability
        return self._generator.normal(total, self.noise_std, (1,))

    def metrics(
        self,
        motifs: Sequence[Motif],
        cycles: Sequence[Cycle],
        stable_cores: Sequence[StableCore],
    ) -> StabilityMetrics:
        """Every component of the formula, computed exactly."""
        relevance = self._relevance(motifs, cycles, stable_cores)
        energy = self._energy(motifs, cycles, stable_cores)
        coherence = self._coherence(motifs, cycles, stable_cores)
        phase = self._phase(cycles)
        self_stability = self._self_stability(motifs, cycles, stable_cores)
        total = (
            self.relevance_weight * relevance
            + self.energy_weight * energy
            + self.coherence_weight * coherence
            + self.phase_weight * phase
            + self.self_weight * self_stability
        )
        return StabilityMetrics(relevance, energy, coherence, phase, self_stability, total)

    @staticmethod
    def _relevance(motifs, cycles, cores) -> float:
        motif_rel = (
            (_mean(m.frequency for m in motifs) + _mean(m.stability for m in motifs)) / 2.0
            if motifs else 0.0
        )
        cycle_rel = (
            (_mean(c.strength for c in cycles) + _mean(c.stability for c in cycles)) / 2.0
            if cycles else 0.0
        )
        core_rel = (
            (_mean(c.stability_score for c in cores) + _mean(c.persistence for c in cores)) / 2.0
            if cores else 0.0
        )
        return motif_rel * 0.4 + cycle_rel * 0.3 + core_rel * 0.3

    def _energy(self, motifs, cycles, cores) -> float:
        total = (
            len(motifs) * self.motif_energy
            + len(cycles) * self.cycle_energy
            + len(cores) * self.core_energy
        )
        return min(total, 1.0)

    def _coherence(self, motifs, cycles, cores) -> float:
        cross = self._cross_level_coherence(len(motifs), len(cycles), len(cores))
        return (self.motif_coherence + self.cycle_coherence + self.core_coherence + cross) / 4.0

    @staticmethod
    def _cross_level_coherence(motif_count: int, cycle_count: int, core_count: int) -> float:
        total = motif_count + cycle_count + core_count
        if total == 0:
            return 0.0
        spread = (
            abs(motif_count - cycle_count)
            + abs(cycle_count - core_count)
            + abs(motif_count - core_count)
        )
        return 1.0 - spread / (total * 2.0)

    def _phase(self, cycles) -> float:
        cycle_phase = (
            min(_mean(c.period for c in cycles) / self.period_scale, 1.0) if cycles else 0.0
        )
        phases = (self.motif_phase, cycle_phase, self.core_phase)
        average = sum(phases) / 3.0
        variance = sum((p - average) ** 2 for p in phases) / 3.0
        return 1.0 - variance

    @staticmethod
    def _self_stability(motifs, cycles, cores) -> float:
        return (
            _mean(m.stability for m in motifs)
            + _mean(c.stability for c in cycles)
            + _mean(c.stability_score for c in cores)
        ) / 3.0