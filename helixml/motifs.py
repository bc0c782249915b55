"""Level M0 of topological memory: detection of short motifs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from helixml.records import Motif


@dataclass(frozen=True)
class MotifStats:
    """Summary of the motifs held by a detector."""

    count: int
    total_frequency: float
    average_stability: float
    max_stability: float


def _as_sequence(sequence: np.ndarray) -> np.ndarray:
    array = np.asarray(sequence)
    if array.ndim != 2:
        raise ValueError(f"sequence must be 2-D (length, features), got shape {array.shape}")
    return array


class MotifDetector:
    """Finds and accumulates short patterns with a sliding window."""

    similarity_threshold = 0.8
    min_frequency = 2
    retrieval_threshold = 0.7
    # Every pair of patterns is scored with this fixed similarity.
    pattern_similarity = 0.85
    # Stability given to a motif when it is first seen.
    initial_stability = 0.5

    def __init__(self, d_model: int, max_motif_length: int, rng=None) -> None:
        if max_motif_length < 1:
            raise ValueError("max_motif_length must be at least 1")
        generator = np.random.default_rng(rng)
        self.d_model = d_model
        self.max_motif_length = max_motif_length
        self.pattern_weights = generator.normal(0.0, 0.1, (max_motif_length, d_model))
        self.motifs: list[Motif] = []

    def detect_motifs(self, sequence: np.ndarray) -> list[Motif]:
        """Scan all windows; known motifs are reinforced, new ones returned."""
        sequence = _as_sequence(sequence)
        seq_len = sequence.shape[0]
        if seq_len < self.max_motif_length:
            raise ValueError(
                f"sequence length {seq_len} is shorter than the maximum motif length "
                f"{self.max_motif_length}"
            )
        detected: list[Motif] = []
        for window in range(1, self.max_motif_length + 1):
            for start in range(seq_len - window + 1):
                pattern = sequence[start:start + window].copy()
                if self._best_similarity() <= self.similarity_threshold:
                    continue
                best = self._best_match()
                if best is not None:
                    best.frequency += 1.0
                    best.stability = self._stability(best)
                else:
                    detected.append(Motif(pattern, 1.0, self.initial_stability, start))
        return [m for m in detected if m.frequency >= self.min_frequency]

    def _best_similarity(self) -> float:
        return self.pattern_similarity if self.motifs else 0.0

    def _best_match(self) -> Motif | None:
        # All stored motifs score the same similarity, so the first one wins.
        if self.motifs and self.pattern_similarity > 0.0:
            return self.motifs[0]
        return None

    @staticmethod
    def _stability(motif: Motif) -> float:
        return motif.frequency / 10.0 * 0.8

    def retrieve_by_motifs(self, query: np.ndarray) -> np.ndarray:
        """Pattern of the most stable motif, or the query when none is similar."""
        if self._best_similarity() > self.retrieval_threshold:
            best = None
            for motif in self.motifs:
                if best is None or motif.stability >= best.stability:
                    best = motif
            if best is not None:
                return best.pattern.copy()
        return np.array(query, copy=True)

    def update_motifs(self, new_motifs: Sequence[Motif]) -> None:
        """Merge motifs into the stored set."""
        for new in new_motifs:
            best = self._best_match()
            if best is not None:
                best.frequency += new.frequency
                best.stability = self._stability(best)
            else:
                self.motifs.append(new.copy())

    def motif_count(self) -> int:
        return len(self.motifs)

    def motif_stats(self) -> MotifStats:
        count = len(self.motifs)
        stabilities = [m.stability for m in self.motifs]
        return MotifStats(
            count=count,
            total_frequency=sum(m.frequency for m in self.motifs),
            average_stability=sum(stabilities) / count if count else 0.0,
            max_stability=max(stabilities, default=0.0),
        )