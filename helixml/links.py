"""Temporal, intermediate and stable links between memory items."""

from __future__ import annotations

import copy
from collections.abc import Sequence

import numpy as np

from helixml.records import Cycle, Motif, StableCore


class _LinkSet:
    """Directed, decaying links between item indices."""

    max_links_per_node = 0
    link_decay_rate = 1.0
    prune_threshold = 0.0

    def __init__(self, d_model: int, rng=None) -> None:
        generator = np.random.default_rng(rng)
        self.d_model = d_model
        self.weights = generator.normal(0.0, 0.1, (d_model, d_model))
        self.links: dict[int, list[int]] = {}
        self.link_strengths: dict[tuple[int, int], float] = {}

    def _clone(self):
        clone = copy.copy(self)
        clone.links = {node: list(targets) for node, targets in self.links.items()}
        clone.link_strengths = dict(self.link_strengths)
        return clone

    def _add_link(self, source: int, target: int, strength: float) -> None:
        targets = self.links.setdefault(source, [])
        targets.append(target)
        if len(targets) > self.max_links_per_node:
            targets.pop()
        self.link_strengths[(source, target)] = strength

    def _apply_decay(self) -> None:
        self.link_strengths = {
            key: decayed
            for key, strength in self.link_strengths.items()
            if (decayed := strength * self.link_decay_rate) > self.prune_threshold
        }


class TemporalLinks(_LinkSet):
    """Short-term links between motifs that occur close together."""

    max_links_per_node = 5
    link_decay_rate = 0.95
    prune_threshold = 0.1
    link_threshold = 0.5
    temporal_window = 10
    motif_similarity = 0.8

    def __init__(self, d_model: int, rng=None) -> None:
        super().__init__(d_model, rng)

    def update_temporal_links(self, motifs: Sequence[Motif]) -> TemporalLinks:
        """A new link set with links between nearby motifs, then decayed."""
        updated = self._clone()
        for i, first in enumerate(motifs):
            for j, second in enumerate(motifs):
                if i == j:
                    continue
                distance = abs(first.position - second.position)
                if distance > self.temporal_window:
                    continue
                strength = self.motif_similarity / (1.0 + distance * 0.1)
                if strength > self.link_threshold:
                    updated._add_link(i, j, strength)
        updated._apply_decay()
        return updated

    def link_count(self) -> int:
        """Number of links that have a stored strength."""
        return len(self.link_strengths)


class IntermediateLinks(_LinkSet):
    """Medium-term links between stable cycles."""

    max_links_per_node = 10
    link_decay_rate = 0.98
    prune_threshold = 0.2
    link_threshold = 0.6
    cycle_similarity = 0.85

    def __init__(self, d_model: int, rng=None) -> None:
        super().__init__(d_model, rng)

    def update_intermediate_links(self, cycles: Sequence[Cycle]) -> IntermediateLinks:
        """A new link set with links between stable cycles, then decayed."""
        updated = self._clone()
        for i, first in enumerate(cycles):
            for j, second in enumerate(cycles):
                if i == j:
                    continue
                strength = self.cycle_similarity * (first.stability + second.stability) / 2.0
                if strength > self.link_threshold:
                    updated._add_link(i, j, strength)
        updated._apply_decay()
        return updated

    def link_count(self) -> int:
        """Number of links that have a stored strength."""
        return len(self.link_strengths)


class StableLinks(_LinkSet):
    """Long-term links between persistent stable cores."""

    max_links_per_node = 20
    link_decay_rate = 0.99
    prune_threshold = 0.3
    link_threshold = 0.7
    core_similarity = 0.9

    def __init__(self, d_model: int, rng=None) -> None:
        super().__init__(d_model, rng)

    def update_stable_links(self, stable_cores: Sequence[StableCore]) -> StableLinks:
        """A new link set with links between persistent cores, then decayed."""
        updated = self._clone()
        for i, first in enumerate(stable_cores):
            for j, second in enumerate(stable_cores):
                if i == j:
                    continue
                strength = self.core_similarity * (first.persistence + second.persistence) / 2.0
                if strength > self.link_threshold:
                    updated._add_link(i, j, strength)
        updated._apply_decay()
        return updated

    def link_count(self) -> int:
        """Number of links that have a stored strength."""
        return len(self.link_strengths)