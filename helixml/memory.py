"""Topological memory combining motifs, cycles, stable cores and their links."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from helixml.cycles import CycleAnalyzer
from helixml.links import IntermediateLinks, StableLinks, TemporalLinks
from helixml.motifs import MotifDetector
from helixml.records import Cycle, MemoryLevel, MemoryStats, Motif, StableCore
from helixml.stability import StabilityCalculator
from helixml.stable_cores import StableCoreExtractor


@dataclass
class TopologicalMemoryOutput:
    """Everything one pass over a sequence produced."""

    motifs: list[Motif]
    cycles: list[Cycle]
    stable_cores: list[StableCore]
    stability: np.ndarray
    temporal_links: TemporalLinks
    intermediate_links: IntermediateLinks
    stable_links: StableLinks


class TopologicalMemory:
    """Three memory levels (M0 motifs, M1 cycles, M2 stable cores) with links."""

    def __init__(
        self,
        d_model: int,
        max_motif_length: int,
        cycle_threshold: float,
        stability_threshold: float,
        rng=None,
    ) -> None:
        generator = np.random.default_rng(rng)
        self.d_model = d_model
        self.max_motif_length = max_motif_length
        self.cycle_detection_threshold = cycle_threshold
        self.stability_threshold = stability_threshold
        self.motif_detector = MotifDetector(d_model, max_motif_length, generator)
        self.cycle_analyzer = CycleAnalyzer(d_model, cycle_threshold, generator)
        self.core_extractor = StableCoreExtractor(d_model, stability_threshold, generator)
        self.temporal_links = TemporalLinks(d_model, generator)
        self.intermediate_links = IntermediateLinks(d_model, generator)
        self.stable_links = StableLinks(d_model, generator)
        self.stability_calculator = StabilityCalculator(generator)

    def process_sequence(self, sequence: np.ndarray) -> TopologicalMemoryOutput:
        """Run a sequence through every level without storing the results."""
        motifs = self.motif_detector.detect_motifs(sequence)
        cycles = self.cycle_analyzer.analyze_cycles(sequence, motifs)
        cores = self.core_extractor.extract_cores(sequence, cycles)
        stability = self.stability_calculator.calculate_stability(motifs, cycles, cores)
        return TopologicalMemoryOutput(
            motifs=motifs,
            cycles=cycles,
            stable_cores=cores,
            stability=stability,
            temporal_links=self.temporal_links.update_temporal_links(motifs),
            intermediate_links=self.intermediate_links.update_intermediate_links(cycles),
            stable_links=self.stable_links.update_stable_links(cores),
        )

    def retrieve(self, query: np.ndarray, level: MemoryLevel) -> np.ndarray:
        """Look the query up at one memory level."""
        if level is MemoryLevel.M0:
            return self.motif_detector.retrieve_by_motifs(query)
        if level is MemoryLevel.M1:
            return self.cycle_analyzer.retrieve_by_cycles(query)
        if level is MemoryLevel.M2:
            return self.core_extractor.retrieve_by_cores(query)
        raise ValueError(f"unknown memory level: {level!r}")

    def update(self, new_data: np.ndarray) -> None:
        """Process new data and store what it yields at every level."""
        output = self.process_sequence(new_data)
        self.motif_detector.update_motifs(output.motifs)
        self.cycle_analyzer.update_cycles(output.cycles)
        self.core_extractor.update_cores(output.stable_cores)
        self.temporal_links = output.temporal_links
        self.intermediate_links = output.intermediate_links
        self.stable_links = output.stable_links

    def stats(self) -> MemoryStats:
        return MemoryStats(
            motif_count=self.motif_detector.motif_count(),
            cycle_count=self.cycle_analyzer.cycle_count(),
            stable_core_count=self.core_extractor.core_count(),
            temporal_link_count=self.temporal_links.link_count(),
            intermediate_link_count=self.intermediate_links.link_count(),
            stable_link_count=self.stable_links.link_count(),
        )