from dataclasses import asdict

import numpy as np
import pytest

from helixml.records import Cycle, MemoryLevel, MemoryStats, Motif, StableCore


def test_memory_level_order():
    assert [level.name for level in MemoryLevel] == ["M0", "M1", "M2"]
    assert MemoryLevel(MemoryLevel.M1.value) is MemoryLevel.M1


def test_memory_stats_asdict_round_trip():
    stats = MemoryStats(1, 2, 3, 4, 5, 6)
    assert MemoryStats(**asdict(stats)) == stats


def test_memory_stats_is_frozen():
    stats = MemoryStats(0, 0, 0, 0, 0, 0)
    with pytest.raises(AttributeError):
        stats.motif_count = 3
    assert stats.motif_count == 0


def test_motif_copy_is_independent():
    motif = Motif(np.zeros((2, 3)), 1.0, 0.5, 4)
    clone = motif.copy()
    clone.pattern[0, 0] = 9.0
    clone.frequency = 7.0
    assert motif.pattern[0, 0] == 0.0
    assert motif.frequency == 1.0
    assert clone.position == motif.position


def test_cycle_copy_keeps_values():
    cycle = Cycle([np.ones((1, 2)), np.zeros((1, 2))], 0.8, 2, 0.72)
    clone = cycle.copy()
    assert len(clone.nodes) == 2
    assert np.array_equal(clone.nodes[0], cycle.nodes[0])
    assert clone.nodes[0] is not cycle.nodes[0]
    assert (clone.strength, clone.period, clone.stability) == (0.8, 2, 0.72)


def test_stable_core_connections_are_separate():
    first = StableCore(np.zeros(2), 0.9, 0.8)
    second = StableCore(np.zeros(2), 0.9, 0.8)
    first.connections.append(1)
    assert second.connections == []
    clone = first.copy()
    clone.connections.append(2)
    assert first.connections == [1]