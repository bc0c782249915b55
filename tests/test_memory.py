import numpy as np
import pytest

from helixml.cycles import CycleAnalyzer
from helixml.memory import TopologicalMemory
from helixml.records import MemoryLevel


@pytest.fixture
def sequence():
    return np.random.default_rng(3).uniform(-1.0, 1.0, (50, 8))


@pytest.fixture
def memory():
    return TopologicalMemory(8, 5, 0.7, 0.8, rng=0)


def test_fresh_memory_finds_no_motifs(memory, sequence):
    out = memory.process_sequence(sequence)
    assert out.motifs == []


def test_temporal_cycle_periods_cover_allowed_range(memory, sequence):
    out = memory.process_sequence(sequence)
    expected = list(range(2, CycleAnalyzer.max_cycle_length + 1))
    assert [c.period for c in out.cycles] == expected


def test_short_sequence_limits_cycle_periods(memory):
    seq = np.random.default_rng(4).normal(size=(10, 8))
    out = memory.process_sequence(seq)
    assert [c.period for c in out.cycles] == list(range(2, 10 // 2 + 1))


def test_stability_is_one_element(memory, sequence):
    out = memory.process_sequence(sequence)
    assert out.stability.shape == (1,)


def test_intermediate_links_connect_every_cycle_pair(memory, sequence):
    out = memory.process_sequence(sequence)
    n = len(out.cycles)
    assert out.intermediate_links.link_count() == n * (n - 1)


def test_process_does_not_store(memory, sequence):
    before = memory.stats()
    memory.process_sequence(sequence)
    assert memory.stats() == before


def test_retrieve_returns_query_when_empty(memory, sequence):
    query = sequence[:3]
    for level in MemoryLevel:
        assert np.array_equal(memory.retrieve(query, level), query)


def test_update_stores_and_merges(memory, sequence):
    memory.update(sequence)
    stats = memory.stats()
    assert stats.motif_count == 0
    assert stats.cycle_count == 1
    assert stats.stable_core_count == 1


def test_update_replaces_links(memory, sequence):
    out = memory.process_sequence(sequence)
    memory.update(sequence)
    assert memory.stats().intermediate_link_count == out.intermediate_links.link_count()


def test_retrieve_m1_after_update_returns_first_cycle_node(memory, sequence):
    memory.update(sequence)
    result = memory.retrieve(sequence[:1], MemoryLevel.M1)
    assert np.array_equal(result, sequence[:2])


def test_sequence_shorter_than_motif_length_is_rejected():
    mem = TopologicalMemory(8, 12, 0.7, 0.8, rng=0)
    with pytest.raises(ValueError):
        mem.process_sequence(np.zeros((5, 8)))


def test_same_seed_reproducible(sequence):
    first = TopologicalMemory(8, 5, 0.7, 0.8, rng=11).process_sequence(sequence)
    second = TopologicalMemory(8, 5, 0.7, 0.8, rng=11).process_sequence(sequence)
    assert np.array_equal(first.stability, second.stability)