import numpy as np
import pytest

from helixml.links import IntermediateLinks, StableLinks, TemporalLinks
from helixml.records import Cycle, Motif, StableCore


def _motif(position):
    return Motif(np.zeros((1, 3)), 1.0, 0.5, position)


def _cycle(stability):
    return Cycle([np.zeros((1, 3))], 0.8, 2, stability)


def _core(persistence):
    return StableCore(np.zeros((1, 3)), 0.8, persistence)


def test_weights_shape_and_empty_start():
    links = TemporalLinks(5, rng=0)
    assert links.weights.shape == (5, 5)
    assert links.link_count() == 0


def test_close_motifs_are_linked_both_ways():
    links = TemporalLinks(3, rng=1)
    updated = links.update_temporal_links([_motif(0), _motif(2)])
    assert updated.link_count() == 2
    assert set(updated.link_strengths) == {(0, 1), (1, 0)}
    assert links.link_count() == 0


def test_distant_motifs_are_not_linked():
    links = TemporalLinks(3, rng=2)
    assert links.update_temporal_links([_motif(0), _motif(8)]).link_count() == 0
    assert links.update_temporal_links([_motif(0), _motif(30)]).link_count() == 0


def test_closer_motifs_get_stronger_links():
    links = TemporalLinks(3, rng=3)
    near = links.update_temporal_links([_motif(0), _motif(1)]).link_strengths[(0, 1)]
    far = links.update_temporal_links([_motif(0), _motif(4)]).link_strengths[(0, 1)]
    assert near > far > TemporalLinks.prune_threshold


def test_adjacency_capped_but_strengths_kept():
    n = 7
    updated = TemporalLinks(3, rng=4).update_temporal_links([_motif(3)] * n)
    assert updated.link_count() == n * (n - 1)
    assert all(len(t) <= TemporalLinks.max_links_per_node for t in updated.links.values())


def test_decay_scales_existing_links():
    first = TemporalLinks(3, rng=5).update_temporal_links([_motif(0), _motif(1)])
    second = first.update_temporal_links([])
    for key, strength in first.link_strengths.items():
        assert second.link_strengths[key] == pytest.approx(
            strength * TemporalLinks.link_decay_rate
        )


@pytest.mark.parametrize(
    "links, update, items",
    [
        (TemporalLinks(3, rng=6), "update_temporal_links", [_motif(0), _motif(1)]),
        (IntermediateLinks(3, rng=7), "update_intermediate_links", [_cycle(0.9), _cycle(0.9)]),
        (StableLinks(3, rng=8), "update_stable_links", [_core(0.9), _core(0.9)]),
    ],
)
def test_repeated_decay_prunes_everything(links, update, items):
    current = getattr(links, update)(items)
    assert current.link_count() == 2
    for _ in range(300):
        current = getattr(current, update)([])
    assert current.link_count() == 0


def test_intermediate_links_need_stable_cycles():
    links = IntermediateLinks(3, rng=9)
    assert links.update_intermediate_links([_cycle(0.9), _cycle(0.9)]).link_count() == 2
    assert links.update_intermediate_links([_cycle(0.5), _cycle(0.5)]).link_count() == 0


def test_stable_links_need_persistent_cores():
    links = StableLinks(3, rng=10)
    assert links.update_stable_links([_core(0.9), _core(0.9)]).link_count() == 2
    assert links.update_stable_links([_core(0.5), _core(0.5)]).link_count() == 0


def test_strengths_stay_above_prune_threshold():
    updated = StableLinks(3, rng=11).update_stable_links([_core(0.9), _core(1.0), _core(0.95)])
    assert updated.link_count() == 6
    assert all(s > StableLinks.prune_threshold for s in updated.link_strengths.values())