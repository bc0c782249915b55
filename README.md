# helixml

Building blocks for sequence models that keep a layered, topological memory
of what they have seen.

The package has two parts:

- **Tensor metadata**: `Device`, `DType`, `Shape` and the operation catalogues
  in `helixml.ops` (`BinaryOp`, `UnaryOp`, `ReduceOp`, `ConvParams`,
  `PoolParams`, `OpResult` and others). Failures such as an impossible reshape
  or an incompatible broadcast raise subclasses of
  `helixml.errors.TensorError`.
- **Topological memory**: a three-level memory built on NumPy arrays:
  - M0 motifs (`helixml.motifs.MotifDetector`): short patterns
  - M1 cycles (`helixml.cycles.CycleAnalyzer`): medium-term dependencies
  - M2 stable cores (`helixml.stable_cores.StableCoreExtractor`): long-term
    patterns

  `TemporalLinks`, `IntermediateLinks` and `StableLinks` in `helixml.links`
  connect items within each level, and `helixml.stability.StabilityCalculator`
  scores the whole as S = f(R, E, C, Φ, S). `helixml.memory.TopologicalMemory`
  ties all of these together.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Shapes

```python
from helixml.shape import Shape
from helixml.errors import ShapeMismatchError

shape = Shape([2, 3])
print(shape, shape.numel)                 # (2, 3) 6
print(Shape([3]).broadcast_to(shape))     # (2, 3)

try:
    shape.reshape([4, 2])
except ShapeMismatchError as exc:
    print(exc)
```

## Topological memory

```python
import numpy as np
from helixml.memory import TopologicalMemory
from helixml.records import MemoryLevel

rng = np.random.default_rng(0)
memory = TopologicalMemory(
    d_model=64,
    max_motif_length=10,
    cycle_threshold=0.7,
    stability_threshold=0.8,
    rng=rng,
)

sequence = rng.uniform(-1.0, 1.0, size=(50, 64))
output = memory.process_sequence(sequence)
print(len(output.motifs), len(output.cycles), len(output.stable_cores))

memory.update(sequence)
print(memory.stats())

recalled = memory.retrieve(sequence[:1], MemoryLevel.M2)
```

A sequence is a two-dimensional array of shape `(length, d_model)`; it must
be at least `max_motif_length` rows long. Every component accepts a seed or a
`numpy.random.Generator`, so results can be reproduced.

`StabilityCalculator.metrics` returns each component of the stability formula
exactly, while `calculate_stability` returns a one-element array drawn around
the total.

## What the package does not do

- It has no command-line program; everything is used from Python.
- `Device`, `DType` and `Shape` describe tensors but do no arithmetic: there
  are no tensor objects, kernels, neural network layers or training loops.
- Similarities between patterns, motifs and cores are fixed scores held as
  class attributes, not values computed from the data.
- Memory lives only in the objects; nothing is saved to or loaded from disk.