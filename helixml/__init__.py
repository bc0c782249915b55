"""Tensor metadata primitives and a topological memory of motifs, cycles and stable cores."""

__version__ = "0.1.0"