"""Entity-component scene engine: vector and matrix maths, transform hierarchy, shader generation."""

__version__ = "0.1.0"