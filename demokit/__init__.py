"""Small algorithms, design-pattern examples and toy applications: puzzles,
dynamic programming, sorting, a Bloom filter, stream pipelines, a binary
tree, a music library, an in-process game centre, a crawler and file-store
helpers."""

__version__ = "0.1.0"