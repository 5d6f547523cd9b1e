"""Algorithms and data structures for competitive programming: primes, transforms, range queries, trees, strings, graphs and flows."""

__version__ = "0.1.0"