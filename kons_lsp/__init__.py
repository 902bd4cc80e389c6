"""Editor tooling for kons.

This package provides:
- A pygls-based Language Server for the kons Lisp dialect.
- A lightweight indexer that scans documents for top-level definitions and
  reader errors without evaluation.
"""

__all__ = [
    "server",
    "indexer",
]
