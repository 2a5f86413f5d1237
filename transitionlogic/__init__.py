"""Composable transition conditions with inspectable verdict trees.

Responsibilities:
  - Build pure conditions over an (old, new) transition from leaves and combinators.
  - Evaluate them into Result trees that record which tagged conditions triggered.
"""
