"""Fuzz property tests for rc2po.

Tests here are marked `fuzz` and only run with: pytest -m fuzz

Python 3.13+.
"""
