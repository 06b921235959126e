"""Sudoku solutions, the degree-labelled graphs built from them, and helpers."""

__version__ = "0.1.0"