"""Functions for array, hashing, string, Sudoku and two-pointer problems."""

__version__ = "0.1.0"
__all__ = ["codec", "hashing", "sudoku", "two_pointers"]