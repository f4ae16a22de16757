"""Classic dynamic-programming algorithms on lists, grids and strings."""

__version__ = "0.1.0"
__all__ = ["coins", "grid", "knapsack", "lcs", "strings", "subsets"]