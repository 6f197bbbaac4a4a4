"""Algorithms and data structures for programming contests: graphs, flows,
matching, number theory, big integers, fractions and 2D geometry."""

__version__ = "0.1.0"

__all__ = [
    "aho_corasick",
    "bigint",
    "closest_pair",
    "connectivity",
    "convex_hull_trick",
    "crt",
    "disjoint_set",
    "fraction",
    "geometry",
    "hashing",
    "hull",
    "int_geometry",
    "matching",
    "maxflow",
    "min_bit",
    "shortest_paths",
    "tree_center",
    "twosat",
]