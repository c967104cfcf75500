from .graph import WeightedDirectedGraph
from .corpus import tokenize, join_lines, read_corpus

__all__ = [
    "WeightedDirectedGraph",
    "tokenize", "join_lines", "read_corpus",
]
