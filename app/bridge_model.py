import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from wordgraph import WeightedDirectedGraph, join_lines, read_corpus, tokenize

logger = logging.getLogger(__name__)


class BridgeTextGenerator:
    """
    Inserts "bridge" words between adjacent input words.

    The corpus is turned into a word-affinity graph: vertices are lowercase
    words, and the weight of w1 -> w2 counts how often w1 is directly
    followed by w2. Between input words w1 and w2 the generator inserts the
    word b maximizing weight(w1 -> b) + weight(b -> w2). Ties go to the
    lexicographically smallest b. If no two-edge path exists, nothing is
    inserted.

    Example corpus:  "This is a test of the Mugar Omni Theater sound system."
    Input:           "Test the system."
    Output:          "Test of the system."
    """

    def __init__(self, text: str):
        """
        text: str, the whole corpus as one blob
        """
        self._graph = WeightedDirectedGraph()

        words = [w.lower() for w in tokenize(text)]
        for w1, w2 in zip(words, words[1:]):
            current = self._graph.targets_of(w1).get(w2, 0)
            self._graph.set_edge(w1, w2, current + 1)

        self._graph.check_rep()
        logger.info(
            "[Bridge] graph built: %d words, %d edges from %d tokens",
            len(self._graph), self.edge_count, len(words),
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BridgeTextGenerator":
        return cls(join_lines(lines))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "BridgeTextGenerator":
        """Build from a corpus file. OSError propagates if it cannot be read."""
        logger.info("[Bridge] reading corpus from %s", path)
        return cls(read_corpus(path))

    @property
    def graph(self) -> WeightedDirectedGraph:
        """A copy of the affinity graph; mutating it does not affect the generator."""
        return self._graph.copy()

    @property
    def vocab_size(self) -> int:
        return len(self._graph)

    @property
    def edge_count(self) -> int:
        return sum(len(self._graph.targets_of(v)) for v in self._graph.vertices())

    def has_word(self, word: str) -> bool:
        return word.lower() in self._graph

    def followers(self, word: str) -> Dict[str, int]:
        """Words seen right after `word`, with counts."""
        return dict(self._graph.targets_of(word.lower()))

    def predecessors(self, word: str) -> Dict[str, int]:
        """Words seen right before `word`, with counts."""
        return dict(self._graph.sources_of(word.lower()))

    def find_bridge(self, first: str, second: str) -> Tuple[Optional[str], int]:
        """
        Best bridge between two words and its two-hop weight.

        Returns (None, 0) when no path first -> b -> second exists.
        """
        w1, w2 = first.lower(), second.lower()
        best, best_weight = None, 0

        for candidate, w1_weight in self._graph.targets_of(w1).items():
            w2_weight = self._graph.targets_of(candidate).get(w2)
            if w2_weight is None:
                continue
            weight = w1_weight + w2_weight
            if weight > best_weight or (weight == best_weight and candidate < best):
                best, best_weight = candidate, weight

        return best, best_weight

    def generate(self, text: str) -> str:
        """
        text: str, the input phrase

        Input words keep their case, bridge words are lowercase, and every
        word is separated by exactly one space.
        """
        words = tokenize(text)
        if len(words) < 2:
            return text

        out = [words[0]]
        for first, second in zip(words, words[1:]):
            bridge, weight = self.find_bridge(first, second)
            if bridge is not None:
                logger.debug("[Bridge] %r -> %r -> %r (weight=%d)", first, bridge, second, weight)
                out.append(bridge)
            out.append(second)

        return " ".join(out)

    def __repr__(self):
        return f"BridgeTextGenerator(graph={self._graph})"
