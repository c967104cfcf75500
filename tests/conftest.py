"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app.bridge_model import BridgeTextGenerator  # noqa: E402
from wordgraph import WeightedDirectedGraph  # noqa: E402


MUGAR_CORPUS = "This is a test of the Mugar Omni Theater sound system."


@pytest.fixture
def graph() -> WeightedDirectedGraph:
    """An empty graph over string labels."""
    return WeightedDirectedGraph()


@pytest.fixture
def mugar_corpus() -> str:
    return MUGAR_CORPUS


@pytest.fixture
def mugar_generator(mugar_corpus) -> BridgeTextGenerator:
    return BridgeTextGenerator(mugar_corpus)


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "corpus.txt"
    path.write_text("To explore strange\nnew worlds\nTo seek out new life\n", encoding="utf-8")
    return path
