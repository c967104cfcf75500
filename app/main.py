import logging
from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .bridge_model import BridgeTextGenerator

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Bridge Poet: word-affinity graph text generator")

# -----------------------
# Corpus setup
# -----------------------
BASE_DIR = Path(__file__).resolve().parent.parent
CORPUS_PATH = BASE_DIR / "data" / "corpus.txt"

DEFAULT_CORPUS = [
    "This is a test of the Mugar Omni Theater sound system.",
    "To explore strange new worlds",
    "To seek out new life and new civilizations",
]


def load_generator(corpus_path: Path = CORPUS_PATH) -> BridgeTextGenerator:
    """
    Use the corpus file when present; otherwise fall back to DEFAULT_CORPUS.
    A corpus file that exists but cannot be read is a startup error.
    """
    if corpus_path.exists():
        return BridgeTextGenerator.from_file(corpus_path)
    logger.info("[Bridge] %s not found, using built-in corpus", corpus_path)
    return BridgeTextGenerator.from_lines(DEFAULT_CORPUS)


generator = load_generator()

# -----------------------
# Request schemas
# -----------------------
class PoemRequest(BaseModel):
    text: str

class PoemResponse(BaseModel):
    poem: str
    model: str = "bridge"

class BridgeRequest(BaseModel):
    first: str
    second: str

class BridgeResponse(BaseModel):
    bridge: Optional[str] = None
    weight: int = 0

# -----------------------
# Root & status
# -----------------------
@app.get("/")
def root():
    return {
        "status": "Bridge Poet API Active",
        "vertices": generator.vocab_size,
        "edges": generator.edge_count,
    }

# -----------------------
# Generation
# -----------------------
@app.post("/poem", response_model=PoemResponse)
@app.post("/generate", response_model=PoemResponse)
def generate_poem(req: PoemRequest):
    try:
        return {"poem": generator.generate(req.text), "model": "bridge"}
    except Exception as e:
        logger.exception("[Bridge] generation failed")
        raise HTTPException(status_code=500, detail=f"Bridge generation failed: {e}")

@app.post("/bridge", response_model=BridgeResponse)
def find_bridge(req: BridgeRequest):
    bridge, weight = generator.find_bridge(req.first, req.second)
    return {"bridge": bridge, "weight": weight}

# -----------------------
# Graph inspection
# -----------------------
def _require_word(word: str) -> str:
    if not generator.has_word(word):
        raise HTTPException(status_code=404, detail=f"Word not in corpus: {word}")
    return word

@app.get("/graph/targets/{word}")
def graph_targets(word: str) -> Dict[str, int]:
    return generator.followers(_require_word(word))

@app.get("/graph/sources/{word}")
def graph_sources(word: str) -> Dict[str, int]:
    return generator.predecessors(_require_word(word))
