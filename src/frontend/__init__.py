"""Public API shared by the CLI and the Flask app."""
from __future__ import annotations
import logging
import os
import time
from dataclasses import dataclass
from typing import List, Optional

from launcher.commands import dispatch_text
from launcher.config import Config, TOP_K
from launcher.engine import MatchEngine
from launcher.entries import make_candidates, read_records
from launcher.models import Candidate, UpdateLevel
from launcher.view import ListView, highlight_spans

log = logging.getLogger(__name__)


@dataclass
class Session:
    engine: MatchEngine
    view: ListView

_session: Session | None = None


def initialize(records_path: str, config: Optional[Config] = None, verbose: bool = False) -> Session:
    """Load records, build the engine and its list view, do the first render pass."""
    global _session
    if verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["LAUNCHER_VERBOSE"] = "1"

    t0 = time.perf_counter()
    cfg = config or Config()
    engine = MatchEngine(cfg)
    engine.reload(make_candidates(read_records(records_path), cfg))
    view = ListView(engine)
    view.refresh()
    _session = Session(engine=engine, view=view)
    log.info("[ready] %d candidates in %.2fs", len(engine), time.perf_counter() - t0)
    return _session

def current() -> Session:
    if _session is None:
        raise RuntimeError("Launcher not initialized. Call initialize(...) first.")
    return _session

def search(text: str, session: Optional[Session] = None) -> UpdateLevel:
    """Feed entry text to the engine and run one render pass."""
    s = session or current()
    dispatch_text(s.engine, text)
    return s.view.refresh()

def row_dict(position: int, cand: Candidate) -> dict:
    return {
        "position": position,
        "app_id": cand.app_id,
        "display_text": cand.display_text,
        "score": cand.score,
        "highlight_range": list(cand.highlight_range) if cand.highlight_range else None,
        "matched_spans": [list(s) for s in highlight_spans(cand.matched)],
    }

def rows(k: int = TOP_K, session: Optional[Session] = None) -> List[dict]:
    s = session or current()
    return [row_dict(i, c) for i, c in enumerate(s.view.visible()[:k])]
