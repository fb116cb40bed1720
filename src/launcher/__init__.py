"""
Launcher Match Engine

Incremental fuzzy match-and-rank core for an application launcher. A
presentation layer feeds it candidates and query text, then polls it once
per render pass to learn how much of its list needs refreshing.

- Candidate / UpdateLevel data models
- Fuzzy matcher (case-insensitive, boundary and contiguity aware)
- ScoreTable slots read by filter/sort callbacks
- MatchEngine orchestrating reload / query / clear
- ListView applying the filter and sort policy

Example Usage:
    from launcher import Config, MatchEngine, ListView, make_candidates, dispatch_text

    engine = MatchEngine(Config())
    engine.reload(make_candidates(records, engine.config))
    view = ListView(engine)

    dispatch_text(engine, "fir")
    view.refresh()
    for cand in view.visible():
        print(cand.score, cand.display_text)
"""

# src/launcher/__init__.py
from .config import Config, Field
from .models import AppRecord, Candidate, UpdateLevel
from .matcher import fuzzy_indices
from .scores import ScoreTable
from .engine import MatchEngine
from .entries import make_candidate, make_candidates, read_records
from .commands import dispatch_text, is_command
from .view import ListView, highlight_spans

__version__ = "1.0.0"
__all__ = [
    "AppRecord", "Candidate", "Config", "Field", "ListView", "MatchEngine",
    "ScoreTable", "UpdateLevel", "dispatch_text", "fuzzy_indices",
    "highlight_spans", "is_command", "make_candidate", "make_candidates",
    "read_records",
]
