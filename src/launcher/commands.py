from __future__ import annotations
from .config import Config
from .engine import MatchEngine


def is_command(text: str, prefix: str) -> bool:
    """True when text starts with a non-empty command prefix."""
    return bool(prefix) and text.startswith(prefix)

def dispatch_text(engine: MatchEngine, text: str, config: Config | None = None) -> str:
    """
    Route entry text to the engine: command text hides every candidate,
    anything else is a search. Returns "command" or "query".
    """
    cfg = config or engine.config
    if is_command(text, cfg.command_prefix):
        engine.clear_all()
        return "command"
    engine.apply_query(text)
    return "query"
