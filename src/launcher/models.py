from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

from .config import FULL_MATCH_SCORE


class UpdateLevel(IntEnum):
    """Minimal refresh the presentation layer owes since the last poll."""
    NONE = 0
    INVALIDATE = 1   # scores changed, same candidates
    RELOAD = 2       # candidate set replaced


@dataclass(eq=False)
class Candidate:
    display_text: str
    search_text: str
    highlight_range: Optional[Tuple[int, int]] = None   # half-open, inside display_text
    score: int = FULL_MATCH_SCORE
    last_used: int = 0
    app_id: str = ""
    matched: Tuple[int, ...] = field(default=())         # highlightable matched indices

    def update_match(self, pattern: str, matcher, *, full_score: int = FULL_MATCH_SCORE) -> None:
        """Re-score against pattern; keep only matched indices that are visible."""
        if not pattern:
            self.score = full_score
            self.matched = ()
            return
        hit = matcher(self.search_text, pattern)
        if hit is None:
            self.score = 0
            self.matched = ()
            return
        score, indices = hit
        limit = len(self.display_text)
        self.score = int(score)
        self.matched = tuple(i for i in indices if 0 <= i < limit)

    def hide(self) -> None:
        self.score = 0
        self.matched = ()


@dataclass(frozen=True)
class AppRecord:
    """Already-extracted application metadata (discovery happens elsewhere)."""
    app_id: str
    name: str
    description: str = ""
    executable: str = ""
    commandline: str = ""
    last_used: int = 0
    hidden: bool = False
