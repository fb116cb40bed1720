from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .engine import MatchEngine
from .models import Candidate, UpdateLevel
from .scores import ScoreTable

log = logging.getLogger(__name__)


def highlight_spans(indices: Iterable[int]) -> List[Tuple[int, int]]:
    """Merge matched indices into half-open (start, end) runs."""
    spans: List[Tuple[int, int]] = []
    for i in sorted(set(indices)):
        if spans and spans[-1][1] == i:
            spans[-1] = (spans[-1][0], i + 1)
        else:
            spans.append((i, i + 1))
    return spans


class ListView:
    """
    Presentation-side filtered/sorted list over a MatchEngine.

    Polls the engine once per render pass via refresh():
      NONE        -> nothing to do
      INVALIDATE  -> re-filter and re-sort the existing rows
      RELOAD      -> capture the new candidates and score table, rebuild rows

    Filter/sort read scores only through the captured ScoreTable.
    """

    def __init__(self, engine: MatchEngine, *, recent_first: Optional[bool] = None) -> None:
        self.engine = engine
        self.recent_first = engine.config.recent_first if recent_first is None else recent_first
        self._items: Tuple[Candidate, ...] = ()
        self._table = ScoreTable()
        self._rows: List[int] = []
        self.rebuild_count = 0
        self.invalidate_count = 0

    # /* ~~~ One render pass: consume the engine's level and catch up ~~~ */
    def refresh(self) -> UpdateLevel:
        level = self.engine.consume_level()
        if level == UpdateLevel.RELOAD:
            self._rebuild()
        elif level == UpdateLevel.INVALIDATE:
            self._invalidate()
        return level

    @property
    def rows(self) -> List[int]:
        """Visible candidate indices in display order."""
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def candidate_at(self, position: int) -> Candidate:
        if not 0 <= position < len(self._rows):
            raise IndexError(f"no visible candidate at position {position} ({len(self._rows)} visible)")
        return self._items[self._rows[position]]

    def visible(self) -> List[Candidate]:
        return [self._items[i] for i in self._rows]

    def select(self, position: int) -> Candidate:
        """Report a user selection; the launch itself happens elsewhere."""
        cand = self.candidate_at(position)
        log.info("selected %d: %s (%s)", position, cand.display_text, cand.app_id or "-")
        return cand

    # ------------- internals -------------

    def _rebuild(self) -> None:
        self._items = self.engine.candidates
        self._table = self.engine.scores
        self.rebuild_count += 1
        self._apply(range(len(self._items)))

    def _invalidate(self) -> None:
        self.invalidate_count += 1
        self._apply(range(len(self._items)))

    def _apply(self, indices: Iterable[int]) -> None:
        table = self._table
        keep = [i for i in indices if table[i] > 0]
        if self.recent_first:
            items = self._items
            keep.sort(key=lambda i: (-table[i], -items[i].last_used))
        else:
            keep.sort(key=lambda i: -table[i])
        self._rows = keep
