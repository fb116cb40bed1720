# launcher/engine.py
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import Config
from .matcher import Matcher, fuzzy_indices
from .models import Candidate, UpdateLevel
from .scores import ScoreTable

log = logging.getLogger(__name__)


class MatchEngine:
    """
    Incremental match-and-rank engine that owns:
      - the candidate list (replaced wholesale on reload),
      - a ScoreTable with one slot per candidate (read by the list view),
      - the pending UpdateLevel the presentation layer consumes per render.

    Public API (used by the list view, CLI and Flask):
      * reload(candidates):   replace the candidate set      -> RELOAD
      * apply_query(text):    re-score every candidate       -> INVALIDATE on change
      * clear_all():          hide every candidate           -> INVALIDATE on change
      * consume_level():      read the pending level and reset it to NONE

    Mutations are not reentrant; callers issue them one at a time.
    """

    # ------------- lifecycle -------------

    def __init__(self, config: Optional[Config] = None, *, matcher: Matcher = fuzzy_indices) -> None:
        self.config = config or Config()
        self._matcher = matcher
        self._candidates: List[Candidate] = []
        self._scores = ScoreTable()
        self._level = UpdateLevel.RELOAD  # first render does a full build

    # /* ~~~ Replace the candidate set and its score slots together ~~~ */
    def reload(self, candidates: Iterable[Candidate]) -> None:
        items = list(candidates)
        table = ScoreTable.from_candidates(items)
        self._candidates, self._scores = items, table
        self._escalate(UpdateLevel.RELOAD)
        log.info("Reloaded %d candidates", len(items))

    # ------------- updates -------------

    # /* ~~~ Re-score every candidate against the query text ~~~ */
    def apply_query(self, text: str, matcher: Optional[Matcher] = None) -> None:
        match = matcher or self._matcher
        full = self.config.full_match_score
        changed = self._rescore(lambda c: c.update_match(text, match, full_score=full))
        log.debug("Query %r: %d scores changed", text, changed)

    # /* ~~~ Hide everything (command text is not a search) ~~~ */
    def clear_all(self) -> None:
        changed = self._rescore(Candidate.hide)
        log.debug("Cleared matches: %d scores changed", changed)

    # /* ~~~ Hand the pending level to the renderer exactly once ~~~ */
    def consume_level(self) -> UpdateLevel:
        level, self._level = self._level, UpdateLevel.NONE
        return level

    # ------------- read access -------------

    @property
    def level(self) -> UpdateLevel:
        """Pending level, without consuming it."""
        return self._level

    @property
    def scores(self) -> ScoreTable:
        return self._scores

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        return tuple(self._candidates)

    def candidate(self, i: int) -> Candidate:
        return self._candidates[i]

    def __getitem__(self, i: int) -> Candidate:
        return self._candidates[i]

    def __len__(self) -> int:
        return len(self._candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    # ------------- internals -------------

    def _escalate(self, level: UpdateLevel) -> None:
        self._level = max(self._level, level)

    def _rescore(self, update) -> int:
        """
        Apply `update` to each candidate; mirror changed scores into their
        slots and escalate to INVALIDATE. Slots are written even when a
        RELOAD is already pending. Returns the number of changed scores.
        """
        changed = 0
        for i, (cand, _slot) in enumerate(zip(self._candidates, self._scores, strict=True)):
            old = cand.score
            update(cand)
            if cand.score != old:
                self._scores.set(i, cand.score)
                changed += 1
        if changed:
            self._escalate(UpdateLevel.INVALIDATE)
        return changed
