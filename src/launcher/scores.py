from __future__ import annotations
from array import array
from typing import Iterable, Iterator


class ScoreTable:
    """
    Index-aligned score slots, one signed 64-bit cell per candidate.

    Readers (filter/sort callbacks) index the table directly and never touch
    the engine's candidate list. The table never changes length: a reload
    builds a new table, so a reader still holding the old one keeps a
    consistent view.
    """

    __slots__ = ("_slots",)

    def __init__(self, scores: Iterable[int] = ()) -> None:
        self._slots = array("q", scores)

    @classmethod
    def from_candidates(cls, candidates) -> "ScoreTable":
        return cls(c.score for c in candidates)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, i: int) -> int:
        return self._slots[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots)

    def get(self, i: int) -> int:
        return self._slots[i]

    def set(self, i: int, score: int) -> None:
        self._slots[i] = score

    def snapshot(self) -> list[int]:
        return self._slots.tolist()

    def __repr__(self) -> str:
        return f"ScoreTable({self._slots.tolist()!r})"
