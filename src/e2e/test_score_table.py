import pytest

from launcher.models import Candidate
from launcher.scores import ScoreTable


def test_from_candidates_is_index_aligned():
    cands = [
        Candidate(display_text="a", search_text="a", score=5),
        Candidate(display_text="b", search_text="b", score=0),
        Candidate(display_text="c", search_text="c"),
    ]
    table = ScoreTable.from_candidates(cands)
    assert len(table) == 3
    assert table.snapshot() == [5, 0, 100]


def test_slots_are_independent():
    table = ScoreTable([1, 2, 3])
    table.set(1, 42)
    assert list(table) == [1, 42, 3]
    assert table.get(1) == table[1] == 42


def test_holds_signed_64_bit_values():
    table = ScoreTable([0])
    table.set(0, -(2 ** 63))
    assert table[0] == -(2 ** 63)
    with pytest.raises(OverflowError):
        table.set(0, 2 ** 63)


def test_out_of_range_slot_raises():
    with pytest.raises(IndexError):
        ScoreTable([1])[3]
