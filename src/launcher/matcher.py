from __future__ import annotations
from typing import Callable, List, Optional, Tuple

from .normalize import CharClass, classify, fold_text

# Score tables (fzf/skim family)
SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_BOUNDARY_WHITE = BONUS_BOUNDARY + 2
BONUS_BOUNDARY_DELIMITER = BONUS_BOUNDARY + 1
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

_WORDISH = (CharClass.LOWER, CharClass.UPPER, CharClass.LETTER, CharClass.NUMBER)

MatchResult = Tuple[int, List[int]]
Matcher = Callable[[str, str], Optional[MatchResult]]


def _bonus_for(prev: CharClass, cur: CharClass) -> int:
    """Bonus for matching a char of class `cur` that follows a char of class `prev`."""
    if cur in _WORDISH:
        if prev == CharClass.WHITE:
            return BONUS_BOUNDARY_WHITE
        if prev == CharClass.DELIMITER:
            return BONUS_BOUNDARY_DELIMITER
        if prev == CharClass.NON_WORD:
            return BONUS_BOUNDARY
    if prev == CharClass.LOWER and cur == CharClass.UPPER:
        return BONUS_CAMEL123
    if prev != CharClass.NUMBER and cur == CharClass.NUMBER:
        return BONUS_CAMEL123
    if cur == CharClass.WHITE:
        return BONUS_BOUNDARY_WHITE
    if cur in (CharClass.NON_WORD, CharClass.DELIMITER):
        return BONUS_NON_WORD
    return 0

def _bonuses(haystack: str) -> List[int]:
    classes = classify(haystack)
    out: List[int] = []
    prev = CharClass.WHITE   # start of text counts as a word boundary
    for cur in classes:
        out.append(_bonus_for(prev, cur))
        prev = cur
    return out

def _subsequence_span(text: str, pat: str) -> Optional[Tuple[int, int]]:
    """
    /* ~~~ Returns (first, last): the earliest position pat[0] can match and the
       latest position pat[-1] can match, or None if pat is not a subsequence. ~~~ */
    """
    j = 0
    first = -1
    for i, ch in enumerate(text):
        if ch == pat[j]:
            if j == 0:
                first = i
            j += 1
            if j == len(pat):
                break
    if j < len(pat):
        return None

    j = len(pat) - 1
    last = -1
    for i in range(len(text) - 1, first - 1, -1):
        if text[i] == pat[j]:
            if j == len(pat) - 1:
                last = i
            j -= 1
            if j < 0:
                break
    return first, last

def fuzzy_indices(haystack: str, pattern: str) -> Optional[MatchResult]:
    """
    Case-insensitive fuzzy match of pattern against haystack.

    Returns (score, indices) for the best-scoring alignment, where indices
    are the positions in haystack of each pattern character (ascending),
    or None when pattern is not a subsequence of haystack. A match always
    scores at least 1.
    """
    if not pattern:
        return 0, []
    if len(pattern) > len(haystack):
        return None

    text = fold_text(haystack)
    pat = fold_text(pattern)
    span = _subsequence_span(text, pat)
    if span is None:
        return None
    first, last = span
    width = last - first + 1
    bonus = _bonuses(haystack)

    # row 0: first pattern char, bonus doubled
    prev_row: List[Optional[int]] = [None] * width
    prev_run: List[int] = [0] * width
    for c in range(width):
        if text[first + c] == pat[0]:
            b = bonus[first + c]
            prev_row[c] = SCORE_MATCH + b * BONUS_FIRST_CHAR_MULTIPLIER
            prev_run[c] = b

    back: List[List[int]] = [[]]
    for j in range(1, len(pat)):
        row: List[Optional[int]] = [None] * width
        run: List[int] = [0] * width
        ptr: List[int] = [-1] * width
        gap_best: Optional[int] = None
        gap_from = -1
        for c in range(width):
            # predecessor at c-2 opens a gap of one; older ones extend theirs
            if c >= 2:
                if gap_best is not None:
                    gap_best += SCORE_GAP_EXTENSION
                cand = prev_row[c - 2]
                if cand is not None:
                    cand += SCORE_GAP_START
                    if gap_best is None or cand >= gap_best:
                        gap_best, gap_from = cand, c - 2

            if text[first + c] != pat[j]:
                continue
            b = bonus[first + c]
            best: Optional[int] = None
            best_from = -1
            best_run = b
            if gap_best is not None:
                best, best_from = gap_best + SCORE_MATCH + b, gap_from

            before = prev_row[c - 1] if c >= 1 else None
            if before is not None:
                # a consecutive run keeps the bonus of its first char
                run_bonus = b if b >= BONUS_BOUNDARY else prev_run[c - 1]
                cons = before + SCORE_MATCH + max(run_bonus, BONUS_CONSECUTIVE, b)
                if best is None or cons >= best:
                    best, best_from, best_run = cons, c - 1, run_bonus

            row[c] = best
            ptr[c] = best_from
            run[c] = best_run
        back.append(ptr)
        prev_row, prev_run = row, run

    end = -1
    score: Optional[int] = None
    for c, val in enumerate(prev_row):
        if val is not None and (score is None or val > score):
            score, end = val, c
    if score is None:
        return None

    indices = [0] * len(pat)
    c = end
    for j in range(len(pat) - 1, -1, -1):
        indices[j] = first + c
        if j:
            c = back[j][c]
    return max(score, 1), indices
