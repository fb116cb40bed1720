from __future__ import annotations
import unicodedata
from enum import IntEnum
from typing import List

# Characters that separate words in app names, ids and command lines
DELIMITERS = "/,:;|-_.="


class CharClass(IntEnum):
    WHITE = 0
    NON_WORD = 1
    DELIMITER = 2
    LOWER = 3
    UPPER = 4
    LETTER = 5   # letters without case (CJK etc.)
    NUMBER = 6


def fold(ch: str) -> str:
    """Case-fold one character, keeping it one character long."""
    low = ch.lower()
    return low if len(low) == 1 else ch

def fold_text(text: str) -> str:
    return "".join(fold(ch) for ch in text)

def char_class(ch: str) -> CharClass:
    if ch.isspace():
        return CharClass.WHITE
    if ch in DELIMITERS:
        return CharClass.DELIMITER
    if ch.isdigit():
        return CharClass.NUMBER
    if ch.isalpha():
        if ch.islower():
            return CharClass.LOWER
        if ch.isupper():
            return CharClass.UPPER
        return CharClass.LETTER
    # combining marks belong to the letter they decorate
    if unicodedata.category(ch).startswith("M"):
        return CharClass.LETTER
    return CharClass.NON_WORD

def classify(text: str) -> List[CharClass]:
    """Return the CharClass of every character in text."""
    return [char_class(ch) for ch in text]
