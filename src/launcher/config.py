from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

# Score given to every candidate when no query is active
FULL_MATCH_SCORE: int = 100

# Text starting with this prefix is a command, not a search
COMMAND_PREFIX: str = ":"

# Sort ties by last-used timestamp (newest first)
RECENT_FIRST: bool = True

# Drop the extra annotation when the app name already contains it
HIDE_EXTRA_IF_CONTAINED: bool = True

# Rows shown by the CLI/web front ends
TOP_K: int = 10


class Field(str, Enum):
    """Application record fields usable as extra or hidden search text."""
    COMMENT = "comment"
    ID = "id"
    ID_SUFFIX = "id_suffix"
    EXECUTABLE = "executable"
    COMMANDLINE = "commandline"


@dataclass(frozen=True)
class Config:
    """
    Explicit launcher configuration. Built once at startup and passed
    to the engine, entry composition and command dispatch.
    """
    command_prefix: str = COMMAND_PREFIX
    recent_first: bool = RECENT_FIRST
    hide_extra_if_contained: bool = HIDE_EXTRA_IF_CONTAINED
    extra_field: Tuple[Field, ...] = (Field.ID_SUFFIX,)
    hidden_fields: Tuple[Field, ...] = ()
    name_overrides: Dict[str, str] = field(default_factory=dict)
    exclude: Tuple[str, ...] = ()
    full_match_score: int = FULL_MATCH_SCORE
