"""Similarity measures and the file-name suffixes of their indexes."""

from __future__ import annotations

from enum import IntEnum

SIMSTRING_DB_FILE_COMMON_SUFFIX = ".simstring_db."
SIMSTRING_INVERSE_FILE_COMMON_SUFFIX = ".inverse."


class Measure(IntEnum):
    """Similarity measures that can be combined; ``name.lower()`` is the config name."""

    EDIT_DISTANCE = 0
    WEIGHTED_WORD_EDIT_DISTANCE = 1
    WEIGHTED_PRONUNCIATION_EDIT_DISTANCE = 2
    WEIGHTED_ROMAJI_EDIT_DISTANCE = 3
    KEYWORD_MATCH = 4
    ENSEMBLE = 5
    SVR = 6


class SimStringMeasure(IntEnum):
    """Set-similarity measures used for approximate candidate retrieval."""

    EXACT = 0
    DICE = 1
    COSINE = 2
    JACCARD = 3
    OVERLAP = 4