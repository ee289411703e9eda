"""Parsing of measure names and derivation of index file paths."""

from __future__ import annotations

from resembla.measures import (
    SIMSTRING_DB_FILE_COMMON_SUFFIX,
    SIMSTRING_INVERSE_FILE_COMMON_SUFFIX,
    Measure,
    SimStringMeasure,
)
from resembla.string_util import VALUE_DELIMITER, split

_SIMSTRING_MEASURES = {member.name.lower(): member for member in SimStringMeasure}

# Measures that may be requested by name; the ensemble is built internally.
_SELECTABLE_MEASURES = {
    member.name.lower(): member for member in Measure if member is not Measure.ENSEMBLE
}


def simstring_measure_from_string(name: str) -> SimStringMeasure:
    """Return the SimString measure called ``name``; ValueError if unknown."""
    try:
        return _SIMSTRING_MEASURES[name]
    except KeyError:
        raise ValueError(f"unknown simstring measure: {name}") from None


def _measure_name(measure: Measure | int) -> str:
    try:
        return Measure(measure).name.lower()
    except ValueError:
        raise ValueError(f"unknown Resembla measure: {measure!r}") from None


def db_path_from_resembla_measure(corpus_path: str, measure: Measure | int) -> str:
    """Path of the SimString database built for ``measure`` over the corpus."""
    return corpus_path + SIMSTRING_DB_FILE_COMMON_SUFFIX + _measure_name(measure)


def inverse_path_from_resembla_measure(corpus_path: str, measure: Measure | int) -> str:
    """Path of the inverted index from indexed to original texts for ``measure``."""
    return corpus_path + SIMSTRING_INVERSE_FILE_COMMON_SUFFIX + _measure_name(measure)


def split_to_resembla_measures(
    text: str,
    delimiter: str = VALUE_DELIMITER,
    ignore_unknown_measure: bool = False,
) -> list[Measure]:
    """Parse a delimited list of measure names, keeping their order.

    Unknown names raise ValueError unless ``ignore_unknown_measure`` is set,
    in which case they are skipped.
    """
    result: list[Measure] = []
    for name in split(text, delimiter):
        measure = _SELECTABLE_MEASURES.get(name)
        if measure is not None:
            result.append(measure)
        elif not ignore_unknown_measure:
            raise ValueError(f"unknown Resembla measure: {name}")
    return result