"""Attach corpus identifiers to search results."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from resembla.response import ResemblaResponse


class Searcher(Protocol):
    def find(self, query: str, threshold: float = 0.0, max_response: int = 0) -> list[ResemblaResponse]: ...

    def eval(
        self,
        query: str,
        candidates: Sequence[str],
        threshold: float = 0.0,
        max_response: int = 0,
    ) -> list[ResemblaResponse]: ...


@dataclass
class ResponseWithId(ResemblaResponse):
    """A scored text together with its identifier in the corpus."""

    id: int = 0


class ResemblaWithId:
    """Wrap a searcher so that every result carries its corpus identifier.

    ``rows`` are the corpus rows as column lists. Columns are numbered from 1;
    an ``id_col`` of 0, or one past a row's end, gives the text the next
    number after the largest identifier seen so far. The first identifier of
    a repeated text is kept.
    """

    def __init__(
        self,
        resembla: Searcher,
        rows: Iterable[Sequence[str]],
        id_col: int = 1,
        text_col: int = 2,
    ) -> None:
        if text_col < 1:
            raise ValueError("text_col must be at least 1")
        self.resembla = resembla
        self.ids: dict[str, int] = {}
        max_id = 0
        for columns in rows:
            if len(columns) < text_col:
                continue
            text = columns[text_col - 1]
            if text in self.ids:
                continue
            if id_col == 0 or id_col > len(columns):
                max_id += 1
                identifier = max_id
            else:
                identifier = int(columns[id_col - 1])
                max_id = max(identifier, max_id)
            self.ids[text] = identifier

    def find(self, query: str, threshold: float = 0.0, max_response: int = 0) -> list[ResponseWithId]:
        """Search and attach identifiers; KeyError for a text not in the corpus."""
        return [
            ResponseWithId(r.text, r.score, self.ids[r.text])
            for r in self.resembla.find(query, threshold, max_response)
        ]

    def eval(
        self,
        query: str,
        candidates: Sequence[str],
        threshold: float = 0.0,
        max_response: int = 0,
    ) -> list[ResponseWithId]:
        """Score candidates and attach identifiers, 0 for texts not in the corpus."""
        return [
            ResponseWithId(r.text, r.score, self.ids.get(r.text, 0))
            for r in self.resembla.eval(query, candidates, threshold, max_response)
        ]