"""Combination of several similarity searchers into one weighted ranking."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from resembla.response import ResemblaResponse


class Searcher(Protocol):
    def eval(
        self,
        query: str,
        candidates: Sequence[str],
        threshold: float = 0.0,
        max_response: int = 0,
    ) -> list[ResemblaResponse]: ...


class CandidateDatabase(Protocol):
    def search(self, query: str, max_candidate: int) -> list[str]: ...


Aggregate = Callable[[Sequence[float], Sequence[float]], float]


def _rank(results: list[ResemblaResponse], max_response: int) -> list[ResemblaResponse]:
    ranked = sorted(results)
    return ranked[:max_response] if max_response else ranked


class ResemblaEnsemble:
    """Score candidates with every child searcher and merge the scores."""

    def __init__(self, database: CandidateDatabase, aggregate: Aggregate, max_candidate: int) -> None:
        self.database = database
        self.aggregate = aggregate
        self.max_candidate = max_candidate
        self.children: list[Searcher] = []
        self.weights: list[float] = []

    def append(self, resembla: Searcher, weight: float = 1.0) -> None:
        """Add a child searcher with the weight its scores carry."""
        self.children.append(resembla)
        self.weights.append(weight)

    def find(self, query: str, threshold: float = 0.0, max_response: int = 0) -> list[ResemblaResponse]:
        """Retrieve candidates from the database and rank them."""
        limit = max(self.max_candidate, max_response) if self.max_candidate else 0
        return self.eval(query, self.database.search(query, limit), threshold, max_response)

    def eval(
        self,
        query: str,
        candidates: Sequence[str],
        threshold: float = 0.0,
        max_response: int = 0,
    ) -> list[ResemblaResponse]:
        """Rank ``candidates`` by the aggregate of the children's scores.

        Results scoring below ``threshold`` are dropped; a positive
        ``max_response`` keeps only that many of the best.
        """
        scores: dict[str, list[float]] = {}
        for child in self.children:
            for response in child.eval(query, candidates, 0.0, 0):
                scores.setdefault(response.text, []).append(response.score)

        results = []
        for text, values in scores.items():
            score = self.aggregate(self.weights, values)
            if score >= threshold:
                results.append(ResemblaResponse(text, score))
        return _rank(results, max_response)