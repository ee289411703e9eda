"""A predictor that returns one chosen feature unchanged."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_KEY = "base_similarity"


class PrejudicedPredictor:
    """Predict a score by reading a single feature, by default the base similarity."""

    DEFAULT_KEY = DEFAULT_KEY

    def __init__(self, key: str = DEFAULT_KEY) -> None:
        self.key = key

    def __call__(self, features: Mapping[str, float]) -> float:
        """Return the value of the configured feature; KeyError if it is missing."""
        return features[self.key]