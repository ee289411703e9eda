"""Result records: scored texts and analysed words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ResemblaResponse:
    """A text together with its similarity score.

    Ordering puts higher scores first, so ``sorted`` yields best matches first.
    """

    text: str
    score: float

    def __lt__(self, other: ResemblaResponse) -> bool:
        if not isinstance(other, ResemblaResponse):
            return NotImplemented
        return self.score > other.score


@dataclass
class Word:
    """A word's surface form and its morphological features."""

    surface: str
    feature: list[str] = field(default_factory=list)