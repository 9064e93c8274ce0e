from __future__ import annotations

import math
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class Problem(BaseModel):
    """Single question with its expected answer."""

    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


@dataclass
class ScoreSheet:
    """Running tally of quiz outcomes; `total` is fixed when the problems are loaded."""

    total: int = 0
    correct: int = 0
    wrong: int = 0

    @property
    def answered(self) -> int:
        return self.correct + self.wrong

    @property
    def percentage(self) -> float:
        # An empty quiz has no meaningful score; report NaN instead of raising.
        if self.total == 0:
            return math.nan
        return self.correct / self.total * 100

    def record(self, is_correct: bool) -> None:
        if is_correct:
            self.correct += 1
        else:
            self.wrong += 1
