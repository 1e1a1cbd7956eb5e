"""Domain models for the movie quiz."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Yes/No question about a single movie poster."""

    image: bytes
    text: str
    correct_answer: bool


@dataclass(frozen=True, slots=True)
class QuizStepViewModel:
    """Display-ready snapshot of one question."""

    image: Any
    question: str
    question_number: str


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome of one completed round. Never mutated once recorded."""

    correct: int
    total: int
    date: datetime

    def is_better_than(self, other: GameResult) -> bool:
        return self.correct > other.correct

    def to_dict(self) -> dict[str, Any]:
        return {"correct": self.correct, "total": self.total, "date": self.date.isoformat()}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> GameResult:
        return cls(
            correct=int(payload["correct"]),
            total=int(payload["total"]),
            date=datetime.fromisoformat(payload["date"]),
        )


@dataclass(slots=True)
class AlertModel:
    """Content of a modal alert with a single action button."""

    title: str
    message: str
    button_text: str
    completion: Callable[[], None] = field(default=lambda: None)


class QuizState(Enum):
    """Phases of a single question within a round."""

    AWAITING_QUESTION = auto()
    QUESTION_SHOWN = auto()
    ANSWER_SHOWN = auto()
    ROUND_COMPLETE = auto()


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    is_correct: bool


@dataclass(frozen=True, slots=True)
class ContinueRound:
    """The round goes on; the next question should be requested."""

    next_index: int


@dataclass(frozen=True, slots=True)
class RoundComplete:
    """The last question was answered."""

    correct: int
    total: int
