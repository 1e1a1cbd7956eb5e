"""Round progress and scoring for a single quiz player."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from movie_quiz.constants.quiz_constants import QUESTIONS_AMOUNT
from movie_quiz.core.image_decoder import decode_poster
from movie_quiz.core.models import (
    AnswerOutcome,
    ContinueRound,
    QuizQuestion,
    QuizState,
    QuizStepViewModel,
    RoundComplete,
)

logger = logging.getLogger(__name__)


class QuizStateError(RuntimeError):
    """Raised when a transition is requested from the wrong state."""


class QuizEngine:
    """Tracks the current question, the question index and the correct-answer tally.

    State transitions:

        AWAITING_QUESTION --accept_question--> QUESTION_SHOWN
        QUESTION_SHOWN    --submit_answer----> ANSWER_SHOWN
        ANSWER_SHOWN      --advance_or_finish-> AWAITING_QUESTION (index + 1)
        ANSWER_SHOWN      --advance_or_finish-> ROUND_COMPLETE (last question)
        any               --restart----------> AWAITING_QUESTION (index = 0, score = 0)
    """

    def __init__(
        self,
        questions_amount: int = QUESTIONS_AMOUNT,
        image_decoder: Callable[[bytes], Any] = decode_poster,
    ) -> None:
        if questions_amount <= 0:
            raise ValueError("A round needs at least one question.")
        self._questions_amount = questions_amount
        self._image_decoder = image_decoder
        self._current_question_index: int = 0
        self._correct_answers: int = 0
        self._current_question: QuizQuestion | None = None
        self._state = QuizState.AWAITING_QUESTION

    @property
    def questions_amount(self) -> int:
        return self._questions_amount

    @property
    def current_question_index(self) -> int:
        return self._current_question_index

    @property
    def correct_answers(self) -> int:
        return self._correct_answers

    @property
    def current_question(self) -> QuizQuestion | None:
        return self._current_question

    @property
    def state(self) -> QuizState:
        return self._state

    def is_last_question(self) -> bool:
        return self._current_question_index == self._questions_amount - 1

    def accept_question(self, question: QuizQuestion) -> QuizStepViewModel | None:
        """Make ``question`` current and return its view model.

        Questions delivered while the engine is not waiting for one are stale
        and ignored.
        """
        if self._state is not QuizState.AWAITING_QUESTION:
            logger.debug("Ignoring question delivered in state %s", self._state.name)
            return None
        self._current_question = question
        self._state = QuizState.QUESTION_SHOWN
        return self.convert(question)

    def convert(self, question: QuizQuestion) -> QuizStepViewModel:
        return QuizStepViewModel(
            image=self._image_decoder(question.image),
            question=question.text,
            question_number=f"{self._current_question_index + 1}/{self._questions_amount}",
        )

    def submit_answer(self, is_yes: bool) -> AnswerOutcome | None:
        """Score the user's answer. Returns None for input with no question to answer."""
        if self._current_question is None or self._state is not QuizState.QUESTION_SHOWN:
            return None
        is_correct = is_yes == self._current_question.correct_answer
        if is_correct:
            self._correct_answers += 1
        self._state = QuizState.ANSWER_SHOWN
        return AnswerOutcome(is_correct=is_correct)

    def advance_or_finish(self) -> ContinueRound | RoundComplete:
        if self._state is not QuizState.ANSWER_SHOWN:
            raise QuizStateError(f"Cannot advance from state {self._state.name}.")

        if self.is_last_question():
            self._state = QuizState.ROUND_COMPLETE
            logger.info(
                "Round complete: %d/%d correct", self._correct_answers, self._questions_amount
            )
            return RoundComplete(correct=self._correct_answers, total=self._questions_amount)

        self._current_question_index += 1
        self._current_question = None
        self._state = QuizState.AWAITING_QUESTION
        return ContinueRound(next_index=self._current_question_index)

    def restart(self) -> None:
        """Reset progress and score. Requesting the next question is up to the caller."""
        self._current_question_index = 0
        self._correct_answers = 0
        self._current_question = None
        self._state = QuizState.AWAITING_QUESTION
