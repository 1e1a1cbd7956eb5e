"""Service for persisting completed rounds and aggregating statistics."""

from __future__ import annotations

from datetime import datetime
import json
import logging
import os
from pathlib import Path
from threading import Lock

from movie_quiz.core.models import GameResult

logger = logging.getLogger(__name__)


class StatisticsError(Exception):
    """Base class for statistics failures."""


class StatisticsPersistenceError(StatisticsError):
    """Raised when the history file cannot be read or written."""


class EmptyStatisticsError(StatisticsError, LookupError):
    """Raised when an aggregate needs at least one recorded game."""


class StatisticsStore:
    """Append-only history of game results backed by a JSON file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self._lock = Lock()
        self._games: list[GameResult] = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def store(self, correct: int, total: int) -> GameResult:
        """Record a finished round and persist the whole history."""
        if total <= 0:
            raise ValueError("Total number of questions must be positive.")
        if not 0 <= correct <= total:
            raise ValueError("Correct answers must be between 0 and the total.")

        result = GameResult(correct=correct, total=total, date=datetime.now())
        with self._lock:
            updated = [*self._games, result]
            self._write(updated)
            self._games = updated
        logger.info("Stored game %d/%d (%d games total)", correct, total, len(updated))
        return result

    @property
    def history(self) -> tuple[GameResult, ...]:
        with self._lock:
            return tuple(self._games)

    @property
    def games_count(self) -> int:
        with self._lock:
            return len(self._games)

    @property
    def best_game(self) -> GameResult:
        """Game with the most correct answers; the earliest one wins a tie."""
        with self._lock:
            if not self._games:
                raise EmptyStatisticsError("No games have been recorded yet.")
            best = self._games[0]
            for game in self._games[1:]:
                if game.is_better_than(best):
                    best = game
            return best

    @property
    def total_accuracy(self) -> float:
        """Percentage of correct answers across every recorded game."""
        with self._lock:
            total_questions = sum(game.total for game in self._games)
            if total_questions == 0:
                return 0.0
            total_correct = sum(game.correct for game in self._games)
            return total_correct / total_questions * 100

    def _load(self) -> list[GameResult]:
        if not self._file_path.exists():
            return []
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
            return [GameResult.from_dict(entry) for entry in payload["games"]]
        except OSError as exc:
            raise StatisticsPersistenceError(
                f"Could not read statistics from {self._file_path}: {exc}"
            ) from exc
        except (ValueError, KeyError, TypeError) as exc:
            raise StatisticsPersistenceError(
                f"Statistics file {self._file_path} is corrupt: {exc}"
            ) from exc

    def _write(self, games: list[GameResult]) -> None:
        payload = {"games": [game.to_dict() for game in games]}
        temp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(temp_path, self._file_path)
        except OSError as exc:
            raise StatisticsPersistenceError(
                f"Could not write statistics to {self._file_path}: {exc}"
            ) from exc
