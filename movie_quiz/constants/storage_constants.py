"""Storage locations for persisted game statistics."""

import os
from pathlib import Path

DEFAULT_STATISTICS_PATH: Path = Path.home() / ".movie_quiz" / "statistics.json"
STATISTICS_PATH: Path = Path(
    os.environ.get("MOVIE_QUIZ_STATISTICS_PATH", str(DEFAULT_STATISTICS_PATH))
)
