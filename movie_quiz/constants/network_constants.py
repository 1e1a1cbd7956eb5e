"""Network configuration constants for the movie loader."""

import os

API_BASE_URL: str = os.environ.get("MOVIE_QUIZ_API_BASE_URL", "https://imdb-api.com/en/API")
API_KEY: str = os.environ.get("MOVIE_QUIZ_API_KEY", "")
TOP_MOVIES_PATH: str = "Top250Movies"
REQUEST_TIMEOUT_SECONDS: float = float(os.environ.get("MOVIE_QUIZ_REQUEST_TIMEOUT", "10"))
