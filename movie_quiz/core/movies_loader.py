"""HTTP client for the top-rated movies list and poster images."""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from movie_quiz.constants.network_constants import (
    API_BASE_URL,
    API_KEY,
    REQUEST_TIMEOUT_SECONDS,
    TOP_MOVIES_PATH,
)

logger = logging.getLogger(__name__)

_RESIZED_POSTER_SUFFIX = "._V0_UX600_.jpg"


class MoviesLoadError(Exception):
    """Raised when the movie list cannot be fetched or understood."""


class MostPopularMovie(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(alias="fullTitle")
    rating: str = Field(default="", alias="imDbRating")
    image_url: str = Field(alias="image")

    @property
    def resized_image_url(self) -> str:
        """Poster URL pointing at the 600px wide rendition, if the URL has a size marker."""
        prefix, marker, _ = self.image_url.partition("._")
        if not marker:
            return self.image_url
        return prefix + _RESIZED_POSTER_SUFFIX

    @property
    def rating_value(self) -> float:
        try:
            return float(self.rating)
        except ValueError:
            return 0.0


class MostPopularMovies(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error_message: str = Field(default="", alias="errorMessage")
    items: list[MostPopularMovie] = Field(default_factory=list)


class MoviesLoader:
    """Fetches the movie list and poster bytes over HTTP."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = API_BASE_URL,
        api_key: str = API_KEY,
    ) -> None:
        self._client = client or httpx.Client(timeout=REQUEST_TIMEOUT_SECONDS, follow_redirects=True)
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    @property
    def top_movies_url(self) -> str:
        return f"{self._base_url}/{TOP_MOVIES_PATH}/{self._api_key}"

    def load_movies(self) -> list[MostPopularMovie]:
        try:
            response = self._client.get(self.top_movies_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise MoviesLoadError(
                f"Movie service answered with status {exc.response.status_code}."
            ) from exc
        except httpx.HTTPError as exc:
            raise MoviesLoadError(f"Could not reach the movie service: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise MoviesLoadError(f"Movie service address is invalid: {exc}") from exc

        try:
            payload = MostPopularMovies.model_validate_json(response.content)
        except ValidationError as exc:
            raise MoviesLoadError("Movie service returned an unexpected response.") from exc

        if payload.error_message:
            raise MoviesLoadError(payload.error_message)
        if not payload.items:
            raise MoviesLoadError("Movie service returned no movies.")

        logger.info("Loaded %d movies", len(payload.items))
        return payload.items

    def load_image(self, url: str) -> bytes:
        response = self._client.get(url)
        response.raise_for_status()
        return response.content

    def close(self) -> None:
        self._client.close()
