"""Tests for the HTTP movie loader."""

import httpx
import pytest

from movie_quiz.core.movies_loader import MostPopularMovie, MoviesLoader, MoviesLoadError

SAMPLE_PAYLOAD = {
    "errorMessage": "",
    "items": [
        {
            "id": "tt0111161",
            "fullTitle": "The Shawshank Redemption (1994)",
            "imDbRating": "9.2",
            "image": "https://example.org/posters/shawshank._V1_UX128_CR0,3,128,176_AL_.jpg",
        },
        {
            "id": "tt0068646",
            "fullTitle": "The Godfather (1972)",
            "imDbRating": "",
            "image": "https://example.org/posters/godfather.jpg",
        },
    ],
}


def _loader(handler) -> MoviesLoader:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return MoviesLoader(client=client, base_url="https://api.example.org/en/API/", api_key="k_test")


class TestLoadMovies:
    """Movie list download and decoding."""

    def test_parses_items(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, json=SAMPLE_PAYLOAD)

        movies = _loader(handler).load_movies()

        assert requested == ["https://api.example.org/en/API/Top250Movies/k_test"]
        assert [movie.title for movie in movies] == [
            "The Shawshank Redemption (1994)",
            "The Godfather (1972)",
        ]
        assert movies[0].rating_value == pytest.approx(9.2)

    def test_error_message_raises(self):
        loader = _loader(lambda request: httpx.Response(200, json={"errorMessage": "Invalid API Key", "items": []}))

        with pytest.raises(MoviesLoadError, match="Invalid API Key"):
            loader.load_movies()

    def test_empty_items_raise(self):
        loader = _loader(lambda request: httpx.Response(200, json={"errorMessage": "", "items": []}))

        with pytest.raises(MoviesLoadError):
            loader.load_movies()

    def test_http_status_error_raises(self):
        loader = _loader(lambda request: httpx.Response(503))

        with pytest.raises(MoviesLoadError, match="503"):
            loader.load_movies()

    def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(MoviesLoadError):
            _loader(handler).load_movies()

    def test_invalid_payload_raises(self):
        loader = _loader(lambda request: httpx.Response(200, content=b"<html>oops</html>"))

        with pytest.raises(MoviesLoadError):
            loader.load_movies()


class TestMostPopularMovie:
    def test_resized_image_url(self):
        movie = MostPopularMovie.model_validate(SAMPLE_PAYLOAD["items"][0])

        assert movie.resized_image_url == "https://example.org/posters/shawshank._V0_UX600_.jpg"

    def test_url_without_size_marker_is_unchanged(self):
        movie = MostPopularMovie.model_validate(SAMPLE_PAYLOAD["items"][1])

        assert movie.resized_image_url == "https://example.org/posters/godfather.jpg"

    def test_unparseable_rating_is_zero(self):
        movie = MostPopularMovie.model_validate(SAMPLE_PAYLOAD["items"][1])

        assert movie.rating_value == 0.0


class TestLoadImage:
    def test_returns_bytes(self):
        loader = _loader(lambda request: httpx.Response(200, content=b"\x89PNG"))

        assert loader.load_image("https://example.org/poster.jpg") == b"\x89PNG"

    def test_failure_propagates(self):
        loader = _loader(lambda request: httpx.Response(404))

        with pytest.raises(httpx.HTTPStatusError):
            loader.load_image("https://example.org/poster.jpg")


class TestInvalidAddress:
    def test_invalid_base_url_raises_load_error(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        loader = MoviesLoader(client=client, base_url="http://exa mple.org:notaport", api_key="k_test")

        with pytest.raises(MoviesLoadError, match="invalid"):
            loader.load_movies()
