"""Tests for the TMDB adapter, MovieService and /movies endpoints."""
import httpx
import pytest
from httpx import AsyncClient

from cinefeel.api.dependencies.services import get_tmdb_adapter
from cinefeel.api.main import app
from cinefeel.config.settings import Settings
from cinefeel.shared.adapters.tmdb_adapter import TMDBAdapter
from cinefeel.shared.core.exceptions import (
    ExternalServiceError,
    MovieNotFoundError,
    ServiceUnavailableError,
)
from cinefeel.shared.services.movie_service import MovieService

POPULAR = {
    "page": 1,
    "total_pages": 10,
    "total_results": 200,
    "results": [
        {
            "id": 603,
            "title": "The Matrix",
            "overview": "A hacker learns the truth.",
            "poster_path": "/matrix.jpg",
            "release_date": "1999-03-31",
            "vote_average": 8.2,
        },
        {
            "id": 604,
            "title": "Unreleased",
            "overview": None,
            "poster_path": None,
            "release_date": "",
            "vote_average": 0,
        },
    ],
}

DETAILS = {
    "id": 603,
    "title": "The Matrix",
    "overview": "A hacker learns the truth.",
    "poster_path": "/matrix.jpg",
    "backdrop_path": "/matrix-bg.jpg",
    "release_date": "1999-03-31",
    "vote_average": 8.2,
    "runtime": 136,
    "tagline": "",
    "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
}


@pytest.fixture
def tmdb_settings() -> Settings:
    return Settings(TMDB_API_KEY="test-key", TMDB_BASE_URL="https://tmdb.test/3")


def _routes(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/3/movie/popular":
        return httpx.Response(200, json=POPULAR)
    if request.url.path == "/3/search/movie":
        return httpx.Response(200, json={**POPULAR, "results": POPULAR["results"][:1]})
    if request.url.path == "/3/movie/603":
        return httpx.Response(200, json=DETAILS)
    if request.url.path == "/3/movie/500":
        return httpx.Response(500, json={"status_message": "boom"})
    return httpx.Response(404, json={"status_message": "The resource you requested could not be found."})


@pytest.fixture
def adapter(tmdb_settings: Settings) -> TMDBAdapter:
    return TMDBAdapter(tmdb_settings, transport=httpx.MockTransport(_routes))


# ═══════════════════════════════════════════════════════════════════════════════
# ADAPTER
# ═══════════════════════════════════════════════════════════════════════════════


async def test_adapter_sends_key_and_language(tmdb_settings: Settings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=POPULAR)

    adapter = TMDBAdapter(tmdb_settings, transport=httpx.MockTransport(handler))
    await adapter.search("matrix", page=2)

    params = seen[0].url.params
    assert params["api_key"] == "test-key"
    assert params["language"] == "ko-KR"
    assert params["query"] == "matrix"
    assert params["page"] == "2"


async def test_adapter_movie_not_found(adapter: TMDBAdapter) -> None:
    with pytest.raises(MovieNotFoundError):
        await adapter.movie_details(999)


async def test_adapter_upstream_error(adapter: TMDBAdapter) -> None:
    with pytest.raises(ExternalServiceError) as exc_info:
        await adapter.movie_details(500)
    assert exc_info.value.details["status_code"] == 500
    assert exc_info.value.status_code == 503


async def test_adapter_transport_error(tmdb_settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = TMDBAdapter(tmdb_settings, transport=httpx.MockTransport(handler))

    with pytest.raises(ExternalServiceError):
        await adapter.popular()


async def test_adapter_non_json_body(tmdb_settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    adapter = TMDBAdapter(tmdb_settings, transport=httpx.MockTransport(handler))

    with pytest.raises(ExternalServiceError) as exc_info:
        await adapter.popular()
    assert exc_info.value.status_code == 503


async def test_adapter_without_key() -> None:
    adapter = TMDBAdapter(Settings(TMDB_API_KEY=""), transport=httpx.MockTransport(_routes))

    with pytest.raises(ServiceUnavailableError):
        await adapter.popular()


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_popular_maps_image_urls(adapter: TMDBAdapter, tmdb_settings: Settings) -> None:
    page = await MovieService(adapter, tmdb_settings).popular()

    assert page.total_results == 200
    matrix, unreleased = page.results
    assert matrix.poster_url == "https://image.tmdb.org/t/p/w500/matrix.jpg"
    assert matrix.release_date == "1999-03-31"
    assert unreleased.poster_url is None
    assert unreleased.release_date is None
    assert unreleased.overview == ""


async def test_movie_details(adapter: TMDBAdapter, tmdb_settings: Settings) -> None:
    movie = await MovieService(adapter, tmdb_settings).get_movie(603)

    assert movie.runtime == 136
    assert movie.tagline is None
    assert movie.backdrop_url == "https://image.tmdb.org/t/p/w500/matrix-bg.jpg"
    assert [g.name for g in movie.genres] == ["Action", "Science Fiction"]


# ═══════════════════════════════════════════════════════════════════════════════
# API
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def mocked_catalog(adapter: TMDBAdapter):
    app.dependency_overrides[get_tmdb_adapter] = lambda: adapter
    yield
    app.dependency_overrides.pop(get_tmdb_adapter, None)


async def test_popular_endpoint(client: AsyncClient, mocked_catalog: None) -> None:
    response = await client.get("/movies/popular")

    assert response.status_code == 200
    body = response.json()
    assert body["totalResults"] == 200
    assert body["results"][0]["posterUrl"] == "https://image.tmdb.org/t/p/w500/matrix.jpg"


async def test_search_endpoint_requires_query(client: AsyncClient, mocked_catalog: None) -> None:
    response = await client.get("/movies/search")

    assert response.status_code == 400


async def test_search_endpoint(client: AsyncClient, mocked_catalog: None) -> None:
    response = await client.get("/movies/search", params={"query": "matrix"})

    assert response.status_code == 200
    assert [m["id"] for m in response.json()["results"]] == [603]


async def test_movie_endpoint_not_found(client: AsyncClient, mocked_catalog: None) -> None:
    response = await client.get("/movies/999")

    assert response.status_code == 404


async def test_movie_endpoint_upstream_failure(client: AsyncClient, mocked_catalog: None) -> None:
    response = await client.get("/movies/500")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "SERVICE_UNAVAILABLE"


async def test_movies_unconfigured(client: AsyncClient) -> None:
    """The test environment has no TMDB key."""
    response = await client.get("/movies/popular")

    assert response.status_code == 503
