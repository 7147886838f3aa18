"""Unit tests for the places data service client."""
import pytest
from unittest.mock import AsyncMock, Mock, patch
import httpx

from app.api import PlacesRepository, PlacesRepositoryError
from app.models import Place, PlaceDetail

from tests.conftest import make_place_payload


@pytest.fixture
def repository():
    """Create places repository for testing."""
    repo = PlacesRepository(base_url="http://localhost:3000/")
    yield repo


def ok_response(data):
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = data
    return mock_response


def error_response(status_code: int):
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
        f"HTTP {status_code}", request=Mock(), response=mock_response
    )
    return mock_response


class TestPlacesRepository:
    """Unit tests for PlacesRepository."""

    def test_base_url_trailing_slash_is_dropped(self, repository):
        assert repository.base_url == "http://localhost:3000"
        assert repository.timeout is None

    @pytest.mark.asyncio
    async def test_get_all_places(self, repository):
        data = [make_place_payload(), make_place_payload(id=2, slug="pelourinho")]

        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response(data)

            places = await repository.get_all_places()

            assert len(places) == 2
            assert all(isinstance(place, Place) for place in places)
            assert places[1].slug == "pelourinho"

            call_args = mock_request.call_args
            assert call_args.kwargs["method"] == "GET"
            assert call_args.kwargs["url"] == "http://localhost:3000/places"
            assert call_args.kwargs["params"] is None

    @pytest.mark.asyncio
    async def test_get_highlighted_places_filters_on_flag(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response([make_place_payload()])

            places = await repository.get_highlighted_places()

            assert places[0].highlight is True
            assert mock_request.call_args.kwargs["params"] == {"highlight": "true"}

    @pytest.mark.asyncio
    async def test_get_places_by_name_passes_filter(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response([make_place_payload()])

            places = await repository.get_places_by_name("Cristo Redentor")

            assert places[0].name == "Cristo Redentor"
            assert mock_request.call_args.kwargs["params"] == {"name": "Cristo Redentor"}

    @pytest.mark.asyncio
    async def test_get_place_by_slug_embeds_reviews_and_images(self, repository):
        payload = make_place_payload(
            reviews=[{"reviewer": "Ana", "review": "Lindo", "rating": 5, "placeId": 1}],
            images=[{"src": "a.jpg", "description": "Vista", "placeId": 1}],
        )

        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response([payload])

            place = await repository.get_place_by_slug("cristo-redentor")

            assert isinstance(place, PlaceDetail)
            assert place.slug == "cristo-redentor"
            assert place.reviews[0].reviewer == "Ana"
            assert place.images[0].description == "Vista"

            assert mock_request.call_args.kwargs["params"] == [
                ("slug", "cristo-redentor"),
                ("_embed", "reviews"),
                ("_embed", "images"),
            ]

    @pytest.mark.asyncio
    async def test_get_place_by_slug_returns_first_match(self, repository):
        data = [make_place_payload(id=1), make_place_payload(id=2)]

        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response(data)

            place = await repository.get_place_by_slug("cristo-redentor")

            assert place.id == 1

    @pytest.mark.asyncio
    async def test_get_place_by_slug_not_found_returns_none(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response([])

            assert await repository.get_place_by_slug("atlantis") is None

    @pytest.mark.asyncio
    async def test_http_error_carries_status_and_key(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = error_response(503)

            with pytest.raises(PlacesRepositoryError) as exc_info:
                await repository.get_place_by_slug("cristo-redentor")

            error = exc_info.value
            assert error.status_code == 503
            assert error.operation == "get_place_by_slug"
            assert error.key == "cristo-redentor"
            assert isinstance(error.__cause__, httpx.HTTPStatusError)
            assert "503" in str(error)

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(PlacesRepositoryError) as exc_info:
                await repository.get_all_places()

            assert exc_info.value.status_code is None
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_wrapped(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ReadTimeout("timed out")

            with pytest.raises(PlacesRepositoryError) as exc_info:
                await repository.get_highlighted_places()

            assert isinstance(exc_info.value.__cause__, httpx.TimeoutException)

    @pytest.mark.asyncio
    async def test_single_attempt_no_retry(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(PlacesRepositoryError):
                await repository.get_all_places()

            assert mock_request.call_count == 1

    @pytest.mark.asyncio
    async def test_non_array_body_is_rejected(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response({"error": "oops"})

            with pytest.raises(PlacesRepositoryError):
                await repository.get_all_places()

    @pytest.mark.asyncio
    async def test_malformed_record_is_rejected(self, repository):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ok_response([{"id": 1}])

            with pytest.raises(PlacesRepositoryError) as exc_info:
                await repository.get_places_by_name("x")

            assert exc_info.value.key == "x"

    @pytest.mark.asyncio
    async def test_failure_is_logged_with_operation_and_key(self, repository, caplog):
        with patch.object(repository.client, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = error_response(404)

            with pytest.raises(PlacesRepositoryError):
                await repository.get_places_by_name("Pelourinho")

        assert "get_places_by_name" in caplog.text
        assert "Pelourinho" in caplog.text

    @pytest.mark.asyncio
    async def test_close(self, repository):
        with patch.object(repository.client, "aclose", new_callable=AsyncMock) as mock_close:
            await repository.close()
            mock_close.assert_awaited_once()
