"""Unit tests for the mock data service query logic."""
import pytest

from app.handlers import PlacesDataHandler, UnknownCollectionError
from app.handlers.places_data_handler import as_query_value, foreign_key
from app.seed import denormalize


@pytest.fixture
def data_handler(nested_places):
    """Create PlacesDataHandler over the bundled sample data."""
    return PlacesDataHandler(denormalize(nested_places))


class TestQueryValues:
    def test_booleans_compare_as_lowercase(self):
        assert as_query_value(True) == "true"
        assert as_query_value(False) == "false"
        assert as_query_value(3) == "3"
        assert as_query_value(None) == "null"

    def test_foreign_key(self):
        assert foreign_key("places") == "placeId"


class TestPlacesDataHandler:
    def test_list_all(self, data_handler):
        assert [p["slug"] for p in data_handler.list_records("places")] == [
            "cristo-redentor",
            "cataratas-do-iguacu",
            "pelourinho",
        ]

    def test_filter_highlight(self, data_handler):
        records = data_handler.list_records("places", [("highlight", "true")])
        assert {p["slug"] for p in records} == {"cristo-redentor", "cataratas-do-iguacu"}

    def test_filter_name_is_exact(self, data_handler):
        assert len(data_handler.list_records("places", [("name", "Pelourinho")])) == 1
        assert data_handler.list_records("places", [("name", "Pelour")]) == []

    def test_repeated_filter_matches_any_value(self, data_handler):
        records = data_handler.list_records("places", [("id", "1"), ("id", "3")])
        assert [p["id"] for p in records] == [1, 3]

    def test_unknown_field_matches_nothing(self, data_handler):
        assert data_handler.list_records("places", [("color", "blue")]) == []

    def test_slug_with_embeds(self, data_handler):
        records = data_handler.list_records(
            "places",
            [("slug", "cataratas-do-iguacu"), ("_embed", "reviews"), ("_embed", "images")],
        )

        assert len(records) == 1
        place = records[0]
        assert len(place["reviews"]) == 3
        assert len(place["images"]) == 1
        assert all(review["placeId"] == place["id"] for review in place["reviews"])

    def test_embed_does_not_modify_seed(self, data_handler):
        data_handler.list_records("places", [("_embed", "reviews")])
        assert "reviews" not in data_handler.seed.places[0]

    def test_unknown_embed_is_ignored(self, data_handler):
        records = data_handler.list_records("places", [("slug", "pelourinho"), ("_embed", "users")])
        assert "users" not in records[0]

    def test_other_underscore_params_are_not_filters(self, data_handler):
        assert len(data_handler.list_records("places", [("_sort", "name")])) == 3

    def test_child_collection_filter(self, data_handler):
        reviews = data_handler.list_records("reviews", [("placeId", "2")])
        assert len(reviews) == 3

    def test_unknown_collection(self, data_handler):
        with pytest.raises(UnknownCollectionError):
            data_handler.list_records("users")

    def test_get_record(self, data_handler):
        record = data_handler.get_record("places", "1", ["images"])

        assert record["slug"] == "cristo-redentor"
        assert len(record["images"]) == 2
        assert data_handler.get_record("places", "99") is None

    def test_from_file(self, tmp_path, nested_places):
        from app.seed import write_seed_file

        path = write_seed_file(denormalize(nested_places), tmp_path / "db.json")
        handler = PlacesDataHandler.from_file(path)

        assert len(handler.seed.reviews) == 5
