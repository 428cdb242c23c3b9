"""Tests for the catalog service."""

import uuid
from datetime import datetime, timezone

import pytest

from modules.auth.exceptions import InsufficientPermissionsError
from modules.catalog.exceptions import ItemNotFoundError
from modules.catalog.models import CatalogItemInput, CatalogQuery
from modules.catalog.service import parse_fields, wire_name
from modules.saved_list.models import SavedListAddRequest
from shared.exceptions import InvalidIdentifierError, ValidationError
from shared.models import Identity


def item_input(**overrides) -> CatalogItemInput:
    values = {
        "title": "Arrival",
        "genre": "Sci-Fi",
        "year": 2016,
        "rating": 7.9,
        "movie_link": "https://stream.example.com/arrival",
    }
    values.update(overrides)
    return CatalogItemInput(**values)


class TestFieldParsing:
    def test_wire_name(self):
        assert wire_name("movie_link") == "movieLink"
        assert wire_name("movieLink") == "movieLink"
        assert wire_name(" title ") == "title"

    def test_parse_fields(self):
        assert parse_fields("title, year,poster_url") == {"title", "year", "posterUrl"}
        assert parse_fields("") is None
        assert parse_fields(" , ") is None


class TestListItems:
    @pytest.mark.asyncio
    async def test_anonymous_never_sees_restricted_field(self, services, database):
        database.add_item(title="Alien")
        database.add_item(title="Heat")

        for fields in (None, "movieLink", "title,movieLink", "movie_link"):
            result = await services.catalog.list_items(CatalogQuery(fields=fields), None)
            assert result.count == 2
            assert all("movieLink" not in item for item in result.data)

    @pytest.mark.asyncio
    async def test_authenticated_sees_restricted_field(self, services, database, user_identity):
        database.add_item(movie_link="https://stream.example.com/x")

        result = await services.catalog.list_items(CatalogQuery(), user_identity)

        assert result.data[0]["movieLink"] == "https://stream.example.com/x"

    @pytest.mark.asyncio
    async def test_default_sort_is_title_ascending(self, services, database):
        for title in ("Heat", "Alien", "Casablanca"):
            database.add_item(title=title)

        result = await services.catalog.list_items(CatalogQuery(), None)

        assert [item["title"] for item in result.data] == ["Alien", "Casablanca", "Heat"]

    @pytest.mark.asyncio
    async def test_sort_descending_by_year(self, services, database):
        database.add_item(title="A", year=1999)
        database.add_item(title="B", year=2010)

        result = await services.catalog.list_items(CatalogQuery(sort_by="year", order="DESC"), None)

        assert [item["year"] for item in result.data] == [2010, 1999]

    @pytest.mark.asyncio
    async def test_filters_combine(self, services, database):
        database.add_item(title="The Thing", genre="Horror", year=1982)
        database.add_item(title="The Fog", genre="Horror", year=1980)
        database.add_item(title="The Thin Red Line", genre="War", year=1998)

        result = await services.catalog.list_items(
            CatalogQuery(genre="Horror", title="thin"), None
        )

        assert [item["title"] for item in result.data] == ["The Thing"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field(self, services):
        with pytest.raises(ValidationError) as exc_info:
            await services.catalog.list_items(CatalogQuery(sort_by="movieLink"), None)
        assert "sortBy" in exc_info.value.field_errors


class TestGetItem:
    @pytest.mark.asyncio
    async def test_redacted_for_anonymous(self, services, database):
        item = database.add_item()

        body = await services.catalog.get_item(item.id, None)

        assert body["id"] == item.id
        assert "movieLink" not in body

    @pytest.mark.asyncio
    async def test_not_found(self, services):
        with pytest.raises(ItemNotFoundError):
            await services.catalog.get_item(str(uuid.uuid4()), None)

    @pytest.mark.asyncio
    async def test_malformed_id(self, services):
        with pytest.raises(InvalidIdentifierError):
            await services.catalog.get_item("42", None)


class TestWrites:
    @pytest.mark.asyncio
    async def test_create(self, services, database, admin_identity):
        item = await services.catalog.create_item(item_input(director="  "), admin_identity)

        assert item.id in database.items
        assert item.director is None
        assert item.movie_link == "https://stream.example.com/arrival"

    @pytest.mark.asyncio
    async def test_create_requires_privilege(self, services, database, user_identity):
        with pytest.raises(InsufficientPermissionsError):
            await services.catalog.create_item(item_input(), user_identity)
        with pytest.raises(InsufficientPermissionsError):
            await services.catalog.create_item(item_input(), None)
        assert database.items == {}

    @pytest.mark.asyncio
    async def test_year_1500_rejected(self, services, admin_identity):
        with pytest.raises(ValidationError) as exc_info:
            await services.catalog.create_item(item_input(year=1500), admin_identity)
        assert exc_info.value.field_errors["year"].startswith("Year must be between 1800 and ")

    @pytest.mark.asyncio
    async def test_next_year_accepted(self, services, admin_identity):
        next_year = datetime.now(timezone.utc).year + 1
        item = await services.catalog.create_item(item_input(year=next_year), admin_identity)
        assert item.year == next_year

    @pytest.mark.asyncio
    async def test_update(self, services, database, admin_identity):
        item = database.add_item(title="Old title")

        updated = await services.catalog.update_item(
            item.id, item_input(title="New title"), admin_identity
        )

        assert updated.title == "New title"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_update_missing(self, services, admin_identity):
        with pytest.raises(ItemNotFoundError):
            await services.catalog.update_item(str(uuid.uuid4()), item_input(), admin_identity)

    @pytest.mark.asyncio
    async def test_delete_cascades(self, services, database, admin_identity):
        item = database.add_item()
        user = database.add_user()
        await services.saved_list.add(Identity(user_id=user.id), SavedListAddRequest(item_id=item.id))

        deleted_id = await services.catalog.delete_item(item.id, admin_identity)

        assert deleted_id == item.id
        assert database.items == {}
        assert database.saved == []

    @pytest.mark.asyncio
    async def test_delete_missing(self, services, admin_identity):
        with pytest.raises(ItemNotFoundError):
            await services.catalog.delete_item(str(uuid.uuid4()), admin_identity)
