"""
Catalog service implementation.

Anonymous viewers never see restricted fields. Writes are privileged-only
and validated by shared.validation before they reach the store.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Any

from pydantic.alias_generators import to_camel

from modules.auth.policy import ensure_privileged, is_authenticated
from shared.exceptions import ValidationError
from shared.models import Identity
from shared.validation import parse_identifier, raise_for_field_errors, validate_catalog_fields

from .exceptions import ItemNotFoundError
from .interfaces import ICatalogService
from .models import (
    DEFAULT_SORT_FIELD,
    SORTABLE_FIELDS,
    CatalogItem,
    CatalogItemInput,
    CatalogListResponse,
    CatalogQuery,
)
from .repository import CatalogRepository

logger = logging.getLogger(__name__)


def wire_name(name: str) -> str:
    """Accept snake_case or camelCase field names; return the wire spelling."""
    name = name.strip()
    return to_camel(name) if "_" in name else name


def parse_fields(raw: Optional[str]) -> Optional[set[str]]:
    """Parse a comma-separated projection. Empty input means no projection."""
    if not raw:
        return None
    fields = {wire_name(part) for part in raw.split(",") if part.strip()}
    return fields or None


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CatalogService(ICatalogService):
    """Catalog facade over CatalogRepository."""

    def __init__(self, repository: CatalogRepository):
        self._repository = repository

    async def list_items(
        self,
        query: CatalogQuery,
        identity: Optional[Identity],
    ) -> CatalogListResponse:
        sort_field = wire_name(query.sort_by) if query.sort_by else DEFAULT_SORT_FIELD
        if sort_field not in SORTABLE_FIELDS:
            raise ValidationError(
                field_errors={"sortBy": f"Cannot sort by '{query.sort_by}'"},
            )
        descending = (query.order or "").lower() == "desc"

        items = self._repository.list_items(
            genre=query.genre,
            year=query.year,
            title=query.title,
            sort_column=SORTABLE_FIELDS[sort_field],
            descending=descending,
        )

        fields = parse_fields(query.fields)
        include_restricted = is_authenticated(identity)
        data = [item.to_public_dict(include_restricted, fields) for item in items]
        return CatalogListResponse(count=len(data), data=data)

    async def get_item(self, item_id: str, identity: Optional[Identity]) -> dict[str, Any]:
        item_id = parse_identifier(item_id)
        item = self._repository.get_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item.to_public_dict(is_authenticated(identity))

    async def create_item(
        self,
        payload: CatalogItemInput,
        identity: Optional[Identity],
    ) -> CatalogItem:
        identity = ensure_privileged(identity)
        data = self._validated_fields(payload)
        item = self._repository.create(data)
        logger.info("Catalog item %s created by %s", item.id, identity.user_id)
        return item

    async def update_item(
        self,
        item_id: str,
        payload: CatalogItemInput,
        identity: Optional[Identity],
    ) -> CatalogItem:
        identity = ensure_privileged(identity)
        item_id = parse_identifier(item_id)
        data = self._validated_fields(payload)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        item = self._repository.update(item_id, data)
        if item is None:
            raise ItemNotFoundError(item_id)
        logger.info("Catalog item %s updated by %s", item_id, identity.user_id)
        return item

    async def delete_item(self, item_id: str, identity: Optional[Identity]) -> str:
        identity = ensure_privileged(identity)
        item_id = parse_identifier(item_id)
        if not self._repository.delete(item_id):
            raise ItemNotFoundError(item_id)
        logger.info("Catalog item %s deleted by %s", item_id, identity.user_id)
        return item_id

    async def item_exists(self, item_id: str) -> bool:
        return self._repository.get_by_id(item_id) is not None

    async def get_items(self, item_ids: list[str]) -> list[CatalogItem]:
        return self._repository.get_many(item_ids)

    def _validated_fields(self, payload: CatalogItemInput) -> dict[str, Any]:
        raise_for_field_errors(
            validate_catalog_fields(payload.title, payload.genre, payload.year, payload.rating)
        )
        return {
            "title": payload.title.strip(),
            "genre": payload.genre.strip(),
            "year": payload.year,
            "rating": payload.rating,
            "director": _optional_text(payload.director),
            "description": _optional_text(payload.description),
            "poster_url": _optional_text(payload.poster_url),
            "trailer_url": _optional_text(payload.trailer_url),
            "movie_link": _optional_text(payload.movie_link),
        }
