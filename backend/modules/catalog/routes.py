"""
Catalog API endpoints.

Reads are public; anonymous callers get items without restricted fields.
Writes are admin only.
"""

from typing import Optional, Any

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service
from api.middleware.auth import get_optional_identity, require_privileged
from api.models.errors import ADMIN_RESPONSES, NOT_FOUND_RESPONSES, VALIDATION_RESPONSES
from shared.models import Identity

from .interfaces import ICatalogService
from .models import (
    CatalogItemInput,
    CatalogItemResponse,
    CatalogListResponse,
    CatalogQuery,
    DeleteItemResponse,
)

router = APIRouter()


@router.get("", response_model=CatalogListResponse, responses=VALIDATION_RESPONSES)
async def list_items(
    genre: Optional[str] = Query(default=None, description="Exact genre"),
    year: Optional[int] = Query(default=None, description="Exact release year"),
    title: Optional[str] = Query(default=None, description="Case-insensitive title substring"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy", description="Field to sort by"),
    order: Optional[str] = Query(default=None, description="'asc' (default) or 'desc'"),
    fields: Optional[str] = Query(default=None, description="Comma-separated fields to return"),
    identity: Optional[Identity] = Depends(get_optional_identity),
    service: ICatalogService = Depends(get_catalog_service),
) -> CatalogListResponse:
    """
    Search and filter the catalog.

    Filters combine with AND. Default order is title ascending.
    """
    query = CatalogQuery(
        genre=genre,
        year=year,
        title=title,
        sort_by=sort_by,
        order=order,
        fields=fields,
    )
    return await service.list_items(query, identity)


@router.get(
    "/{item_id}",
    response_model=dict[str, Any],
    responses={**VALIDATION_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def get_item(
    item_id: str,
    identity: Optional[Identity] = Depends(get_optional_identity),
    service: ICatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """
    Get a single catalog item.
    """
    return await service.get_item(item_id, identity)


@router.post(
    "",
    response_model=CatalogItemResponse,
    status_code=201,
    responses={**ADMIN_RESPONSES, **VALIDATION_RESPONSES},
)
async def create_item(
    body: CatalogItemInput,
    identity: Identity = Depends(require_privileged),
    service: ICatalogService = Depends(get_catalog_service),
) -> CatalogItemResponse:
    """
    Add an item to the catalog. Admin only.
    """
    item = await service.create_item(body, identity)
    return CatalogItemResponse(
        message="Item created successfully",
        data=item.to_public_dict(include_restricted=True),
    )


@router.put(
    "/{item_id}",
    response_model=CatalogItemResponse,
    responses={**ADMIN_RESPONSES, **VALIDATION_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def update_item(
    item_id: str,
    body: CatalogItemInput,
    identity: Identity = Depends(require_privileged),
    service: ICatalogService = Depends(get_catalog_service),
) -> CatalogItemResponse:
    """
    Replace an item's fields. Admin only.
    """
    item = await service.update_item(item_id, body, identity)
    return CatalogItemResponse(
        message="Item updated successfully",
        data=item.to_public_dict(include_restricted=True),
    )


@router.delete(
    "/{item_id}",
    response_model=DeleteItemResponse,
    responses={**ADMIN_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def delete_item(
    item_id: str,
    identity: Identity = Depends(require_privileged),
    service: ICatalogService = Depends(get_catalog_service),
) -> DeleteItemResponse:
    """
    Delete an item. Its ratings and saved-list entries go with it. Admin only.
    """
    deleted_id = await service.delete_item(item_id, identity)
    return DeleteItemResponse(message="Item deleted successfully", deleted_id=deleted_id)
