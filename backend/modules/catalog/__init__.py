"""
Catalog module.

Handles catalog search, lookup and admin CRUD, with restricted-field
redaction for anonymous viewers.

Public API:
- ICatalogService: Interface for catalog operations
- CatalogItem: A catalog record
- ItemNotFoundError
"""

from .interfaces import ICatalogService
from .models import (
    CatalogItem,
    CatalogItemInput,
    CatalogQuery,
    CatalogListResponse,
    RESTRICTED_FIELDS,
)
from .exceptions import ItemNotFoundError

__all__ = [
    # Interface
    "ICatalogService",
    # Models
    "CatalogItem",
    "CatalogItemInput",
    "CatalogQuery",
    "CatalogListResponse",
    "RESTRICTED_FIELDS",
    # Exceptions
    "ItemNotFoundError",
]
