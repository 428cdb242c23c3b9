"""
Catalog module data models.

CatalogItem is the stored record. Responses are built from it with
to_public_dict(), which applies field projection and restricted-field
redaction.
"""

from datetime import datetime
from typing import Optional, Any
from pydantic import Field

from shared.models import ApiModel


# Wire names of fields only visible to viewers with a valid session
RESTRICTED_FIELDS = frozenset({"movieLink"})

# Wire name -> column
SORTABLE_FIELDS = {
    "title": "title",
    "genre": "genre",
    "year": "year",
    "rating": "rating",
    "director": "director",
    "createdAt": "created_at",
}
DEFAULT_SORT_FIELD = "title"


class CatalogItem(ApiModel):
    """A movie in the catalog."""

    id: str = Field(..., description="Item ID (UUID)")
    title: str
    genre: str
    year: int
    rating: Optional[float] = Field(None, description="Curator rating, 0-10")
    director: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    movie_link: Optional[str] = Field(None, description="Restricted to signed-in viewers")
    created_at: datetime
    updated_at: Optional[datetime] = None

    def to_public_dict(
        self,
        include_restricted: bool,
        fields: Optional[set[str]] = None,
    ) -> dict[str, Any]:
        """
        Serialize for a response.

        Args:
            include_restricted: False strips RESTRICTED_FIELDS whatever the projection says
            fields: Wire field names to keep; id is always kept. None keeps everything.
        """
        body = self.model_dump(mode="json", by_alias=True)
        if fields:
            body = {key: value for key, value in body.items() if key in fields or key == "id"}
        if not include_restricted:
            for key in RESTRICTED_FIELDS:
                body.pop(key, None)
        return body


class CatalogItemInput(ApiModel):
    """
    Create/update payload.

    Numeric fields are untyped here so that shared.validation reports them
    with the same field messages whatever the client sent.
    """

    title: Optional[str] = None
    genre: Optional[str] = None
    year: Any = None
    rating: Any = None
    director: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    movie_link: Optional[str] = None


class CatalogQuery(ApiModel):
    """Listing filters, sort and projection."""

    genre: Optional[str] = None
    year: Optional[int] = None
    title: Optional[str] = None
    sort_by: Optional[str] = None
    order: Optional[str] = None
    fields: Optional[str] = None


class CatalogListResponse(ApiModel):
    count: int
    data: list[dict[str, Any]]


class CatalogItemResponse(ApiModel):
    message: str
    data: dict[str, Any]


class DeleteItemResponse(ApiModel):
    message: str
    deleted_id: str
