"""Pagination models."""

from pydantic import BaseModel, Field, StrictBool, StrictInt


class PaginationInfo(BaseModel):
    """Pagination metadata for list responses."""

    limit: StrictInt = Field(..., description="Maximum number of items requested")
    offset: StrictInt = Field(..., description="Current offset in the result set")
    has_more: StrictBool = Field(..., description="Whether more items are available after this page")
    next_offset: StrictInt | None = Field(
        None,
        description="Offset to use for the next page, if available",
    )


class BulkFetchInfo(BaseModel):
    """How the underlying bulk read was bounded."""

    batch_size: StrictInt = Field(..., description="Page size used per store round trip")
    max_rows: StrictInt = Field(..., description="Cap on incidents loaded from the store")
    loaded_count: StrictInt = Field(..., description="Incidents actually loaded")
    capped: StrictBool = Field(
        ...,
        description="Whether the load stopped because max_rows was reached",
    )
