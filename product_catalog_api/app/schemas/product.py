"""
Pydantic schemas for product payloads.

Products are schema-less apart from their integer ``id``: any other
key supplied by a client is stored and returned unchanged.  The models
here only document that shape for the OpenAPI schema; request bodies
are accepted as plain JSON objects.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProductRead(BaseModel):
    """A stored product: a fixed ``id`` plus arbitrary client fields."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Identifier assigned by the store")


class ErrorResponse(BaseModel):
    """Envelope returned with every 4xx/5xx response."""

    error: str
