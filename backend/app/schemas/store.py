

from pydantic import Field

from app.schemas.common import CamelModel, UtcDateTime


class StoreResponse(CamelModel):
    """Store as returned by POST/GET /api/stores."""
    id: str = Field(description="Store identifier (UUID)")
    name: str
    user_id: str = Field(description="Owning subject identifier")
    created_at: UtcDateTime
    updated_at: UtcDateTime
