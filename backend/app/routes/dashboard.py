"""
Store Admin Backend — Dashboard Listing Routes
===============================================

What:  GET /dashboard/{storeId}/{plural} returns display-ready table rows
       for the store owner (dates and prices already formatted).
Who:   The admin dashboard pages; one call per table.

Unlike the public /api listings these require the caller to own the store
and include every record (archived products too), newest first.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import RequestContext, get_request_context
from app.database import get_db_session
from app.routes.entities import plain_text_response
from app.services.entity_service import EntityService, entity_services

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def _register(service: EntityService) -> None:
    definition = service.definition

    @router.get(
        f"/{{store_id}}/{definition.plural}",
        response_model=List[definition.row_model],
        responses={
            401: plain_text_response("No authenticated subject"),
            403: plain_text_response("Store is not owned by the caller"),
            500: plain_text_response("Internal Error"),
        },
        summary=f"Dashboard table rows for {definition.plural}",
        name=f"dashboard_{definition.plural}",
    )
    async def dashboard_rows(
        store_id: str,
        ctx: RequestContext = Depends(get_request_context),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.dashboard_rows(db, ctx, store_id)


for _service in entity_services.values():
    _register(_service)
