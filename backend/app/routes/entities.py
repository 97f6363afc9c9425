"""
Store Admin Backend — Store Resource Route Handlers
=====================================================

What:  POST and GET /api/{storeId}/{plural} for billboards, categories,
       sizes, colors and products.
How:   build_entity_router() turns one EntityService into an APIRouter;
       routers are built for every definition at import time.

Responses:
    200  created entity / array of entities (JSON, camelCase keys)
    401  "Unauthorized"               (POST without a valid bearer token)
    422  "<Field> is required"        (first missing field, then storeId)
    403  "Unauthorized"               (POST to a store the caller does not own)
    500  "Internal Error"

Error bodies are plain text; see the exception handlers in main.py.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import RequestContext, get_request_context
from app.database import get_db_session
from app.services.entity_service import EntityService, entity_services

logger = logging.getLogger(__name__)


def plain_text_response(description: str) -> Dict[str, Any]:
    return {"description": description, "content": {"text/plain": {}}}


CREATE_RESPONSES = {
    401: plain_text_response("No authenticated subject"),
    403: plain_text_response("Store is not owned by the caller"),
    422: plain_text_response("A required field (or the store id) is missing"),
    500: plain_text_response("Internal Error"),
}

LIST_RESPONSES = {
    422: plain_text_response("Store id is missing"),
    500: plain_text_response("Internal Error"),
}


def build_entity_router(service: EntityService) -> APIRouter:
    definition = service.definition
    router = APIRouter(prefix="/api", tags=[definition.plural.capitalize()])
    path = f"/{{store_id}}/{definition.plural}"

    @router.post(
        path,
        response_model=definition.response_model,
        responses=CREATE_RESPONSES,
        summary=f"Create a {definition.name} in a store owned by the caller",
        name=f"create_{definition.name}",
    )
    async def create_entity(
        store_id: str,
        request: Request,
        ctx: RequestContext = Depends(get_request_context),
        db: AsyncSession = Depends(get_db_session),
    ):
        # The body is read inside the pipeline, after the identity check
        return await service.create(db, ctx, store_id, request.json)

    @router.get(
        path,
        response_model=List[definition.item_model],
        responses=LIST_RESPONSES,
        summary=f"List the {definition.plural} of a store",
        description=(
            f"Public listing. Supported filters: {', '.join(definition.list_params)}."
            if definition.list_params
            else "Public listing. No filters."
        ),
        name=f"list_{definition.plural}",
    )
    async def list_entities(
        store_id: str,
        request: Request,
        ctx: RequestContext = Depends(get_request_context),
        db: AsyncSession = Depends(get_db_session),
    ):
        params = {name: request.query_params.get(name) for name in definition.list_params}
        rows = await service.list_for_store(db, ctx, store_id, params)
        return [definition.item_model.model_validate(row) for row in rows]

    return router


routers: List[APIRouter] = [build_entity_router(service) for service in entity_services.values()]
