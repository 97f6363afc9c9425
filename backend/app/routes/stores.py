"""
Store Admin Backend — Store Route Handlers
===========================================

What:  POST /api/stores (create a store owned by the caller) and
       GET /api/stores (the caller's stores).
"""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import RequestContext, get_request_context
from app.database import get_db_session
from app.routes.entities import plain_text_response
from app.schemas.store import StoreResponse
from app.services.store_service import store_service

router = APIRouter(prefix="/api", tags=["Stores"])


@router.post(
    "/stores",
    response_model=StoreResponse,
    responses={
        401: plain_text_response("No authenticated subject"),
        422: plain_text_response("Name is required"),
        500: plain_text_response("Internal Error"),
    },
    summary="Create a store owned by the caller",
)
async def create_store(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db_session),
) -> StoreResponse:
    return await store_service.create_store(db, ctx, request.json)


@router.get(
    "/stores",
    response_model=List[StoreResponse],
    responses={401: plain_text_response("No authenticated subject"), 500: plain_text_response("Internal Error")},
    summary="List the caller's stores",
)
async def list_stores(
    ctx: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db_session),
) -> List[StoreResponse]:
    stores = await store_service.list_stores(db, ctx)
    return [StoreResponse.model_validate(store) for store in stores]
