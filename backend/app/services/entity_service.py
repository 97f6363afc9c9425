"""
Store Admin Backend — Entity Service (Ownership-Scoped CRUD Pipeline)
======================================================================

What:  The create/list request contract shared by every store resource.
How:   EntityService is parameterized by an EntityDefinition; routes hold one
       service per definition.

Create pipeline (POST /api/{storeId}/{plural}):
    ┌──────────────┐   ┌────────────┐   ┌────────────┐   ┌───────────┐   ┌─────────┐
    │ Authenticate │──▶│ Read body  │──▶│ Validate   │──▶│ Ownership │──▶│ Persist │
    │ 401          │   │ (JSON)     │   │ fields 422 │   │ 422 / 403 │   │ 200     │
    └──────────────┘   └────────────┘   └────────────┘   └───────────┘   └─────────┘

List pipeline (GET /api/{storeId}/{plural}):
    storeId present (422) → query with definition filters → rows

Error Handling Strategy:
    StoreAdminError subclasses propagate untouched (no logging as errors).
    Any other exception is rolled back, logged with the handler tag
    (e.g. "[PRODUCTS_POST]") and re-raised as InternalError (500).
    Nothing is retried.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, NoReturn, Optional

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import RequestContext
from app.exceptions import InternalError, StoreAdminError
from app.services.entities import ENTITY_DEFINITIONS, EntityDefinition, QueryParams
from app.services.ownership import authorize, require_subject
from app.services.validation import require_store_id, validate_body

logger = logging.getLogger(__name__)

BodyReader = Callable[[], Awaitable[Any]]


def as_mapping(body: Any) -> Mapping[str, Any]:
    """A JSON body that is not an object has no fields at all."""
    return body if isinstance(body, Mapping) else {}


async def fail(
    db: Optional[AsyncSession],
    tag: str,
    ctx: RequestContext,
    error: Exception,
) -> NoReturn:
    """
    Convert an unexpected exception into InternalError at a handler boundary.

    Rolls back the session, logs with the handler tag and full traceback,
    then raises InternalError chained to the original exception.
    """
    if db is not None:
        try:
            await db.rollback()
        except Exception:
            logger.warning("[%s] Rollback failed after error", tag, exc_info=True)

    logger.error(
        "[%s] %s: %s (request_id=%s)",
        tag,
        type(error).__name__,
        str(error),
        ctx.request_id,
        exc_info=error,
    )
    raise InternalError(
        context={"handler": tag, "error_type": type(error).__name__}
    ) from error


class EntityService:
    """
    Create and list operations for one store-scoped entity type.

    Stateless apart from its definition; safe to share across requests.
    """

    def __init__(self, definition: EntityDefinition):
        self.definition = definition

    @property
    def model(self):
        return self.definition.model

    def tag(self, action: str) -> str:
        return f"{self.definition.tag}_{action}"

    async def create(
        self,
        db: AsyncSession,
        ctx: RequestContext,
        store_id: Optional[str],
        read_body: BodyReader,
    ) -> BaseModel:
        """
        Run the full create pipeline and return the response for the new row.

        The response is built before the commit; if it cannot be built the
        insert is rolled back like any other unexpected failure.

        Args:
            db:        Request-scoped session
            ctx:       Identity of the caller
            store_id:  Path parameter; the only source of the row's store_id
            read_body: Coroutine factory returning the decoded JSON body

        Raises:
            UnauthenticatedError, ValidationError, ForbiddenError, InternalError
        """
        tag = self.tag("POST")
        try:
            require_subject(ctx)
            body = as_mapping(await read_body())
            validate_body(body, self.definition.checks)
            await authorize(db, ctx, store_id)

            entity = self.definition.build(body, store_id)
            db.add(entity)
            # Column defaults (id, timestamps) are assigned by the flush
            await db.flush()
            response = self.definition.response_model.model_validate(entity)
            await db.commit()
        except StoreAdminError:
            raise
        except Exception as e:
            await fail(db, tag, ctx, e)

        logger.info(
            "[%s] Created %s %s in store %s (request_id=%s)",
            tag,
            self.definition.name,
            entity.id,
            store_id,
            ctx.request_id,
        )
        return response

    async def list_for_store(
        self,
        db: AsyncSession,
        ctx: RequestContext,
        store_id: Optional[str],
        params: Optional[QueryParams] = None,
    ) -> List[Any]:
        """
        Public listing: every matching row of the store, with the
        definition's filters, ordering and eager loads applied.
        """
        tag = self.tag("GET")
        try:
            require_store_id(store_id)

            query = select(self.model).where(self.model.store_id == store_id)
            for clause in self.definition.list_where(params or {}):
                query = query.where(clause)
            if self.definition.list_options:
                query = query.options(*self.definition.list_options)
            if self.definition.list_order_by is not None:
                query = query.order_by(self.definition.list_order_by)

            result = await db.execute(query)
            return list(result.scalars().all())
        except StoreAdminError:
            raise
        except Exception as e:
            await fail(db, tag, ctx, e)

    async def dashboard_rows(
        self,
        db: AsyncSession,
        ctx: RequestContext,
        store_id: Optional[str],
    ) -> List[Any]:
        """
        Owner-only display rows: all of the store's records, newest first,
        mapped through the definition's presenter.
        """
        tag = self.tag("DASHBOARD")
        try:
            await authorize(db, ctx, store_id)

            query = (
                select(self.model)
                .where(self.model.store_id == store_id)
                .order_by(self.model.created_at.desc())
            )
            if self.definition.dashboard_options:
                query = query.options(*self.definition.dashboard_options)

            result = await db.execute(query)
            return self.definition.present(result.scalars().all())
        except StoreAdminError:
            raise
        except Exception as e:
            await fail(db, tag, ctx, e)


# ── Service Instances ─────────────────────────────────────────────────────
# One stateless service per resource, keyed by URL plural ("billboards", ...)
entity_services: Dict[str, EntityService] = {
    definition.plural: EntityService(definition) for definition in ENTITY_DEFINITIONS
}
