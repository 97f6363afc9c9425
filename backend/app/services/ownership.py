"""
Store Admin Backend — Ownership Guard
======================================

What:  Binds the requesting subject to a Store before any mutation.
How:   One query: SELECT store WHERE id = :store_id AND user_id = :subject.

Outcomes:
    no subject         → UnauthenticatedError (401)
    empty store id     → ValidationError "Store ID is required" (422)
    no matching store  → ForbiddenError (403)
    match              → the Store row

The create pipeline calls require_subject() first and authorize() only after
the body fields passed validation, so the two 401 checks never disagree.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import RequestContext
from app.exceptions import ForbiddenError, UnauthenticatedError
from app.models import Store
from app.services.validation import require_store_id

logger = logging.getLogger(__name__)


def require_subject(ctx: RequestContext) -> str:
    if not ctx.is_authenticated:
        raise UnauthenticatedError()
    return ctx.subject_id


async def find_owned_store(
    db: AsyncSession, store_id: str, subject_id: str
) -> Optional[Store]:
    result = await db.execute(
        select(Store).where(Store.id == store_id, Store.user_id == subject_id)
    )
    return result.scalars().first()


async def authorize(db: AsyncSession, ctx: RequestContext, store_id: Optional[str]) -> Store:
    """
    Return the Store identified by `store_id` if the subject owns it.

    Raises:
        UnauthenticatedError: ctx has no subject
        ValidationError:      store_id is missing or empty
        ForbiddenError:       the store does not exist or belongs to someone else
    """
    subject_id = require_subject(ctx)
    require_store_id(store_id)

    store = await find_owned_store(db, store_id, subject_id)
    if store is None:
        # Not logged as an error: an expected client mistake
        logger.info("[%s] Store %s not owned by subject %s", ctx.request_id, store_id, subject_id)
        raise ForbiddenError(context={"store_id": store_id})
    return store
