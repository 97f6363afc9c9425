"""
Store Admin Backend — Store Service
====================================

What:  Creates stores for the current subject and lists the stores it owns.
Who:   Called by routes/stores.py.

A store has no parent, so the pipeline is the entity pipeline minus the
ownership step: authenticate → read body → validate → persist.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.context import RequestContext
from app.exceptions import StoreAdminError
from app.models import Store
from app.schemas.store import StoreResponse
from app.services.entity_service import BodyReader, as_mapping, fail
from app.services.ownership import require_subject
from app.services.validation import required, validate_body

logger = logging.getLogger(__name__)

STORE_CHECKS = (required("name", "Name is required"),)


class StoreService:

    async def create_store(
        self,
        db: AsyncSession,
        ctx: RequestContext,
        read_body: BodyReader,
    ) -> StoreResponse:
        """Create a store owned by the caller; the response is built before the commit."""
        tag = "STORES_POST"
        try:
            subject_id = require_subject(ctx)
            body = as_mapping(await read_body())
            validate_body(body, STORE_CHECKS)

            store = Store(name=body["name"], user_id=subject_id)
            db.add(store)
            await db.flush()
            response = StoreResponse.model_validate(store)
            await db.commit()
        except StoreAdminError:
            raise
        except Exception as e:
            await fail(db, tag, ctx, e)

        logger.info(
            "[%s] Created store %s for subject %s (request_id=%s)",
            tag, store.id, subject_id, ctx.request_id,
        )
        return response

    async def list_stores(self, db: AsyncSession, ctx: RequestContext) -> List[Store]:
        """Stores owned by the subject, oldest first."""
        try:
            subject_id = require_subject(ctx)
            result = await db.execute(
                select(Store)
                .where(Store.user_id == subject_id)
                .order_by(Store.created_at.asc())
            )
            return list(result.scalars().all())
        except StoreAdminError:
            raise
        except Exception as e:
            await fail(db, "STORES_GET", ctx, e)


# ── Singleton Instance ────────────────────────────────────────────────────
store_service = StoreService()
