"""
Store Admin Backend — Application Package Initializer
=====================================================

What: Marks the `app` directory as a Python package.
Who:  Imported by uvicorn (`app.main:app`), pytest and every internal module.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, path/query params
    ├─────────────────────────────────────┤
    │   Services (Validate / Guard / CRUD)│  ← ownership-scoped request contract
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes build a RequestContext and hand it to services; services raise
    typed StoreAdminError subclasses; main.py turns those into responses.
"""

__version__ = "1.0.0"
