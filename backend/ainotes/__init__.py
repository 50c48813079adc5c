"""
AI Notes Backend — Application Package Initializer
==================================================

What: Marks the `ainotes` directory as a Python package.
Why:  Enables module imports like `from ainotes.config import settings`.
Who:  Used by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a per-user record store for notes, AI summaries and
    summarization job logs, split into the usual layers:

    ┌─────────────────────────────────────┐
    │   Routes (one POST per procedure)   │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (ownership + CRUD)      │  ← Scoped queries, partial updates
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Every service method receives the caller identity explicitly and
    reaches rows only through an owner-scoped lookup.
"""

__version__ = "1.0.0"
