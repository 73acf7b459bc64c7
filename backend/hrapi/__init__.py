"""
HR API Backend — Application Package Initializer
=================================================

What: Marks the `hrapi` directory as a Python package.
Who:  Used by uvicorn (`hrapi.main:app`), Alembic and pytest.

Architecture Note:
    The backend is a thin layered REST service:

    ┌─────────────────────────────────────┐
    │      Routes (controllers + routing) │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Validation (request rules)   │  ← Rejects bad input early
    ├─────────────────────────────────────┤
    │      Services (branches, employees) │  ← Merge/absence semantics
    ├─────────────────────────────────────┤
    │   Repositories (document store)     │  ← Generic collection CRUD
    ├─────────────────────────────────────┤
    │        Database (persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Each layer only talks to the one directly below it, and every layer below
    the routes can be tested without HTTP.
"""

__version__ = "1.0.0"
