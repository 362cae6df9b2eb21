"""
Noteboard: Application Package Initializer
===========================================

What: Marks the `noteboard` directory as a Python package.
Who:  Imported by uvicorn (`noteboard.main:app`), Alembic, pytest and the client.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Required-field rules, logging
    ├─────────────────────────────────────┤
    │    Repositories (Store Interface)   │  ← create / list / get / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The `noteboard.client` subpackage is the other half of the system: an
    HTTP client, a reducer over board state, and a controller that turns user
    gestures into calls against the routes above.
"""

__version__ = "1.0.0"
