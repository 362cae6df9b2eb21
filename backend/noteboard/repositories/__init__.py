# Repositories package init
"""
Noteboard Backend: Repository Layer
====================================

What:  Storage interface for notes, plus its implementations.
How:   NoteService depends on NoteRepository only; the routes pick the
       concrete store through FastAPI dependencies.

Repository Inventory:
    - NoteRepository (abstract): create / list / get / update / delete
    - SqlAlchemyNoteRepository: async SQLAlchemy store (PostgreSQL, SQLite)
    - InMemoryNoteRepository: dict-backed store
"""

from noteboard.repositories.base import NoteRepository
from noteboard.repositories.memory import InMemoryNoteRepository
from noteboard.repositories.sqlalchemy_repository import SqlAlchemyNoteRepository

__all__ = ["NoteRepository", "InMemoryNoteRepository", "SqlAlchemyNoteRepository"]
