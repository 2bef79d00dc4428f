"""SQLAlchemy models for the bakery manager."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models to register them with Base.metadata
from .document import Document

__all__ = [
    "Base",
    "Document",
]
