"""Persistence adapters (SQLAlchemy async).

Exports:
    BaseModel: Declarative base shared by all models
    Database: Engine and session management
"""

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel
from src.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
