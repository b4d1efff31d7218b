"""SQLAlchemy models.

Importing this package registers every table on BaseModel.metadata
(needed by create_all and Alembic autogenerate).
"""

from src.infrastructure.persistence.models.company import Company
from src.infrastructure.persistence.models.user import User

__all__ = ["Company", "User"]
