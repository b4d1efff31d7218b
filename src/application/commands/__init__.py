"""Commands (CQRS write side)."""

from src.application.commands.company_commands import (
    CreateCompany,
    DeleteCompany,
    UpdateCompany,
)
from src.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    ReissueSetPasswordToken,
    UpdateUser,
)

__all__ = [
    "CreateCompany",
    "CreateUser",
    "DeleteCompany",
    "DeleteUser",
    "ReissueSetPasswordToken",
    "UpdateCompany",
    "UpdateUser",
]
