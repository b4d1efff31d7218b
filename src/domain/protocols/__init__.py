"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; none inherit from them.
"""

from src.domain.protocols.company_repository import CompanyRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notifier_protocol import NotifierProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.session_token_issuer_protocol import (
    SessionTokenIssuerProtocol,
)
from src.domain.protocols.token_generator_protocol import TokenGeneratorProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "CompanyRepository",
    "LoggerProtocol",
    "NotifierProtocol",
    "PasswordHashingProtocol",
    "SessionTokenIssuerProtocol",
    "TokenGeneratorProtocol",
    "UserRepository",
]
