"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy async repositories
- security/: bcrypt hashing, token generation, session tokens
- email/: Notifier adapters
- logging/: structlog adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
