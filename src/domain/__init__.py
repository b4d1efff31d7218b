"""Domain layer - Pure business logic.

This layer contains the business entities, enums, errors and protocols
(ports). It has NO dependencies on any framework or infrastructure.

Structure:
- entities/: User and Company
- enums/: UserRole, TokenPurpose
- errors/: Credential and notification errors
- protocols/: Repository and service interfaces
"""
