"""Application layer: commands, queries, handlers and the credential lifecycle.

Depends on the domain layer only; infrastructure is injected through
protocols by the container.
"""
