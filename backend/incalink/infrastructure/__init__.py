"""Infrastructure Layer - database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from the api layer
    - All SQLAlchemy failures are mapped to core error types
"""
