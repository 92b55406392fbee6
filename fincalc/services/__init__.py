"""Services Layer — stores and session service orchestrating core validation and repositories.

Invariants:
    - Services depend on core Protocols, never on SQLAlchemy directly
    - Repositories injected through constructors (no global store handle)
"""
