"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate transport types at the system boundary
    - Domain rules (non-empty, finite, >= 0) stay in core/ so every caller gets them

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
