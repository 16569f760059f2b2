"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary (types, formats, lengths)
    - Business rules (salary floor, tiers, credit range) stay in core/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
