"""Pydantic Schemas — ULN field types for validation at system boundaries.

Invariants:
    - Schemas validate at system boundary (user input, API payloads)
    - Domain types from core/ are the validated representation inside models

Design Decisions:
    - Separate from core: pydantic is a boundary concern, the value object stays dependency-free
"""
