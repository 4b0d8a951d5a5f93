"""Core Layer — pure domain logic for the Unique Learner Number, no IO.

Invariants:
    - No module in core/ imports from schemas/, infrastructure/, or config
    - checksum functions are pure and deterministic

Design Decisions:
    - Functional core (checksum) separated from the value object shell (uln)
"""
