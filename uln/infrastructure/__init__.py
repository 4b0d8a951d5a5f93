"""Infrastructure Layer — cross-cutting concerns for applications embedding the library.

Invariants:
    - Infrastructure never changes validation behavior in core/
    - Nothing here runs on import

Design Decisions:
    - Opt-in helpers (setup_logging) over import-time configuration
"""
