"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond the error hierarchy
    - All external calls wrapped with timeout + error mapping

Design Decisions:
    - Thin wrappers over raw clients: SDK exceptions never reach services
"""
