"""Infrastructure Layer — storage, bearer-token auth, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports route modules
    - Driver and token-library exceptions mapped to PairworkError subclasses here

Design Decisions:
    - Thin adapters over SQLAlchemy and python-jose behind core protocols
"""
