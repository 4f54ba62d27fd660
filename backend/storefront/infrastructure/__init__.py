"""Infrastructure Layer — external service clients, storage adapters and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic (errors and protocols excepted)
    - All external calls wrapped with retry/timeout/error mapping
"""
