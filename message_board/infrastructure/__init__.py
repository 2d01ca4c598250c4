"""Infrastructure Layer - database sessions, logging and external service clients.

Invariants:
    - Infrastructure never imports route modules
    - All external calls wrapped with retry/timeout/error mapping
"""
