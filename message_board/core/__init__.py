"""Core Layer - pure domain logic (types, errors, validation).

Invariants:
    - No I/O, no framework imports: every function is deterministic
"""
