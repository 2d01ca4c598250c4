"""Service Layer - message store access and the create-message pipeline.

Invariants:
    - Routes never touch the ORM directly; they go through MessageRepository
"""
