"""Pydantic Schemas - request/response validation for API endpoints and upstream calls.

Design Decisions:
    - Separate from models: schemas are wire contracts, models are persistence
"""
