"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - MessageId wraps the store-assigned integer key
    - All failure kinds encoded as Enums (no raw string matching)
"""

from enum import Enum
from typing import NewType


MessageId = NewType("MessageId", int)


class TransformFailure(str, Enum):
    """Why a Transform Service call did not yield processed text."""
    CONNECTION_ERROR = "connection_error"
    TIMEOUT = "timeout"
    BAD_STATUS = "bad_status"
    MALFORMED_RESPONSE = "malformed_response"
