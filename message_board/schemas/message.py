"""Message Schemas - gateway request and response bodies.

Invariants:
    - MessageCreate.message is passed through untouched (no length/content rules on input)
    - MessageResponse exposes exactly id, content, created_at
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MessageCreate(BaseModel):
    """Client submission: the raw text to process."""
    message: str


class MessageResponse(BaseModel):
    """Stored message as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    created_at: datetime
