"""Message Repository - explicit store interface over the messages table.

Invariants:
    - list() is newest first: created_at desc, id desc on ties
    - create() validates before writing; invalid content raises MessageValidationError
      and leaves the table untouched
    - get() raises ResourceNotFoundError for unknown ids

Design Decisions:
    - Repository instead of model-level validation hooks: callers see one method per
      operation and explicit errors
    - Session injected per request (no ambient current-record lookup)
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from message_board.core.domain_types import MessageId
from message_board.core.errors import (
    ErrorContext, MessageValidationError, ResourceNotFoundError,
)
from message_board.core.validate_message import validate_content
from message_board.models.message import Message

logger = logging.getLogger(__name__)


class MessageRepository:
    """Reads and writes Message rows through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> Sequence[Message]:
        result = await self.db.execute(
            select(Message).order_by(
                Message.created_at.desc(), Message.id.desc(),
            ),
        )
        return result.scalars().all()

    async def get(self, message_id: MessageId) -> Message:
        message = await self.db.get(Message, message_id)
        if message is None:
            raise ResourceNotFoundError(
                "Message", str(message_id),
                ErrorContext(message_id=message_id),
            )
        return message

    async def create(self, content: str) -> Message:
        errors = validate_content(content)
        if errors:
            raise MessageValidationError(errors)
        message = Message(content=content)
        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)
        logger.info("Message stored", extra={"message_id": message.id})
        return message
