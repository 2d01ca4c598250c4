"""Message Routes - list, create and show messages.

Invariants:
    - Collaborators (DB session, transform client) arrive as explicit dependencies
    - POST persists the Transform Service output only, and only after it succeeded
    - Errors are raised as MessageBoardError subclasses; global handlers render them

Design Decisions:
    - Location header on 201 points at GET /messages/{id}
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from message_board.core.domain_types import MessageId
from message_board.infrastructure.database import get_db
from message_board.infrastructure.transform_client import (
    ResilientTransformClient, get_transform_client,
)
from message_board.schemas.message import MessageCreate, MessageResponse
from message_board.services.create_message import create_processed_message
from message_board.services.message_repository import MessageRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=list[MessageResponse])
async def list_messages(db: AsyncSession = Depends(get_db)):
    """All messages, newest first."""
    return await MessageRepository(db).list()


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_message(
    body: MessageCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    transformer: ResilientTransformClient = Depends(get_transform_client),
):
    """Process the submitted text and store the result."""
    message = await create_processed_message(
        body.message, transformer, MessageRepository(db),
    )
    response.headers["Location"] = f"{router.prefix}/{message.id}"
    return message


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: int, db: AsyncSession = Depends(get_db)):
    return await MessageRepository(db).get(MessageId(message_id))
