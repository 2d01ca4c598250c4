"""Create-Message Pipeline - raw text -> Transform Service -> store.

Invariants:
    - The Transform Service is called before anything is written
    - Only processed_message is persisted; the raw input is discarded
    - Any upstream failure aborts the pipeline with nothing stored
"""

from typing import Protocol

from message_board.models.message import Message
from message_board.services.message_repository import MessageRepository


class TextTransformer(Protocol):
    async def process(self, raw: str) -> str: ...


async def create_processed_message(
    raw: str, transformer: TextTransformer, repository: MessageRepository,
) -> Message:
    """Run raw text through the transformer and store the result."""
    processed = await transformer.process(raw)
    return await repository.create(processed)
