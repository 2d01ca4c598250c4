"""Create-Message Pipeline - transform first, persist processed text only.

Tests:
    - Stored content equals the transformer output, never the raw input
    - Transformer failure leaves the store untouched
    - Invalid processed text is rejected after the transformer ran
"""

import pytest

from message_board.core.domain_types import TransformFailure
from message_board.core.errors import MessageValidationError, TransformServiceError
from message_board.services.create_message import create_processed_message
from message_board.services.message_repository import MessageRepository


class _Transformer:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def process(self, raw: str) -> str:
        self.calls.append(raw)
        if self.error:
            raise self.error
        return self.result if self.result is not None else raw.upper()


async def test_stores_processed_text(test_db):
    repo = MessageRepository(test_db)
    transformer = _Transformer()
    message = await create_processed_message("hello", transformer, repo)
    assert message.content == "HELLO"
    assert transformer.calls == ["hello"]
    assert [m.content for m in await repo.list()] == ["HELLO"]


async def test_raw_input_never_stored(test_db):
    repo = MessageRepository(test_db)
    await create_processed_message("raw text", _Transformer(result="processed"), repo)
    assert [m.content for m in await repo.list()] == ["processed"]


async def test_transform_failure_persists_nothing(test_db):
    repo = MessageRepository(test_db)
    failing = _Transformer(error=TransformServiceError(
        "HTTP 500", TransformFailure.BAD_STATUS,
    ))
    with pytest.raises(TransformServiceError):
        await create_processed_message("hello", failing, repo)
    assert list(await repo.list()) == []


async def test_blank_processed_text_rejected(test_db):
    repo = MessageRepository(test_db)
    transformer = _Transformer(result="  ")
    with pytest.raises(MessageValidationError):
        await create_processed_message("hello", transformer, repo)
    assert transformer.calls == ["hello"]
    assert list(await repo.list()) == []
