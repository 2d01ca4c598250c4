"""Message Board Client - local view state plus the two gateway calls.

Invariants:
    - messages is replaced wholesale by each successful fetch (no optimistic inserts)
    - submit() with blank input makes no gateway call and changes nothing
    - Failures never raise out of fetch_messages()/submit(); they land in `error`

Design Decisions:
    - httpx.AsyncClient injected: the same board runs against a live gateway
      or an in-process ASGITransport in tests
    - error is not reset on later successes, matching the single-page original
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from message_board.schemas.message import MessageResponse

logger = logging.getLogger(__name__)

GATEWAY_MESSAGES_URL = "http://localhost:8000/messages"

FETCH_FAILED = "Failed to communicate with the server"
POST_FAILED = "Failed to post the message"

_message_list = TypeAdapter(list[MessageResponse])


class MessageBoard:
    """State and actions of the message board screen."""

    def __init__(
        self, http: httpx.AsyncClient, url: str = GATEWAY_MESSAGES_URL,
    ):
        self.http = http
        self.url = url
        self.messages: list[MessageResponse] = []
        self.new_message = ""
        self.error = ""

    async def start(self) -> None:
        """Initial load, run once when the board opens."""
        await self.fetch_messages()

    async def fetch_messages(self) -> None:
        try:
            response = await self.http.get(self.url)
            if not response.is_success:
                self._fail(FETCH_FAILED, f"HTTP {response.status_code}")
                return
            self.messages = _message_list.validate_json(response.content)
        except (httpx.HTTPError, ValidationError) as e:
            self._fail(FETCH_FAILED, str(e))

    async def submit(self) -> None:
        if not self.new_message.strip():
            return
        try:
            response = await self.http.post(
                self.url, json={"message": self.new_message},
            )
        except httpx.HTTPError as e:
            self._fail(POST_FAILED, str(e))
            return
        if not response.is_success:
            self._fail(POST_FAILED, f"HTTP {response.status_code}")
            return
        self.new_message = ""
        await self.fetch_messages()

    def _fail(self, message: str, detail: str) -> None:
        logger.warning(f"{message}: {detail}")
        self.error = message
