"""Message ORM - persists processed message text.

Invariants:
    - id is an integer primary key assigned by the store, never reassigned
    - content is non-nullable text (the Transform Service output, never the raw input)
    - created_at is set once on insert and indexed for newest-first listing
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from message_board.db.base import Base


class Message(Base):
    """A stored message."""
    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
