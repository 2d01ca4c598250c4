"""ORM Models - SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from message_board.models.message import Message  # noqa: F401
