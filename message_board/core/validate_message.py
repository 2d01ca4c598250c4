"""Message Validation - pure checks applied before a message is persisted.

Invariants:
    - Returns a list of field errors; empty list means the content is storable
    - Never raises: the repository decides how to surface the errors
    - No length cap: content is a Text column and any processed string is stored
"""


def validate_content(content: object) -> list[dict[str, str]]:
    """Check processed content against the store's column rules."""
    if content is None:
        return [_error("can't be blank", "missing")]
    if not isinstance(content, str):
        return [_error("must be text", "string_type")]
    if not content.strip():
        return [_error("can't be blank", "blank")]
    return []


def _error(message: str, error_type: str) -> dict[str, str]:
    return {"field": "content", "message": message, "type": error_type}
