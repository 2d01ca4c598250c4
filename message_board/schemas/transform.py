"""Transform Service wire contract."""

from pydantic import BaseModel, StrictStr


class TransformRequest(BaseModel):
    message: str


class TransformResponse(BaseModel):
    # StrictStr: a number or null here is a malformed response, not text to coerce
    processed_message: StrictStr
