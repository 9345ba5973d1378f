"""Model Response Schema — expected shape of an Anthropic Messages API reply.

Invariants:
    - content is an ordered list of {type, text} fragments (may be empty)
    - stop_sequence, stop_reason and the cache counters may be null

Design Decisions:
    - Local schema over trusting the SDK types: the reply is checked at the
      boundary even when the SDK deserialized it already
"""

from pydantic import BaseModel


class ContentFragment(BaseModel):
    type: str
    text: str


class ModelUsage(BaseModel):
    input_tokens: int
    output_tokens: int
    cache_creation_input_tokens: int | None = None
    cache_read_input_tokens: int | None = None


class ModelResponse(BaseModel):
    """One completed (non-streamed) Messages API response."""
    id: str
    type: str
    role: str
    model: str
    content: list[ContentFragment]
    stop_reason: str | None
    stop_sequence: str | None = None
    usage: ModelUsage
