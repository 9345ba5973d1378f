"""Poem Prompt & Extraction — fixed prompt contract and reply-to-text logic.

Invariants:
    - The prompt is fixed: one system instruction, one user message
    - extract_poem returns the first fragment's text, or "" when content is empty
"""

from app.schemas.model_response import ModelResponse

POEM_SYSTEM_PROMPT = "Respond only with short poems."
POEM_USER_PROMPT = (
    "Write a haiku poem about Nintendo games. Keep it under 8 lines."
)


def build_poem_messages() -> list[dict]:
    return [{"role": "user", "content": POEM_USER_PROMPT}]


def fragment_texts(response: ModelResponse) -> list[str]:
    return [fragment.text for fragment in response.content]


def extract_poem(response: ModelResponse) -> str:
    """First text fragment of the reply; empty content yields an empty poem."""
    texts = fragment_texts(response)
    return texts[0] if texts else ""
