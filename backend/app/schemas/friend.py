"""Friend Schema — the optional POST /me body.

Invariants:
    - friendName absent → "Friend"
    - friendName present → non-empty string, returned unchanged (no strip)
    - friendName: null is a type violation, not a request for the default
"""

from pydantic import BaseModel, Field

DEFAULT_FRIEND_NAME = "Friend"


class FriendRequest(BaseModel):
    """POST /me body — who the greeting is addressed to."""

    friend_name: str = Field(
        DEFAULT_FRIEND_NAME, alias="friendName", min_length=1,
    )
