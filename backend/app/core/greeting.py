"""Greetings — text built from the configured name."""

FRIEND_SEPARATOR = "🫶"


def full_name(first_name: str, last_name: str) -> str:
    return f"{first_name} {last_name}"


def friend_greeting(first_name: str, last_name: str, friend_name: str) -> str:
    """E.g. 'Ada Lovelace 🫶 Friend'."""
    return f"{full_name(first_name, last_name)} {FRIEND_SEPARATOR} {friend_name}"
