"""Random identifier generation for stored documents"""

from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 string (36 chars, hyphenated)."""
    return str(uuid4())
