"""
utils/ids.py
------------
Identifier generation for new catalog records.
"""

import uuid


def new_id() -> str:
    """Return a new random UUID4 in its canonical 36-character string form."""
    return str(uuid.uuid4())
