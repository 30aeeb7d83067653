"""Identifier generation for new documents"""

from uuid import uuid4


def new_id(prefix: str = "doc_") -> str:
    """Return prefix followed by a random UUID4 (e.g. 'doc_1b4e28ba-2fa1-11d2-883f-0016d3cca427')."""
    return f"{prefix}{uuid4()}"
