"""Leaf helpers shared by the builder and the renderer."""

from __future__ import annotations

from typing import Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def escape_html(text: Any) -> str:
    """Escape HTML special characters."""
    return (
        str(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def is_valid_url(text: Any) -> bool:
    """
    Return True when ``text`` parses as an absolute URL.

    Relative references, bare hostnames and strings without a scheme are
    rejected. Never raises.
    """
    if not isinstance(text, str):
        return False
    try:
        _URL_ADAPTER.validate_python(text)
    except PydanticValidationError:
        return False
    return True
