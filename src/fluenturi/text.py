"""Small string predicates shared by the formatter."""

from __future__ import annotations

from typing import Optional


def is_blank(text: Optional[str]) -> bool:
    """Return True for ``None``, empty or whitespace-only strings."""
    return text is None or not text.strip()


__all__ = ["is_blank"]
