"""Plain data holder for the parts of a URI under construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .query import QueryCollection


@dataclass
class UriModel:
    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    path_segments: List[str] = field(default_factory=list)  # stored without surrounding '/'
    query: QueryCollection = field(default_factory=QueryCollection)
    username: Optional[str] = None
    password: Optional[str] = None
    fragment: Optional[str] = None  # without the leading '#'


__all__ = ["UriModel"]
