"""Render a :class:`UriModel` to its canonical string form."""

from __future__ import annotations

from typing import List, Optional

from .model import UriModel
from .options import UriOptions
from .text import is_blank

DEFAULT_RENDER_PORT = 80


def format_uri(model: UriModel, options: Optional[UriOptions] = None) -> str:
    """Render ``model`` as ``scheme://[user[:password]@]host[:port]/path/?query#fragment``.

    Nothing is validated: a missing scheme still yields ``://`` and a
    missing host is simply left out. Port 80 is never rendered, whatever
    the scheme.
    """
    opts = options or UriOptions()
    parts: List[str] = [f"{model.scheme or ''}://"]
    has_credentials = False
    has_authority = False

    if not is_blank(model.username):
        parts.append(model.username)
        has_credentials = True

    if not is_blank(model.password):
        parts.append(f":{model.password}")
        has_credentials = True

    if has_credentials:
        parts.append("@")
        has_authority = True

    if not is_blank(model.host):
        parts.append(model.host)
        has_authority = True

    if model.port is not None and model.port != DEFAULT_RENDER_PORT:
        parts.append(f":{model.port}")
        has_authority = True

    if model.path_segments:
        if has_authority:
            parts.append("/")
        parts.append("/".join(model.path_segments))

    if opts.always_slash_terminate_path:
        parts.append("/")

    if model.query.has_items:
        parts.append(f"?{model.query.render()}")

    if not is_blank(model.fragment):
        parts.append(f"#{model.fragment}")

    return "".join(parts)


__all__ = ["format_uri", "DEFAULT_RENDER_PORT"]
