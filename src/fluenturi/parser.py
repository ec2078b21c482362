"""Turn an absolute URI string back into a :class:`FluentUri` builder."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional
from urllib.parse import SplitResult, urlsplit

from .builder import FluentUri, create
from .errors import InvalidUriError
from .options import UriOptions
from .query import QueryCollection

logger = logging.getLogger(__name__)

# An explicit port equal to the scheme default is not kept.
DEFAULT_PORTS: Dict[str, int] = {
    "ftp": 21,
    "gopher": 70,
    "http": 80,
    "https": 443,
    "ldap": 389,
    "nntp": 119,
    "telnet": 23,
    "ws": 80,
    "wss": 443,
}


def parse(uri: str, options: Optional[UriOptions] = None) -> FluentUri:
    """Parse an absolute URI into a builder ready for further changes.

    User info carrying a password goes through the same check as
    :meth:`FluentUri.password`, so parsing fails with
    :class:`PasswordNotAllowedError` unless the options allow it.
    """
    split = _split_absolute(uri)

    builder = create(options).scheme(split.scheme).host(_host(split))

    if split.path:
        builder.add_path_segment(_path_segments(split.path))

    if split.fragment:
        builder.fragment(split.fragment)

    if split.query:
        builder.add_query_param(QueryCollection.parse(split.query))

    userinfo, has_userinfo, _ = split.netloc.rpartition("@")
    if has_userinfo and userinfo:
        username, has_password, password = userinfo.partition(":")
        builder.username(username)
        if has_password:
            builder.password(password)

    port = _port(split)
    if port is not None and port != DEFAULT_PORTS.get(split.scheme):
        builder.port(port)

    logger.debug(
        "Parsed %s URI with %d path segment(s) and %d query parameter(s)",
        split.scheme,
        len(builder.model.path_segments),
        len(builder.model.query),
    )
    return builder


def uri_builder(uri: str, options: Optional[UriOptions] = None) -> FluentUri:
    """Alias of :func:`parse`."""
    return parse(uri, options)


def _split_absolute(uri: str) -> SplitResult:
    try:
        split = urlsplit(uri.strip())
    except ValueError as exc:
        raise InvalidUriError(f"Invalid URI {uri!r}: {exc}") from exc
    if not split.scheme:
        raise InvalidUriError(f"URI must be absolute: {uri!r}")
    if not split.netloc and not split.path.startswith("/") and "@" in split.path:
        # Non-hierarchical form such as mailto:user@host; the part after
        # the scheme is read as the authority.
        return _split_absolute(uri.strip().replace(":", "://", 1))
    return split


def _path_segments(path: str) -> List[str]:
    trimmed = path.strip("/")
    if "//" in trimmed:
        return [trimmed]
    return trimmed.split("/")


def _host(split: SplitResult) -> str:
    host = split.hostname or ""
    if ":" in host:
        return f"[{host}]"
    return host


def _port(split: SplitResult) -> Optional[int]:
    try:
        return split.port
    except ValueError as exc:
        raise InvalidUriError(f"Invalid port in URI {split.geturl()!r}") from exc


__all__ = ["parse", "uri_builder", "DEFAULT_PORTS"]
