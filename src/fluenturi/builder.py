"""Staged fluent builder for absolute URIs.

Construction moves through three stages, each exposing only the next legal
step::

    create()            -> UriInitial     (scheme)
    .scheme("https")    -> UriSchemeSet   (host)
    .host("example.com")-> FluentUri      (everything else, as_string)

All stages share one :class:`UriContext`; calls on :class:`FluentUri`
mutate it in place and return the same handle.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar, Union

from .errors import InvalidUriError, PasswordNotAllowedError
from .formatter import format_uri
from .model import UriModel
from .options import UriOptions

logger = logging.getLogger(__name__)

StageT = TypeVar("StageT", bound="_UriStage")
SegmentInput = Union[str, Iterable[str]]


class UriContext:
    """Options and model shared by every stage of one build session."""

    __slots__ = ("options", "model")

    def __init__(self, options: Optional[UriOptions] = None) -> None:
        self.options = options if options is not None else UriOptions()
        self.model = UriModel()


class _UriStage:
    __slots__ = ("_context",)

    def __init__(self, context: UriContext) -> None:
        self._context = context

    @property
    def options(self) -> UriOptions:
        return self._context.options

    def with_options(self: StageT, mutator: Callable[[UriOptions], Any]) -> StageT:
        """Apply ``mutator`` to the live options and return this same stage."""
        mutator(self._context.options)
        return self

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {format_uri(self._context.model, self._context.options)!r}>"


class UriInitial(_UriStage):
    """Empty builder; a scheme is required first."""

    __slots__ = ()

    def scheme(self, scheme: str) -> "UriSchemeSet":
        self._context.model.scheme = scheme
        return UriSchemeSet(self._context)


class UriSchemeSet(_UriStage):
    """Builder with a scheme; a host is required next."""

    __slots__ = ()

    def host(self, host: str) -> "FluentUri":
        self._context.model.host = host
        return FluentUri(self._context)


class FluentUri(_UriStage):
    """Builder with scheme and host set; every remaining part may be added."""

    __slots__ = ()

    @property
    def model(self) -> UriModel:
        return self._context.model

    def add_path_segment(self, *segments: SegmentInput) -> "FluentUri":
        """Append path segments.

        Each argument may be a string or an iterable of strings. Leading and
        trailing ``/`` are trimmed and segments left empty are dropped, so
        ``"/a/b/"`` is stored as ``"a/b"``.
        """
        stored = self._context.model.path_segments
        dropped = 0
        for segment in _iter_segments(segments):
            trimmed = segment.strip("/")
            if trimmed:
                stored.append(trimmed)
            else:
                dropped += 1
        if dropped:
            logger.debug("Dropped %d empty path segment(s)", dropped)
        return self

    def port(self, port: int) -> "FluentUri":
        if isinstance(port, bool) or not isinstance(port, int) or port <= 0:
            raise InvalidUriError(f"Port must be a positive integer, got {port!r}")
        self._context.model.port = port
        return self

    def username(self, username: Optional[str]) -> "FluentUri":
        self._context.model.username = username
        return self

    def password(self, password: Optional[str]) -> "FluentUri":
        """Set the password, refused unless ``allow_password_in_userinfo`` is on.

        The check does not look at the value: an empty or ``None`` password
        is refused just the same.
        """
        if not self._context.options.allow_password_in_userinfo:
            raise PasswordNotAllowedError(
                "Passwords cannot be encoded into a URI unless the allow_password_in_userinfo option is set."
            )
        self._context.model.password = password
        if password:
            logger.warning("Password stored in URI user info for host %r", self._context.model.host)
        return self

    def add_query_param(self, *args: Any) -> "FluentUri":
        """Add query parameters.

        Accepts ``(key)``, ``(key, value)``, any number of ``(key, value)``
        tuples, a mapping, a :class:`QueryCollection` or an iterable of pairs.
        Existing parameters are never replaced.
        """
        if not args:
            raise TypeError("add_query_param() requires at least one argument")
        query = self._context.model.query
        first = args[0]
        if isinstance(first, str):
            query.add(*args)
        elif len(args) == 1 and not isinstance(first, tuple):
            query.add_all(first)
        else:
            query.add_all(args)
        return self

    def fragment(self, fragment: Optional[str]) -> "FluentUri":
        self._context.model.fragment = fragment
        return self

    def as_string(self) -> str:
        return format_uri(self._context.model, self._context.options)

    def __str__(self) -> str:
        return self.as_string()


def _iter_segments(segments: Iterable[SegmentInput]) -> Iterator[str]:
    for segment in segments:
        if isinstance(segment, str):
            yield segment
        else:
            yield from segment


def create(options: Optional[UriOptions] = None) -> UriInitial:
    """Start building a URI. ``options`` defaults to :class:`UriOptions()`."""
    return UriInitial(UriContext(options))


__all__ = ["create", "UriContext", "UriInitial", "UriSchemeSet", "FluentUri"]
