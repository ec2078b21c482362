"""Fluent, staged construction and parsing of absolute URIs."""

from .builder import FluentUri, UriContext, UriInitial, UriSchemeSet, create
from .config import load_uri_config, load_uri_options
from .errors import InvalidUriError, MalformedQueryError, PasswordNotAllowedError
from .formatter import format_uri
from .model import UriModel
from .options import UriOptions
from .parser import parse, uri_builder
from .query import QueryCollection

__version__ = "0.1.0"

__all__ = [
    "create",
    "parse",
    "uri_builder",
    "format_uri",
    "FluentUri",
    "UriContext",
    "UriInitial",
    "UriSchemeSet",
    "UriModel",
    "UriOptions",
    "QueryCollection",
    "InvalidUriError",
    "MalformedQueryError",
    "PasswordNotAllowedError",
    "load_uri_config",
    "load_uri_options",
]
