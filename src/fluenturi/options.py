"""Formatting and security options shared by the builder, formatter and parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if not text:
        return default
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"Expected a boolean option value, got {value!r}")


@dataclass
class UriOptions:
    """Options read by each render or parse call.

    The owning caller may change them between calls; a builder always
    consults the current values.
    """

    # Always ensure that the rendered path ends with '/'.
    always_slash_terminate_path: bool = True
    # Passwords in the user info end up in logs and browser history, so
    # they are refused unless this is switched on.
    allow_password_in_userinfo: bool = False

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None) -> "UriOptions":
        cfg = dict(config or {})
        return cls(
            always_slash_terminate_path=_as_bool(
                cfg.get("always_slash_terminate_path"), cls.always_slash_terminate_path
            ),
            allow_password_in_userinfo=_as_bool(
                cfg.get("allow_password_in_userinfo"), cls.allow_password_in_userinfo
            ),
        )

    def to_dict(self) -> dict:
        return {
            "always_slash_terminate_path": self.always_slash_terminate_path,
            "allow_password_in_userinfo": self.allow_password_in_userinfo,
        }


__all__ = ["UriOptions"]
