from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_CONFIG_PATH, load_uri_options
from .errors import InvalidUriError
from .parser import parse


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fluenturi", description="Print the canonical form of an absolute URI.")
    parser.add_argument("uri", help="Absolute URI to normalise.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to options YAML.")
    parser.add_argument(
        "--allow-password",
        action="store_true",
        help="Accept a password in the user info (it will be printed).",
    )
    parser.add_argument(
        "--no-trailing-slash",
        action="store_true",
        help="Do not force a trailing '/' on the path.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = load_uri_options(args.config)
    if args.allow_password:
        options.allow_password_in_userinfo = True
    if args.no_trailing_slash:
        options.always_slash_terminate_path = False

    try:
        result = parse(args.uri, options).as_string()
    except InvalidUriError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
