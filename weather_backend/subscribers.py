"""
Subscriber email checks and storage key derivation.
"""

from __future__ import annotations

import re
from typing import Any

SUBSCRIBERS_PREFIX = "subscribers/"

_DISALLOWED_KEY_CHARS = re.compile(r"[^A-Za-z0-9\-_.@]")
# json.loads joins valid surrogate pairs, so any surrogate left is unpaired.
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def is_plausible_email(value: Any) -> bool:
    """Syntactic sanity check only: a non-empty string containing ``@``."""
    return isinstance(value, str) and "@" in value


def sanitize_email(email: str) -> str:
    """Drop every character outside ``[A-Za-z0-9-_.@]``, keeping order."""
    return _DISALLOWED_KEY_CHARS.sub("", email)


def subscriber_key(email: str) -> str:
    return f"{SUBSCRIBERS_PREFIX}{sanitize_email(email)}"


def email_body(email: str) -> bytes:
    """UTF-8 object content for ``email``; lone surrogates become U+FFFD."""
    return _LONE_SURROGATE.sub("\ufffd", email).encode("utf-8")
