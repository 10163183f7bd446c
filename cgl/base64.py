"""Standard-alphabet base64 encoding with a lenient decoder."""

from __future__ import annotations

import binascii
import string

__all__ = ["encode", "decode"]

_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")


def encode(data) -> str:
    """Encode bytes as padded base64 text."""
    return binascii.b2a_base64(bytes(data), newline=False).decode("ascii")


def decode(text: str) -> bytes:
    """Decode base64 text.

    Decoding stops at the first ``=`` or at any character outside the
    alphabet; a trailing group of a single character yields no bytes.
    """
    valid = []
    for char in text:
        if char not in _ALPHABET:
            break
        valid.append(char)
    if len(valid) % 4 == 1:
        valid.pop()
    body = "".join(valid)
    body += "=" * (-len(body) % 4)
    return binascii.a2b_base64(body)