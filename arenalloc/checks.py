"""Password-style checks over a C-style byte string.

Each check works on the bytes of its argument up to the first NUL byte.
A ``str`` is encoded as UTF-8 first.
"""

from __future__ import annotations

REQUIRED_LENGTH = 20
EXPECTED_CHECKSUM = 228

_UPPER_MIN = ord("A")
_UPPER_MAX = ord("Z")


def _as_bytes(arg: str | bytes) -> bytes:
    data = arg.encode("utf-8") if isinstance(arg, str) else bytes(arg)
    return data.split(b"\0", 1)[0]


def check_length(arg: str | bytes) -> bool:
    """Return True if the argument is exactly twenty bytes long."""
    return len(_as_bytes(arg)) == REQUIRED_LENGTH


def check_uppercase(arg: str | bytes) -> bool:
    """Return True if every byte is an ASCII capital letter (vacuously true when empty)."""
    return all(_UPPER_MIN <= b <= _UPPER_MAX for b in _as_bytes(arg))


def check_palindrome(arg: str | bytes) -> bool:
    """Return True if the bytes read the same forwards and backwards."""
    data = _as_bytes(arg)
    return data == data[::-1]


def checksum(arg: str | bytes) -> int:
    """Compute the rotating checksum, seeded with the length and including the NUL terminator."""
    data = _as_bytes(arg)
    value = len(data)
    for byte in data + b"\0":
        # Copy bit 0 into bit 8, then shift right and mix in the byte.
        value = ((value & 1) << 8) | (value & ~(1 << 8))
        value = byte ^ (value >> 1)
    return value


def check_checksum(arg: str | bytes) -> bool:
    """Return True if the checksum equals the expected value."""
    return checksum(arg) == EXPECTED_CHECKSUM


def check_all(arg: str | bytes) -> bool:
    """Return True if the argument passes every check."""
    return (
        check_length(arg)
        and check_uppercase(arg)
        and check_palindrome(arg)
        and check_checksum(arg)
    )