"""Random API key generation."""

import secrets
import string
from collections.abc import Callable

ALPHANUMERIC = string.ascii_letters + string.digits

# (length) -> key; injected into Manager so tests can supply deterministic keys.
KeyGenerator = Callable[[int], str]


def gen_random_string(length: int) -> str:
    """Generate a random alphanumeric string.

    Args:
        length: Number of characters.

    Returns:
        str: String of ``length`` characters drawn from ``[A-Za-z0-9]``.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    return "".join(secrets.choice(ALPHANUMERIC) for _ in range(length))
