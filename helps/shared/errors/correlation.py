"""
Error id generation.

An error id links a client-visible error response to the server log line
recording the internal failure. It is UUID-shaped but not a standards
compliant UUID: all 128 bits are random.
"""

import os
from typing import Callable

ERROR_ID_BYTES = 16
ERROR_ID_LENGTH = 36
# Byte boundaries of the 8-4-4-4-12 hex groups.
_GROUPS = ((0, 4), (4, 6), (6, 8), (8, 10), (10, 16))


class RandomSourceUnavailable(Exception):
    """Raised when the secure random source cannot supply bytes."""


def gen_error_id(read_random: Callable[[int], bytes] = os.urandom) -> str:
    """Generate a random error id.

    Args:
        read_random: Secure random source returning the requested number
            of bytes. Defaults to the OS entropy source.

    Returns:
        A 36-character lowercase hex string in the form
        ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``.

    Raises:
        RandomSourceUnavailable: If the source fails or returns short.
    """
    try:
        raw = read_random(ERROR_ID_BYTES)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailable(f"gen_error_id: {exc}") from exc

    if len(raw) != ERROR_ID_BYTES:
        raise RandomSourceUnavailable(
            f"gen_error_id: read {len(raw)} of {ERROR_ID_BYTES} bytes"
        )

    return "-".join(raw[start:end].hex() for start, end in _GROUPS)
