"""
Rate limiting setup.

Uses slowapi to apply one default limit, keyed by client address, to every
route. Rejections are reported by the error reporter as 429 responses.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from helps.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create the application limiter from settings.

    Args:
        settings: Application settings.

    Returns:
        A limiter with the configured default limit, disabled when
        ``settings.rate_limit_enabled`` is False.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )
