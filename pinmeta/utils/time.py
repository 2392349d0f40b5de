"""
Time helpers: epoch-millisecond clock used for upload order and interaction windows.
"""

from datetime import datetime, timezone


def now_ms() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def hours_to_ms(hours: float) -> int:
    return int(hours * 3600 * 1000)
