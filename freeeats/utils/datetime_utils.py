"""
Time helpers. Expiry and creation times are epoch milliseconds throughout.
"""

import time
from typing import Optional

MS_PER_MINUTE = 60 * 1000


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def minutes_to_ms(minutes: int) -> int:
    return int(minutes) * MS_PER_MINUTE


def expires_at_from_now(duration_minutes: int, now: Optional[int] = None) -> int:
    """Expiry timestamp duration_minutes after now."""
    return (now_ms() if now is None else now) + minutes_to_ms(duration_minutes)


def extend_expiry(current_expires_at: int, extend_minutes: int, now: Optional[int] = None) -> int:
    """Push an expiry forward, counting from now when it has already passed."""
    base = max(current_expires_at, now_ms() if now is None else now)
    return base + minutes_to_ms(extend_minutes)


def is_expired(expires_at: int, now: Optional[int] = None) -> bool:
    return (now_ms() if now is None else now) >= expires_at
