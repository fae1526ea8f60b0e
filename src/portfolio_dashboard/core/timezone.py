"""Timezone utilities for response timestamps and upstream epoch values."""

from datetime import datetime
from typing import Optional

import pytz

UTC = pytz.utc
IST_TZ = pytz.timezone("Asia/Kolkata")


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_unix_seconds(dt: datetime, default_tz: Optional[pytz.BaseTzInfo] = None) -> int:
    """
    Convert a datetime to unix seconds.

    Naive datetimes are assumed to be in default_tz (Asia/Kolkata when not given).
    """
    if dt.tzinfo is None:
        dt = (default_tz or IST_TZ).localize(dt)
    return int(dt.astimezone(UTC).timestamp())
