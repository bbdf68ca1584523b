"""Timestamp helpers."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_timestamp_to_gmt_string(timestamp: int) -> str:
    """Format Unix seconds as an RFC 2822 date in UTC."""
    return format_datetime(_EPOCH + timedelta(seconds=timestamp))


def timestamp_now() -> int:
    """Return the current Unix time in whole seconds."""
    return int(time.time())