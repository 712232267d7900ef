"""Timezone-aware clock used for every stored timestamp."""

import datetime


def utc_now() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)
