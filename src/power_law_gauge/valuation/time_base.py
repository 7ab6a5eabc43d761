"""
Time-base: elapsed days since the genesis instant.
"""

from __future__ import annotations

from datetime import datetime, timezone

from power_law_gauge.config.models import GENESIS

SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def elapsed_days(now: datetime, genesis: datetime = GENESIS) -> float:
    """
    Fractional days between genesis and now.

    `now` is expected to be after genesis; the result is then positive.
    Callers never evaluate at or before genesis, so this is not checked
    here (the power-law model rejects non-positive days).
    """
    delta = _as_utc(now) - _as_utc(genesis)
    return delta.total_seconds() / SECONDS_PER_DAY
