"""Timestamp formats used in log prefixes.

Purpose
-------
Name the three supported renderings (``iso``, ``utc``, ``local``) and turn a
timezone-aware :class:`datetime` into the matching prefix text.

Contents
--------
* :class:`DateFormat` enumeration with parsing helpers.
* :func:`format_timestamp` rendering helper.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime
from enum import Enum


class DateFormat(Enum):
    """Supported timestamp renderings.

    Examples
    --------
    >>> DateFormat.ISO.value
    'iso'
    """

    ISO = "iso"
    UTC = "utc"
    LOCAL = "local"

    @classmethod
    def from_name(cls, name: str) -> "DateFormat":
        """Return the member matching ``name`` case-insensitively.

        Raises
        ------
        ValueError
            If the provided name is not recognised.

        Examples
        --------
        >>> DateFormat.from_name(" UTC ") is DateFormat.UTC
        True
        >>> DateFormat.from_name("epoch")
        Traceback (most recent call last):
        ...
        ValueError: Unsupported date format: 'epoch'
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported date format: {name!r}")


def format_timestamp(moment: datetime, date_format: DateFormat) -> str:
    """Render ``moment`` according to ``date_format``.

    ``iso`` is UTC with millisecond precision and a ``Z`` suffix, ``utc`` is
    the RFC 1123 form, ``local`` converts to the host timezone.

    Examples
    --------
    >>> ts = datetime(2025, 9, 30, 12, 0, 5, 123000, tzinfo=timezone.utc)
    >>> format_timestamp(ts, DateFormat.ISO)
    '2025-09-30T12:00:05.123Z'
    >>> format_timestamp(ts, DateFormat.UTC)
    'Tue, 30 Sep 2025 12:00:05 GMT'
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if date_format is DateFormat.ISO:
        utc = moment.astimezone(timezone.utc)
        return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
    if date_format is DateFormat.UTC:
        return format_datetime(moment.astimezone(timezone.utc), usegmt=True)
    local = moment.astimezone()
    return local.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


__all__ = ["DateFormat", "format_timestamp"]
