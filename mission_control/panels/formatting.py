"""
Formatting helpers shared by the dashboard panels
"""
import math
import re
from datetime import datetime, timedelta, timezone

PLACEHOLDER_NEVER = '—'
PLACEHOLDER_UNKNOWN = 'unknown'

_UTC_NAMES = {'UTC', 'GMT', 'Z'}
_OFFSET_RE = re.compile(r'^([+-])(\d{2}):?(\d{2})?$')
_TIMESTAMP_FORMATS = ('%Y-%m-%d %H:%M:%S', '%Y-%m-%d %H:%M:%S.%f', '%Y-%m-%d %H:%M')


def _to_epoch(moment):
    # naive datetimes are local time
    return moment.timestamp()


def _now_epoch(now):
    return _to_epoch(now) if now is not None else datetime.now(timezone.utc).timestamp()


def parse_timestamp(value):
    """Parse a systemd or ISO-8601 timestamp; None if it is not one

    systemd prints e.g. 'Sat 2026-10-17 09:12:33 UTC', or a numeric zone
    like '+03' where the zone has no abbreviation. UTC/GMT and numeric
    offsets are honoured; any other zone name is read as local time.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()

    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        pass

    parts = text.split()
    if parts and parts[0].isalpha():
        parts = parts[1:]
    tzinfo = None
    offset = _OFFSET_RE.match(parts[-1]) if parts else None
    if offset:
        sign, hours, minutes = offset.groups()
        delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
        if delta >= timedelta(hours=24):
            return None
        tzinfo = timezone(-delta if sign == '-' else delta)
        parts = parts[:-1]
    elif parts and parts[-1].isalpha():
        tzinfo = timezone.utc if parts[-1].upper() in _UTC_NAMES else None
        parts = parts[:-1]

    candidate = ' '.join(parts)
    for fmt in _TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        return parsed.replace(tzinfo=tzinfo) if tzinfo else parsed
    return None


def time_ago(moment, now=None):
    """Describe how long ago `moment` was: 'just now', '45s ago', '2m ago'"""
    if moment is None:
        return PLACEHOLDER_NEVER
    seconds = math.floor(_now_epoch(now) - _to_epoch(moment))
    if seconds < 5:
        return 'just now'
    if seconds < 60:
        return f'{seconds}s ago'
    return f'{seconds // 60}m ago'


def format_uptime(timestamp, now=None):
    """Turn a service start timestamp into '5h 12m' or, past a day, '3d 4h'"""
    start = parse_timestamp(timestamp)
    if start is None:
        return PLACEHOLDER_UNKNOWN

    elapsed = max(0, _now_epoch(now) - _to_epoch(start))
    hours = int(elapsed // 3600)
    minutes = int((elapsed % 3600) // 60)
    if hours > 24:
        return f'{hours // 24}d {hours % 24}h'
    return f'{hours}h {minutes}m'
