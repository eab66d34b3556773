import datetime


def _to_utc(dt: datetime.datetime) -> datetime.datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def format_iso_millis(dt: datetime.datetime) -> str:
    """UTC timestamp as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    utc = _to_utc(dt)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def format_clock(dt: datetime.datetime) -> str:
    return _to_utc(dt).strftime("%H:%M UTC")


def minutes_to_hours(minutes: float) -> float:
    return round(minutes / 60.0, 1)


def format_degrees(value: float, precision: int = 1) -> str:
    return f"{value:.{precision}f}°"
