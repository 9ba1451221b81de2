# app/timestamps.py

from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
  """Render an aware datetime as YYYY-MM-DDTHH:MM:SS.sssZ in UTC."""
  moment = moment.astimezone(timezone.utc)
  return (
    f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
    f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    f".{moment.microsecond // 1000:03d}Z"
  )


def is_canonical_timestamp(value) -> bool:
  """
  True when 'value' parses as a timestamp and formatting it back gives the exact same text.
  Date-only strings, other offsets than 'Z' and precisions other than milliseconds are rejected.
  """
  if not isinstance(value, str):
    return False
  try:
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
      return False
    return format_timestamp(moment) == value
  except (ValueError, OverflowError):
    return False
