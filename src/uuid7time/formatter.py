"""Render UUID v7 timestamps as ISO-8601, RFC-3339, Unix and JSON."""

import json
from datetime import datetime, timedelta, timezone

from uuid7time.exceptions import TimestampOutOfRangeError
from uuid7time.models import OutputFormat, TimestampRecord

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Last millisecond representable by datetime: 9999-12-31T23:59:59.999Z.
# Every output mode shares this ceiling.
MAX_TIMESTAMP_MS = 253402300799999
MAX_TIMESTAMP_ISO = "9999-12-31T23:59:59.999Z"


def to_datetime(timestamp_ms: int, value: str = "") -> datetime:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime.

    Args:
        timestamp_ms: Milliseconds since 1970-01-01T00:00:00Z
        value: Originating UUID string, used in the error message

    Returns:
        UTC datetime with millisecond precision

    Raises:
        TimestampOutOfRangeError: If timestamp_ms is negative or above MAX_TIMESTAMP_MS
    """
    if timestamp_ms < 0 or timestamp_ms > MAX_TIMESTAMP_MS:
        raise TimestampOutOfRangeError(value, timestamp_ms, MAX_TIMESTAMP_MS, MAX_TIMESTAMP_ISO)
    return EPOCH + timedelta(milliseconds=timestamp_ms)


def format_rfc3339(dt: datetime) -> str:
    """Format as YYYY-MM-DDTHH:MM:SS.mmm+00:00."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def format_iso8601(dt: datetime) -> str:
    """Format as YYYY-MM-DDTHH:MM:SS.mmmZ."""
    return format_rfc3339(dt).replace("+00:00", "Z")


def build_record(value: str, timestamp_ms: int) -> TimestampRecord:
    """Build the timestamp record for a UUID.

    Raises:
        TimestampOutOfRangeError: If timestamp_ms has no calendar instant
    """
    dt = to_datetime(timestamp_ms, value)
    return TimestampRecord(
        uuid=value,
        timestamp_ms=timestamp_ms,
        timestamp_sec=timestamp_ms // 1000,
        iso8601=format_iso8601(dt),
        rfc3339=format_rfc3339(dt),
    )


def to_json(record: TimestampRecord) -> str:
    """Serialize a record as a compact single-line JSON object."""
    return json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False)


def render(record: TimestampRecord, output_format: OutputFormat) -> str:
    """Render a record in the requested output format."""
    if output_format is OutputFormat.ISO:
        return record.iso8601
    if output_format is OutputFormat.UNIX:
        return str(record.timestamp_sec)
    if output_format is OutputFormat.UNIX_MS:
        return str(record.timestamp_ms)
    if output_format is OutputFormat.JSON:
        return to_json(record)
    raise ValueError(f"Unknown format: {output_format}. Use: {', '.join(OutputFormat.names())}")
