"""UUID v7 timestamp extractor."""

import logging

from uuid7time.formatter import build_record
from uuid7time.models import TimestampRecord
from uuid7time.parser import UUIDParser

logger = logging.getLogger(__name__)

UUID_BYTES = 16
TIMESTAMP_BYTES = 6


def extract_timestamp_ms(raw: bytes) -> int:
    """Read the 48-bit big-endian millisecond timestamp from a UUID.

    Args:
        raw: 16-byte UUID value

    Returns:
        Milliseconds since the Unix epoch (0 to 2**48 - 1)
    """
    if len(raw) != UUID_BYTES:
        raise ValueError(f"UUID must be {UUID_BYTES} bytes, got {len(raw)}")
    return int.from_bytes(raw[:TIMESTAMP_BYTES], byteorder="big", signed=False)


def uuid_version(raw: bytes) -> int:
    """Return the version nibble of a UUID (informational only)."""
    return raw[6] >> 4


class TimestampExtractor:
    """Decode the creation timestamp of UUID v7 strings."""

    def __init__(self, parser: UUIDParser | None = None):
        """Initialize extractor.

        Args:
            parser: UUID parser to use (default: UUIDParser())
        """
        self.parser = parser or UUIDParser()

    def extract(self, value: str) -> TimestampRecord:
        """Extract the timestamp record for a UUID string.

        Args:
            value: UUID string

        Returns:
            Timestamp record holding every rendering of the instant

        Raises:
            InvalidUUIDError: If value is not a canonical UUID
            TimestampOutOfRangeError: If the timestamp has no calendar instant
        """
        uuid = value.strip()
        raw = self.parser.parse(uuid)
        timestamp_ms = extract_timestamp_ms(raw)

        version = uuid_version(raw)
        if version != 7:
            logger.debug(f"UUID {uuid} has version {version}, decoding timestamp anyway")
        logger.debug(f"Extracted {timestamp_ms} ms from {uuid}")

        return build_record(uuid, timestamp_ms)
