"""Exceptions raised while decoding UUID v7 timestamps."""


class UUID7TimeError(ValueError):
    """Base exception for uuid7time errors."""

    pass


class InvalidUUIDError(UUID7TimeError):
    """Input is not a canonical hyphenated UUID string."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid UUID '{value}': {reason}")


class TimestampOutOfRangeError(UUID7TimeError):
    """Timestamp field has no representable calendar instant."""

    def __init__(self, value: str, timestamp_ms: int, max_timestamp_ms: int, max_iso: str):
        self.value = value
        self.timestamp_ms = timestamp_ms
        super().__init__(
            f"Timestamp out of range for '{value}': "
            f"{timestamp_ms} ms exceeds maximum {max_timestamp_ms} ms ({max_iso})"
        )
