"""UUID string parser."""

import re

from uuid7time.exceptions import InvalidUUIDError

UUID_LENGTH = 36


class UUIDParser:
    """Parser for canonical hyphenated UUID strings.

    Format: xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx (hex, any case)

    The version and variant nibbles are not checked, so a mis-tagged
    identifier still yields its first six bytes.
    """

    PATTERN_REGEX = re.compile(
        r"^([0-9a-fA-F]{8})-([0-9a-fA-F]{4})-([0-9a-fA-F]{4})-([0-9a-fA-F]{4})-([0-9a-fA-F]{12})$"
    )

    def parse(self, value: str) -> bytes:
        """Parse a UUID string into its 16 raw bytes.

        Args:
            value: UUID string (surrounding whitespace is ignored)

        Returns:
            16-byte UUID value

        Raises:
            InvalidUUIDError: If the string is not a canonical UUID

        Example:
            >>> UUIDParser().parse("018d5e5e-7b3a-7000-8000-000000000000")[:6].hex()
            '018d5e5e7b3a'
        """
        candidate = value.strip()
        match = self.PATTERN_REGEX.match(candidate)
        if not match:
            raise InvalidUUIDError(value.strip(), self._describe(candidate))

        return bytes.fromhex("".join(match.groups()))

    def validate_format(self, value: str) -> bool:
        """Validate UUID format."""
        return bool(self.PATTERN_REGEX.match(value.strip()))

    def _describe(self, candidate: str) -> str:
        if not candidate:
            return "empty string"
        if len(candidate) != UUID_LENGTH:
            return f"expected {UUID_LENGTH} characters, got {len(candidate)}"
        groups = candidate.split("-")
        if [len(group) for group in groups] != [8, 4, 4, 4, 12]:
            return "expected hyphenated 8-4-4-4-12 groups"
        return "invalid hexadecimal character"


_default_parser = UUIDParser()


def parse_uuid(value: str) -> bytes:
    """Parse a canonical UUID string into 16 bytes."""
    return _default_parser.parse(value)


def is_valid_uuid(value: str) -> bool:
    """Check whether a string is a canonical UUID."""
    return _default_parser.validate_format(value)
