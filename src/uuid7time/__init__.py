"""
uuid7time - UUID v7 Timestamp Extraction

Decodes the 48-bit millisecond timestamp embedded in UUID version 7
identifiers and renders it as ISO-8601, RFC-3339, Unix seconds,
Unix milliseconds or JSON.
"""

__version__ = "0.1.0"

from uuid7time.batch import BatchProcessor
from uuid7time.config import ExtractorConfig
from uuid7time.exceptions import InvalidUUIDError, TimestampOutOfRangeError, UUID7TimeError
from uuid7time.extractor import TimestampExtractor, extract_timestamp_ms
from uuid7time.formatter import MAX_TIMESTAMP_MS, build_record, render
from uuid7time.models import BatchResult, ItemResult, OutputFormat, TimestampRecord
from uuid7time.parser import UUIDParser, is_valid_uuid, parse_uuid

__all__ = [
    "BatchProcessor",
    "BatchResult",
    "ExtractorConfig",
    "InvalidUUIDError",
    "ItemResult",
    "MAX_TIMESTAMP_MS",
    "OutputFormat",
    "TimestampExtractor",
    "TimestampOutOfRangeError",
    "TimestampRecord",
    "UUID7TimeError",
    "UUIDParser",
    "__version__",
    "build_record",
    "extract_timestamp_ms",
    "is_valid_uuid",
    "parse_uuid",
    "render",
]
