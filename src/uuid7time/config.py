"""
Runtime configuration for uuid7time.

Command-line flags are resolved once into an immutable ExtractorConfig that
is passed to the batch driver.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from uuid7time.models import OutputFormat


class ExtractorConfig(BaseModel):
    """Output settings for a batch run."""

    model_config = ConfigDict(frozen=True)

    output_format: OutputFormat = Field(
        default=OutputFormat.ISO, description="Representation written per UUID"
    )
    quiet: bool = Field(default=False, description="Suppress per-item error messages")

    @classmethod
    def from_flags(
        cls,
        output_format: Optional[str] = None,
        unix: bool = False,
        unix_ms: bool = False,
        json: bool = False,
        quiet: bool = False,
    ) -> ExtractorConfig:
        """
        Build configuration from command-line flags.

        An explicit --format always wins. Otherwise the first shorthand set,
        in the order --unix, --unix-ms, --json, selects the format. With no
        format flags the output is ISO-8601.

        Args:
            output_format: Value of --format, or None if not given
            unix: --unix flag
            unix_ms: --unix-ms flag
            json: --json flag
            quiet: --quiet flag

        Returns:
            ExtractorConfig instance

        Raises:
            ValueError: If output_format is not a known format name
        """
        return cls(
            output_format=resolve_format(output_format, unix, unix_ms, json),
            quiet=quiet,
        )


def resolve_format(
    output_format: Optional[str], unix: bool, unix_ms: bool, json: bool
) -> OutputFormat:
    """Pick the output format from --format and the shorthand flags."""
    if output_format is not None:
        try:
            return OutputFormat(output_format.lower())
        except ValueError:
            raise ValueError(
                f"Unknown format: {output_format}. Use: {', '.join(OutputFormat.names())}"
            ) from None
    if unix:
        return OutputFormat.UNIX
    if unix_ms:
        return OutputFormat.UNIX_MS
    if json:
        return OutputFormat.JSON
    return OutputFormat.ISO
