"""CLI command for uuid7time."""

import logging
import sys

import click

from uuid7time import __version__
from uuid7time.batch import BatchProcessor
from uuid7time.config import ExtractorConfig
from uuid7time.models import OutputFormat
from uuid7time.sources import collect_candidates


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("uuids", nargs=-1, metavar="[UUID]...")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OutputFormat.names(), case_sensitive=False),
    default=None,
    help="Output format (default: iso). Overrides -u/-U/-j.",
)
@click.option("--unix", "-u", is_flag=True, help="Shorthand for --format unix")
@click.option("--unix-ms", "-U", "unix_ms", is_flag=True, help="Shorthand for --format unix-ms")
@click.option("--json", "-j", "output_json", is_flag=True, help="Shorthand for --format json")
@click.option("--quiet", "-q", is_flag=True, help="Suppress error messages")
@click.option("--verbose", "-v", is_flag=True, help="Log debug information to stderr")
@click.version_option(__version__, "-V", "--version", prog_name="uuid7time")
def cli(
    uuids: tuple[str, ...],
    output_format: str | None,
    unix: bool,
    unix_ms: bool,
    output_json: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Extract timestamps from UUID version 7.

    UUIDs are read from the arguments, or one per line from stdin when none
    are given. Exits 1 if any UUID could not be decoded.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )

    config = ExtractorConfig.from_flags(
        output_format=output_format,
        unix=unix,
        unix_ms=unix_ms,
        json=output_json,
        quiet=quiet,
    )

    stdin = click.get_text_stream("stdin", errors="replace")
    candidates = collect_candidates(uuids, stdin)
    result = BatchProcessor(config).run(candidates)
    sys.exit(result.exit_code)


if __name__ == "__main__":
    cli()
