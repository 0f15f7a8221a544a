"""Batch driver: process UUIDs in order and aggregate the exit status."""

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

import click

from uuid7time.config import ExtractorConfig
from uuid7time.exceptions import UUID7TimeError
from uuid7time.extractor import TimestampExtractor
from uuid7time.formatter import render
from uuid7time.models import BatchResult, ItemResult

logger = logging.getLogger(__name__)

NO_INPUT_MESSAGE = "No UUID provided. Use --help for usage information."


class BatchProcessor:
    """Run the extractor over a sequence of UUID strings.

    Items are independent: a failing item is reported and recorded, and
    processing continues with the next one.
    """

    def __init__(self, config: ExtractorConfig, extractor: TimestampExtractor | None = None):
        """Initialize processor.

        Args:
            config: Output format and quiet setting
            extractor: Timestamp extractor (default: TimestampExtractor())
        """
        self.config = config
        self.extractor = extractor or TimestampExtractor()

    def process_item(self, index: int, candidate: str) -> ItemResult:
        """Process one candidate into an ItemResult (never raises for bad input)."""
        try:
            record = self.extractor.extract(candidate)
        except UUID7TimeError as e:
            logger.debug(f"Item {index} failed: {e}")
            return ItemResult(index=index, candidate=candidate, error=e)

        return ItemResult(
            index=index,
            candidate=candidate,
            record=record,
            output=render(record, self.config.output_format),
        )

    def iter_results(self, candidates: Iterable[str]) -> Iterator[ItemResult]:
        """Yield one ItemResult per candidate, in input order."""
        for index, candidate in enumerate(candidates):
            yield self.process_item(index, candidate)

    def run(
        self,
        candidates: Iterable[str],
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> BatchResult:
        """Process candidates, writing each result as soon as it is ready.

        Successful items are written to out (stdout by default), failures to
        err (stderr by default) unless the config is quiet.

        Args:
            candidates: UUID strings in input order
            out: Stream for output lines
            err: Stream for error messages

        Returns:
            BatchResult with one outcome per candidate
        """
        result = BatchResult()

        for item in self.iter_results(candidates):
            result.add(item)
            if item.ok:
                click.echo(item.output, file=out)
            elif not self.config.quiet:
                click.echo(f"Error: {item.error}", file=err, err=True)

        if not result.items and not self.config.quiet:
            click.echo(f"Error: {NO_INPUT_MESSAGE}", file=err, err=True)

        logger.debug(
            f"Processed {len(result.items)} UUID(s): "
            f"{len(result.succeeded)} ok, {len(result.failed)} failed"
        )
        return result
