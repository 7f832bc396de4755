"""Sequential batch runner: symbol -> gene IDs -> expression record -> output.

Each upstream call produces a LookupOutcome instead of raising;
run_report applies the error policy to those outcomes.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

import requests
from pydantic import ValidationError

from orthoatlas.evidence.expression.models import ExpressionRecord
from orthoatlas.output.formatters import OUTPUT_MODES, TABULAR_HEADER, format_record

logger = logging.getLogger(__name__)

ERROR_POLICIES = ("abort", "skip")

# Failures of a single lookup: transport/HTTP errors, undecodable bodies,
# schema mismatches and malformed documents.
LOOKUP_ERRORS = (requests.RequestException, ValidationError, ValueError)

Resolver = Callable[[str], list[str]]
RecordFetcher = Callable[[str], ExpressionRecord]


@dataclass
class LookupOutcome:
    """Result of one lookup step for one symbol.

    Attributes:
        symbol: Queried input symbol
        gene_id: Resolved gene ID (None if resolution itself failed)
        record: Expression record (None on failure)
        error: Exception raised by the failed call (None on success)
    """
    symbol: str
    gene_id: str | None = None
    record: ExpressionRecord | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchSummary:
    """Counts for a finished report run.

    Attributes:
        symbols_processed: Input symbols looked up
        records_reported: Blocks/rows written
        symbols_without_orthologue: Symbols that resolved to no gene ID
        failures: Failed lookups (only non-zero with the skip policy)
    """
    symbols_processed: int = 0
    records_reported: int = 0
    symbols_without_orthologue: int = 0
    failures: int = 0


def iter_outcomes(
    symbols: Iterable[str],
    resolve: Resolver,
    fetch_record: RecordFetcher,
) -> Iterator[LookupOutcome]:
    """Yield one outcome per (symbol, gene ID) pair, in input order.

    A symbol whose resolution fails yields a single failed outcome with
    gene_id None. A symbol resolving to no IDs yields nothing.
    """
    for symbol in symbols:
        try:
            gene_ids = resolve(symbol)
        except LOOKUP_ERRORS as e:
            yield LookupOutcome(symbol=symbol, error=e)
            continue

        if not gene_ids:
            yield LookupOutcome(symbol=symbol, gene_id=None)
            continue

        for gene_id in gene_ids:
            try:
                record = fetch_record(gene_id)
            except LOOKUP_ERRORS as e:
                yield LookupOutcome(symbol=symbol, gene_id=gene_id, error=e)
                continue
            yield LookupOutcome(symbol=symbol, gene_id=gene_id, record=record)


def run_report(
    symbols: Iterable[str],
    resolve: Resolver,
    fetch_record: RecordFetcher,
    emit: Callable[[str], None],
    output_mode: str = "verbose",
    error_policy: str = "abort",
) -> BatchSummary:
    """Look up every symbol and emit its formatted report lines.

    Args:
        symbols: Input symbols, already stripped of blanks
        resolve: Maps a symbol to zero or more gene IDs
        fetch_record: Fetches the expression record for one gene ID
        emit: Receives each formatted block/row (and the tabular header)
        output_mode: 'verbose' or 'tabular'
        error_policy: 'abort' re-raises the first failure; 'skip' logs it
            and moves on

    Returns:
        BatchSummary with run counts

    Raises:
        ValueError: If output_mode or error_policy is unknown
        Exception: The first lookup failure, when error_policy is 'abort'
    """
    if output_mode not in OUTPUT_MODES:
        raise ValueError(
            f"Unknown output mode: {output_mode!r} (expected one of {OUTPUT_MODES})"
        )
    if error_policy not in ERROR_POLICIES:
        raise ValueError(
            f"Unknown error policy: {error_policy!r} (expected one of {ERROR_POLICIES})"
        )
    if output_mode == "tabular":
        emit(TABULAR_HEADER)

    symbols = list(symbols)
    summary = BatchSummary(symbols_processed=len(symbols))

    for outcome in iter_outcomes(symbols, resolve, fetch_record):
        if not outcome.ok:
            if error_policy == "abort":
                raise outcome.error
            summary.failures += 1
            target = f"{outcome.symbol} ({outcome.gene_id})" if outcome.gene_id else outcome.symbol
            logger.warning(f"Skipping {target}: {outcome.error}")
            continue

        if outcome.record is None:
            summary.symbols_without_orthologue += 1
            continue

        emit(format_record(output_mode, outcome.symbol, outcome.record))
        summary.records_reported += 1

    logger.info(
        f"Report complete: {summary.symbols_processed} symbols, "
        f"{summary.records_reported} records, "
        f"{summary.symbols_without_orthologue} without orthologue, "
        f"{summary.failures} failures"
    )
    return summary
