"""Report commands: print HPA expression annotations for a file of gene symbols.

- report: pig symbols -> human orthologues (Ensembl homology) -> HPA
- lookup: human symbols -> Ensembl gene IDs (batch lookup) -> HPA

Both stream one block (verbose) or row (tabular) per resolved gene to
stdout, in input order. Progress and errors go to stderr.
"""

import logging
import sys
from pathlib import Path

import click

from orthoatlas.api_clients.base import RestClient
from orthoatlas.batch import run_report
from orthoatlas.config.loader import load_config_with_overrides
from orthoatlas.evidence.expression import fetch_expression_record
from orthoatlas.gene_mapping import OrthologueMapper, SymbolLookup, read_symbols

logger = logging.getLogger(__name__)


def report_options(f):
    """Options shared by the report and lookup commands."""
    f = click.option(
        '--on-error',
        'error_policy',
        type=click.Choice(['abort', 'skip']),
        default=None,
        help='abort: stop at the first failed lookup; skip: warn and continue (default: from config, abort)'
    )(f)
    f = click.option(
        '--format',
        'output_mode',
        type=click.Choice(['verbose', 'tabular']),
        default=None,
        help='verbose: labelled lines per gene; tabular: one TSV row per gene (default: from config, verbose)'
    )(f)
    f = click.option(
        '--file',
        'symbol_file',
        type=click.Path(path_type=Path),
        default='genes.txt',
        show_default=True,
        help='Input file with one gene symbol per line'
    )(f)
    return f


def _run(ctx, symbol_file, output_mode, error_policy, make_resolver):
    config_path = ctx.obj['config_path']

    try:
        config = load_config_with_overrides(config_path, {
            'report.output_mode': output_mode,
            'report.error_policy': error_policy,
        })
        symbols = read_symbols(symbol_file)

        with RestClient.from_config(config) as client:
            resolve = make_resolver(client, config, symbols)
            summary = run_report(
                symbols,
                resolve=resolve,
                fetch_record=lambda gene_id: fetch_expression_record(
                    client, gene_id, config.protein_atlas.base_url
                ),
                emit=click.echo,
                output_mode=config.report.output_mode,
                error_policy=config.report.error_policy,
            )

    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg='red'), err=True)
        logger.debug("Report run failed", exc_info=True)
        sys.exit(1)

    if summary.failures:
        click.echo(click.style(
            f"{summary.failures} lookup(s) failed and were skipped",
            fg='yellow'
        ), err=True)


def _orthologue_resolver(client, config, symbols):
    return OrthologueMapper(client, config.ensembl).resolve


def _symbol_lookup_resolver(client, config, symbols):
    gene_ids = SymbolLookup(client, config.ensembl).lookup(symbols)

    def resolve(symbol):
        gene_id = gene_ids.get(symbol)
        return [gene_id] if gene_id else []

    return resolve


@click.command('report')
@report_options
@click.pass_context
def report(ctx, symbol_file, output_mode, error_policy):
    """Report HPA expression for the human orthologues of pig gene symbols.

    Each symbol is resolved with the Ensembl homology endpoint; every human
    orthologue found is looked up in the Human Protein Atlas. Symbols with
    no orthologue produce no output.

    Examples:

        # Verbose report for genes.txt
        orthoatlas report

        # Tab-separated table, continuing past failed lookups
        orthoatlas report --file pig_genes.txt --format tabular --on-error skip
    """
    _run(ctx, symbol_file, output_mode, error_policy, _orthologue_resolver)


@click.command('lookup')
@report_options
@click.pass_context
def lookup(ctx, symbol_file, output_mode, error_policy):
    """Report HPA expression for human gene symbols.

    Symbols are mapped to Ensembl gene IDs with one batch lookup request;
    symbols Ensembl does not recognise produce no output.
    """
    _run(ctx, symbol_file, output_mode, error_policy, _symbol_lookup_resolver)
