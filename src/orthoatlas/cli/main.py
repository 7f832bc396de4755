"""Main CLI entry point for orthoatlas.

Provides command group with global options and subcommands for report runs.
"""

import logging
from pathlib import Path

import click
import structlog

from orthoatlas import __version__
from orthoatlas.config.loader import load_config_with_overrides
from orthoatlas.cli.report_cmd import lookup, report


# Configure logging; stdout is reserved for the report itself
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


@click.group()
@click.version_option(__version__, prog_name="orthoatlas")
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Path to YAML configuration file (default: built-in settings)'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose logging (DEBUG level)'
)
@click.pass_context
def cli(ctx, config, verbose):
    """Orthoatlas: human orthologue expression reports for pig gene symbols.

    Resolves each pig gene symbol to its human orthologue(s) with the Ensembl
    REST API and prints tissue and cell type specificity from the Human
    Protein Atlas.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['verbose'] = verbose

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Verbose logging enabled")


@cli.command()
@click.pass_context
def info(ctx):
    """Display version and effective configuration."""
    config_path = ctx.obj['config_path']

    click.echo(f"Orthoatlas v{__version__}")
    click.echo(f"Config: {config_path or '(built-in defaults)'}")
    click.echo()

    try:
        config = load_config_with_overrides(config_path, {})

        config_hash = config.config_hash()
        click.echo(f"Config Hash: {config_hash[:16]}...")
        click.echo()

        click.echo(click.style("Ensembl:", bold=True))
        click.echo(f"  Base URL:       {config.ensembl.base_url}")
        click.echo(f"  Source species: {config.ensembl.source_species}")
        click.echo(
            f"  Target species: {config.ensembl.target_species} "
            f"(taxon {config.ensembl.target_taxon})"
        )
        click.echo(f"  Homology type:  {config.ensembl.homology_type}")
        click.echo()

        click.echo(click.style("Protein Atlas:", bold=True))
        click.echo(f"  Base URL: {config.protein_atlas.base_url}")
        click.echo()

        click.echo(click.style("Report:", bold=True))
        click.echo(f"  Output mode:  {config.report.output_mode}")
        click.echo(f"  Error policy: {config.report.error_policy}")
        click.echo(f"  Timeout:      {config.api.timeout_seconds}s")

    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)


# Register commands
cli.add_command(report)
cli.add_command(lookup)


if __name__ == '__main__':
    cli()
