"""Command-line interface for Baseline Coach."""

import logging
from pathlib import Path
from typing import Optional

import click  # type: ignore
from dotenv import load_dotenv  # type: ignore
from rich.console import Console  # type: ignore
from rich.table import Table  # type: ignore

from .core.aggregator import EXIT_ERROR, evaluate_policy
from .core.catalog import get_default_catalog
from .core.config import CoachConfig
from .core.resolver import FeatureResolver
from .core.scanner import BaselineScanner
from .models.feature import Classification

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
def cli():
    """Baseline Coach - flag web platform features that are not yet widely available."""
    pass


@cli.command()
@click.option('--path', 'scan_path',
              default=None,
              help='Root directory to scan (default: .)',
              type=click.Path(exists=True, file_okay=False, dir_okay=True))
@click.option('--exts',
              default=None,
              help='Comma-separated file extensions (default: js,ts,css,html)')
@click.option('--format',
              'output_format',
              default=None,
              help='Output format (console/json/markdown)',
              type=click.Choice(['console', 'json', 'markdown']))
@click.option('--fail-on',
              default=None,
              help='Exit non-zero on limited (2) or on newly/limited (3) findings',
              type=click.Choice(['none', 'limited', 'newly']))
@click.option('--config',
              help='Path to configuration file',
              type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--output',
              help='Also write the report to this file (JSON unless --format markdown)',
              type=click.Path())
@click.option('--workers',
              default=None,
              help='Worker threads for scanning files',
              type=click.IntRange(min=1))
@click.option('--verbose',
              is_flag=True,
              help='Enable verbose output')
@click.pass_context
def scan(ctx: click.Context,
         scan_path: Optional[str],
         exts: Optional[str],
         output_format: Optional[str],
         fail_on: Optional[str],
         config: Optional[str],
         output: Optional[str],
         workers: Optional[int],
         verbose: bool):
    """
    Scan a directory and report each feature usage's Baseline status.

    Exit codes: 0 normally, 2 when --fail-on limited finds a limited feature,
    3 when --fail-on newly finds a limited or newly available feature,
    1 when the scan itself fails.

    \b
    # Basic usage
    baseline-coach scan --path ./site
    \b
    # CI gate on anything not yet widely available
    baseline-coach scan --path ./site --format json --fail-on newly
    """
    exit_code = EXIT_ERROR
    try:
        config_dict = {}
        if config:
            config_dict = CoachConfig.from_file(config).model_dump()

        overrides = {
            "path": scan_path,
            "extensions": exts,
            "output_format": output_format,
            "fail_on": fail_on,
            "max_workers": workers,
        }
        config_dict.update({k: v for k, v in overrides.items() if v is not None})
        if verbose:
            config_dict["verbose"] = True

        coach_config = CoachConfig(**config_dict)
        _configure_logging(coach_config.verbose)

        report = BaselineScanner(coach_config).scan()

        # Write the file first so a failed save leaves stdout empty
        if output:
            save_format = "markdown" if coach_config.output_format == "markdown" else "json"
            report.save(output, save_format)
            logger.info("Report saved to %s", output)

        if coach_config.output_format == "json":
            click.echo(report.to_json())
        elif coach_config.output_format == "markdown":
            click.echo(report.to_markdown())
        else:
            report.display(Console())

        exit_code = evaluate_policy(report, coach_config.fail_on).exit_code

    except Exception as e:
        click.echo(f"Baseline Coach failed: {e}", err=True)
        if verbose:
            import traceback
            click.echo(traceback.format_exc(), err=True)

    ctx.exit(exit_code)


@cli.command()
@click.argument('feature_id')
@click.pass_context
def info(ctx: click.Context, feature_id: str):
    """Describe one feature's Baseline status."""
    feature = FeatureResolver().resolve(feature_id)
    if feature is None:
        click.echo(f"Unknown feature: {feature_id}", err=True)
        ctx.exit(EXIT_ERROR)

    source = get_default_catalog().source_name
    click.echo(feature.name)
    click.echo(f"Baseline: {feature.status_text()}")
    if feature.description:
        click.echo(feature.description)
    click.echo(f"Source: {'web-features dataset' if source == 'dataset' else 'built-in catalog'}")


@cli.command()
def features():
    """List every feature in the catalog."""
    catalog = get_default_catalog()
    styles = {
        Classification.WIDELY_AVAILABLE: "green",
        Classification.NEWLY_AVAILABLE: "yellow",
        Classification.LIMITED: "red",
    }

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Feature", style="cyan")
    table.add_column("Name")
    table.add_column("Baseline")
    table.add_column("Since", justify="right")

    for feature in catalog.entries():
        table.add_row(
            feature.id,
            feature.name,
            f"[{styles[feature.classification]}]{feature.classification.value}[/]",
            feature.since or "",
        )

    console = Console()
    console.print(table)
    console.print(f"[dim]{len(catalog)} features ({catalog.source_name})[/dim]")


@cli.command()
@click.option('--config-template',
              default='baseline_coach.yaml',
              help='Output file for configuration template')
def init_config(config_template: str):
    """Generate a configuration template file."""
    CoachConfig().save(config_template)
    click.echo(f"📄 Configuration template created: {config_template}")
    click.echo("Edit the file with your settings and use with --config option")


def main() -> None:
    load_dotenv(Path.cwd() / ".env")
    cli()


if __name__ == '__main__':
    main()
