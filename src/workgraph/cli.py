from workgraph._version import __version__
import click
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional
from pydantic import ValidationError
from workgraph.config import load_config
from workgraph.core import analyze_workspace
from workgraph.errors import WorkgraphError

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__)
def cli():
    """Map dependencies between the modules and packages of a Go workspace"""
    pass


def _run(root: str, config_path: Optional[str], strict: bool, verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(Path(config_path) if config_path else Path(root) / "pyproject.toml")
        if strict:
            config = config.model_copy(update={"strict": True})
        report = analyze_workspace(root, config=config, verbose=verbose)
    except (WorkgraphError, ValidationError) as e:
        logger.error(f"❌ Error: {e}")
        if verbose:
            logger.error(f"Stack trace:\n{traceback.format_exc()}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for issue in report.issues:
        click.echo(f"Warning: {issue}", err=True)
    return report


_root_argument = click.argument("root", type=click.Path(exists=True, file_okay=False))
_config_option = click.option(
    "--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False),
    help="TOML file with a [tool.workgraph] table",
)
_strict_option = click.option("--strict", is_flag=True, help="Fail on skipped files or edges")
_verbose_option = click.option("--verbose", "-v", is_flag=True, help="Verbose output")


@cli.command()
@_root_argument
@_config_option
@_strict_option
@_verbose_option
def packages(root: str, config_path: Optional[str], strict: bool, verbose: bool) -> None:
    """Print package -> workspace package dependencies as JSON"""
    report = _run(root, config_path, strict, verbose)
    click.echo(json.dumps(report.package_graph, indent=2, sort_keys=True))


@cli.command()
@_root_argument
@_config_option
@_strict_option
@_verbose_option
def modules(root: str, config_path: Optional[str], strict: bool, verbose: bool) -> None:
    """Print member module -> member module dependencies as JSON"""
    report = _run(root, config_path, strict, verbose)
    click.echo(json.dumps(report.module_graph, indent=2, sort_keys=True))
