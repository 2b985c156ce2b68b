"""Main CLI application entry point."""

import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .. import __version__
from ..catalog import get_default_registry
from ..config.harness_config import HarnessConfig, load_config
from ..core.exceptions import NotFoundError
from ..core.registry import ExampleRegistry
from ..core.runner import ExampleRunner
from ..models.example_models import ExampleDescription, PatternCategory, RunSummary
from ..reporters import REPORT_FORMATS, get_reporter

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NOT_FOUND = 2

CATEGORY_CHOICE = click.Choice([c.value for c in PatternCategory])


def _load_env() -> None:
    """Load a .env file from the working directory, if present."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)


def _configure_logging(verbose: bool, config: HarnessConfig) -> None:
    log_level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _registry(ctx: click.Context) -> ExampleRegistry:
    return ctx.obj["registry"]


def _config(ctx: click.Context) -> HarnessConfig:
    return ctx.obj["config"]


@click.group()
@click.version_option(__version__, prog_name="patternbench")
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Config file path",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[str]) -> None:
    """
    PatternBench - run Gang-of-Four pattern examples through one harness.

    List the catalogue:
        patternbench list

    Run every example:
        patternbench run --all

    Run one example:
        patternbench run --name Strategy
    """
    _load_env()
    config = load_config(config_path)
    _configure_logging(verbose, config)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    if "registry" not in ctx.obj:
        ctx.obj["registry"] = get_default_registry()


@main.command("list")
@click.option("--category", type=CATEGORY_CHOICE, help="Only list one pattern family")
@click.pass_context
def list_examples(ctx: click.Context, category: Optional[str]) -> None:
    """List registered examples with their category."""
    for definition in _registry(ctx).all():
        if category and definition.category.value != category:
            continue
        click.echo(f"{definition.name}\t{definition.category.value}")


@main.command("run")
@click.option("--all", "run_all", is_flag=True, help="Run every registered example")
@click.option("--name", help="Run a single example by pattern name")
@click.option("--category", type=CATEGORY_CHOICE, help="With --all, only run one pattern family")
@click.option(
    "--format", "output_format",
    type=click.Choice(REPORT_FORMATS),
    help="Report format (default from config: text)",
)
@click.pass_context
def run_examples(
    ctx: click.Context,
    run_all: bool,
    name: Optional[str],
    category: Optional[str],
    output_format: Optional[str],
) -> None:
    """
    Run examples and report their outcome.

    Exit code 0 when every example succeeded, 1 otherwise, 2 when --name
    does not match a registered example.
    """
    if run_all == bool(name):
        raise click.UsageError("Pass exactly one of --all or --name")
    if category and not run_all:
        raise click.UsageError("--category can only be combined with --all")

    config = _config(ctx)
    runner = ExampleRunner(
        _registry(ctx),
        time_budget_seconds=config.time_budget_seconds,
    )

    if run_all:
        results = runner.run_all(PatternCategory(category) if category else None)
    else:
        try:
            results = [runner.run_one(name)]
        except NotFoundError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            ctx.exit(EXIT_NOT_FOUND)

    reporter = get_reporter(output_format or config.output_format)
    click.echo(reporter.generate_report(results))

    summary = RunSummary.from_results(results)
    ctx.exit(EXIT_OK if summary.passed else EXIT_FAILED)


@main.command("describe")
@click.argument("name")
@click.pass_context
def describe_example(ctx: click.Context, name: str) -> None:
    """Show an example's intent and expected outcome."""
    try:
        definition = _registry(ctx).lookup(name)
    except NotFoundError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        ctx.exit(EXIT_NOT_FOUND)

    try:
        description = definition.factory().describe()
    except Exception as e:
        logger.warning(f"Could not construct {definition.name} for describe: {e}")
        description = ExampleDescription(name=definition.name, intent=definition.intent)

    body = f"[bold]{escape(description.intent or definition.intent)}[/bold]\n\n"
    body += f"Category: {definition.category.value}\n"
    if definition.expected_outcome:
        body += "Expected output:\n"
        body += "\n".join(f"  {escape(line)}" for line in definition.expected_outcome)
    else:
        body += "Expected output: not declared"

    Console().print(Panel(body, title=description.name, border_style="blue"))


if __name__ == "__main__":
    main()
