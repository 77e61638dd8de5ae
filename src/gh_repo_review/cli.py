"""CLI entry point for gh-repo-review.

Reads repository payloads written by the fetch stage and prints the
deterministic review summary as JSON.
"""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gh_repo_review import __version__
from gh_repo_review.config import Config, load_config
from gh_repo_review.ingest import InputFormatError, load_repositories
from gh_repo_review.logging import get_logger, setup_logging
from gh_repo_review.models import AggregateSummary
from gh_repo_review.normalize import analyze

console = Console(stderr=True)
logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="gh-repo-review")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Deterministic GitHub repository review normalizer.

    Turns raw repository metadata into grounded summaries (language
    histogram, recent activity, per-repo strengths and weaknesses, and
    flattened text) before any AI model consumes them.

    \b
    Quick Start:
        gh-repo-review analyze repos.json
        gh-repo-review analyze repos.jsonl --summary --output review.json
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command("analyze")
@click.argument("input_path", type=click.Path(path_type=Path))
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to config.yaml file",
)
@click.option("--owner", default=None, help="Override the username derived from the input")
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["auto", "json", "jsonl"]),
    default=None,
    help="Input format (default: from config, else auto)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the result to this file instead of stdout",
)
@click.option(
    "--text-only",
    is_flag=True,
    default=False,
    help="Emit only the flattened repository details text",
)
@click.option(
    "--summary",
    is_flag=True,
    default=False,
    help="Print a table of aggregate counters to stderr",
)
@click.pass_context
def analyze_cmd(
    ctx: click.Context,
    input_path: Path,
    config: Path | None,
    owner: str | None,
    input_format: str | None,
    output: Path | None,
    text_only: bool,
    summary: bool,
) -> None:
    """Analyze repositories from INPUT_PATH and emit the review summary.

    INPUT_PATH is a JSON array of repository payloads (optionally wrapped as
    {"json": ...} items) or an enveloped JSONL file.
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        cfg = load_config(config) if config is not None else Config()
    except (FileNotFoundError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] Invalid config: {escape(str(e))}")
        raise click.Abort() from e

    setup_logging(verbose=verbose, json_format=cfg.logging.json_format)

    try:
        repositories = load_repositories(input_path, input_format or cfg.input.format)
    except (FileNotFoundError, InputFormatError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise click.Abort() from e

    result = analyze(repositories, owner_login=owner or cfg.analysis.owner_login)

    # Details text is emitted byte for byte; JSON gets a trailing newline
    text_only = text_only or cfg.output.text_only
    if text_only:
        rendered = result.repo_details_text
    else:
        rendered = result.to_json(indent=cfg.output.indent or None) + "\n"

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        logger.info("Wrote review summary to %s", output)
        console.print(f"[green]✓[/green] {output}")
    else:
        click.echo(rendered, nl=False)

    if summary:
        console.print(_summary_table(result))


def _summary_table(result: AggregateSummary) -> Table:
    table = Table(title=f"Repository review: {escape(result.github_username)}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total repos", str(result.total_repos))
    table.add_row("Recent repos", str(result.recent_repos))
    table.add_row("Profile strength", result.profile_strength)
    for language, count in result.languages.items():
        table.add_row(f"Language: {language}", str(count))

    return table


if __name__ == "__main__":
    main()
