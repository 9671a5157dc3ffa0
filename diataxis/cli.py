"""CLI entrypoint for diataxis."""

import sys
from pathlib import Path

import click

from . import __version__
from .models import Kind

# command name -> (kind, help text)
DOCUMENT_COMMANDS: dict[str, tuple[Kind, str]] = {
    "howto": (Kind.HOWTO, "How-to guides (how_to_*.md)."),
    "tutorial": (Kind.TUTORIAL, "Tutorials (tutorial_*.md)."),
    "adr": (Kind.ADR, "Architectural decision records (NNNN-*.md)."),
    "explanation": (Kind.EXPLANATION, "Explanations (understanding_*.md)."),
    "handover": (Kind.HANDOVER, "Handover documents (handover_*.md)."),
    "5why": (Kind.FIVE_WHY, "Five-why root cause analyses (5why_*.md)."),
    "note": (Kind.NOTE, "Quick-reference notes (note_*.md)."),
    "project": (Kind.PROJECT, "GTD-style project documents (project_*.md)."),
}


@click.group()
@click.version_option(__version__, "--version", "-v", prog_name="diataxis")
@click.option("--verbose", "-V", is_flag=True, help="Enable verbose output (debug level)")
@click.option("--quiet", "-q", is_flag=True, help="Suppress informational output (warnings only)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """diataxis - Create documentation by kind and keep README.md in sync.

    Documents are renamed after their first heading, and README.md carries one
    generated section per document kind.

    Environment variables:

        DIATAXIS_LOG_LEVEL  DEBUG, INFO, WARN, ERROR or FATAL

        DIATAXIS_QUIET      set to 'true' to suppress informational output
    """
    from .log import configure_logging

    ctx.ensure_object(dict)
    configure_logging(verbose=verbose, quiet=quiet)


@cli.command()
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=Path("."),
)
@click.option("--force", is_flag=True, help="Overwrite an existing .diataxis file")
def init(directory: Path, force: bool) -> None:
    """Write a default .diataxis configuration into DIRECTORY."""
    from rich.console import Console

    from .config import write_default_config
    from .errors import ConfigurationError

    console = Console(stderr=True)
    try:
        config_path = write_default_config(directory, force=force)
    except ConfigurationError as e:
        console.print(f"Error: {e}", style="red")
        sys.exit(1)
    console.print(f"Created {config_path} with default configuration", style="green")
    sys.exit(0)


@cli.command()
@click.argument("directory", type=click.Path(path_type=Path), default=Path("."))
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show what would be done without executing (diagnostic only)",
)
def update(directory: Path, dry_run: bool) -> None:
    """Rename documents after their titles and update README.md.

    Examples:

        diataxis update .

        diataxis update docs --dry-run
    """
    from .commands.update import run_update

    try:
        exit_code = run_update(directory, dry_run=dry_run)
    except OSError as e:
        raise click.ClickException(str(e))
    sys.exit(exit_code)


def _document_group(name: str, kind: Kind, help_text: str) -> click.Group:
    @click.group(name=name, help=help_text)
    def group() -> None:
        pass

    @group.command("new")
    @click.argument("title", nargs=-1, required=True)
    @click.option(
        "--dry-run",
        is_flag=True,
        help="Show what would be done without executing (diagnostic only)",
    )
    def new(title: tuple[str, ...], dry_run: bool) -> None:
        """Create a new document titled TITLE and update README.md."""
        from .commands.create import run_create

        try:
            exit_code = run_create(kind, " ".join(title), Path.cwd(), dry_run=dry_run)
        except OSError as e:
            raise click.ClickException(str(e))
        sys.exit(exit_code)

    return group


for _name, (_kind, _help) in DOCUMENT_COMMANDS.items():
    cli.add_command(_document_group(_name, _kind, _help))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
