"""Create command - write a new document and refresh the README."""

import logging
from pathlib import Path

from rich.console import Console

from ..config import load_config
from ..errors import DiataxisError, DocumentError
from ..kinds import KINDS
from ..models import Kind
from ..planning import CreatePlan, CreateResult
from ..templates import render_document
from .update import refresh_index

logger = logging.getLogger(__name__)

_BASE_SECTIONS = [Kind.HOWTO, Kind.TUTORIAL, Kind.EXPLANATION]

# README sections refreshed after creating each kind.
REFRESH_KINDS: dict[Kind, list[Kind]] = {
    Kind.HOWTO: _BASE_SECTIONS,
    Kind.TUTORIAL: _BASE_SECTIONS,
    Kind.EXPLANATION: _BASE_SECTIONS,
    Kind.ADR: [Kind.HOWTO, Kind.TUTORIAL, Kind.ADR],
    Kind.HANDOVER: _BASE_SECTIONS + [Kind.HANDOVER],
    Kind.FIVE_WHY: _BASE_SECTIONS + [Kind.HANDOVER, Kind.FIVE_WHY],
    Kind.NOTE: _BASE_SECTIONS + [Kind.HANDOVER, Kind.FIVE_WHY, Kind.NOTE],
    Kind.PROJECT: _BASE_SECTIONS + [Kind.HANDOVER, Kind.FIVE_WHY, Kind.NOTE, Kind.PROJECT],
}


def normalize_title(kind: Kind, title: str | None) -> str:
    """Apply the kind's creation-time title rule; an empty result is rejected."""
    normalized = KINDS[Kind(kind)].normalize_title(title or "")
    if not normalized:
        raise DocumentError("A non-empty title is required.", kind=Kind(kind).value, title=title)
    return normalized


# -----------------------------------------------------------------------------
# compute (diagnostic) / execute (action)
# -----------------------------------------------------------------------------


def compute_create_plan(
    kind: Kind,
    title: str,
    directory: Path,
    refresh_kinds: list[Kind] | None = None,
) -> CreatePlan:
    """
    Compute the path and content of a new document without writing it.

    Raises DocumentError for an empty title before anything is read.
    """
    kind = Kind(kind)
    normalized = normalize_title(kind, title)

    config = load_config(directory)
    target_dir = config.directory_for(kind)
    filename = KINDS[kind].next_filename(normalized, target_dir)

    variables = {}
    if kind is Kind.ADR:
        variables["number"] = int(filename[:4])
    content = render_document(kind, normalized, **variables)

    return CreatePlan(
        config=config,
        kind=kind,
        title=normalized,
        target_path=target_dir / filename,
        content=content,
        refresh_kinds=list(refresh_kinds if refresh_kinds is not None else REFRESH_KINDS[kind]),
    )


def execute_create_plan(plan: CreatePlan) -> CreateResult:
    """
    Execute a create plan.

    This is the action phase - writes the document, then refreshes the README
    sections of ``plan.refresh_kinds``.
    """
    if plan.target_path.exists():
        raise DocumentError(
            f"{plan.target_path} already exists.",
            kind=plan.kind.value,
            title=plan.title,
        )

    plan.target_path.parent.mkdir(parents=True, exist_ok=True)
    plan.target_path.write_text(plan.content, encoding="utf-8")
    logger.info(f"Created new {plan.kind.name.lower()}: {plan.target_path}")

    readme_changed = refresh_index(plan.config, plan.refresh_kinds)
    return CreateResult(path=plan.target_path, readme_changed=readme_changed)


def create_document(
    kind: Kind,
    title: str,
    directory: Path,
    refresh_kinds: list[Kind] | None = None,
) -> Path:
    """Create a document and refresh the README; returns the new file's path."""
    plan = compute_create_plan(kind, title, directory, refresh_kinds)
    return execute_create_plan(plan).path


def run_create(kind: Kind, title: str, directory: Path, dry_run: bool = False) -> int:
    """Create a new document of ``kind``.

    Args:
        kind: Document kind to create
        title: Raw title as typed by the user
        directory: Directory to start configuration lookup from
        dry_run: If True, show what would be done without writing

    Returns:
        Exit code
    """
    console = Console(stderr=True)

    try:
        plan = compute_create_plan(kind, title, directory)
    except DiataxisError as e:
        console.print(f"Error: {e}", style="red")
        return 1

    if dry_run:
        console.print("\n[bold]DRY RUN[/bold] - No changes will be made\n")
        console.print(plan.summary(), markup=False)
        return 0

    try:
        result = execute_create_plan(plan)
    except DiataxisError as e:
        console.print(f"Error: {e}", style="red")
        return 1

    if not result.readme_changed:
        console.print("README already up to date", style="dim")
    return 0
