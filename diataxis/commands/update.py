"""Update command - rename documents after their titles and resync the README."""

import difflib
import logging
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from ..config import Config, load_config
from ..docs.locator import find_documents, load_documents
from ..docs.readme import collect_entries, read_index, render_index, update_index
from ..docs.renamer import apply_rename, order_renames, plan_rename
from ..errors import DiataxisError, FileSystemError
from ..kinds import ALL_KINDS
from ..models import Document, Kind
from ..planning import UpdatePlan, UpdateResult

logger = logging.getLogger(__name__)


def validate_directory(directory: Path) -> Path:
    directory = Path(directory).expanduser()
    if not directory.is_dir():
        raise FileSystemError(f"'{directory}' is not a valid directory.", path=directory, operation="directory_check")
    return directory.resolve()


def index_entries(config: Config, kinds: list[Kind]) -> dict[Kind, list[str]]:
    """Enumerate each kind afresh and format its README lines."""
    index_dir = config.readme_path.parent
    return {
        kind: collect_entries(kind, load_documents(find_documents(kind, config)), index_dir)
        for kind in kinds
    }


def refresh_index(config: Config, kinds: list[Kind]) -> bool:
    """README pass without renames; returns True when the README changed."""
    return update_index(config.readme_path, index_entries(config, kinds), kinds)


# -----------------------------------------------------------------------------
# compute (diagnostic) / execute (action)
# -----------------------------------------------------------------------------


def compute_update_plan(directory: Path, kinds: list[Kind] | None = None) -> UpdatePlan:
    """
    Compute the renames and the README text a resync would produce.

    This is the diagnostic phase - it reads documents but writes nothing.
    Post-rename paths are predicted from the planned renames, which are kept
    in execution order so a document leaves its name before another takes it.
    """
    kinds = list(kinds or ALL_KINDS)
    config = load_config(validate_directory(directory))

    renames = []
    documents: dict[Kind, list[Document]] = {}
    claimed: set[Path] = set()

    for kind in kinds:
        base_dir = config.directory_for(kind)
        loaded = load_documents(find_documents(kind, config))

        steps = []
        for doc in loaded:
            step = plan_rename(doc.path, base_dir, kind)
            if step is not None:
                steps.append(step)
        kind_renames = order_renames(steps, claimed)
        renames.extend(kind_renames)

        moved = {step.source: step.target for step in kind_renames if not step.conflict}
        predicted = [Document(path=moved.get(doc.path, doc.path), title=doc.title) for doc in loaded]
        documents[kind] = sorted(predicted, key=lambda d: str(d.path))

    logger.debug(f"Planned {len(renames)} renames across {len(kinds)} kinds")

    index_dir = config.readme_path.parent
    entries = {kind: collect_entries(kind, documents[kind], index_dir) for kind in kinds}
    existing = read_index(config.readme_path)
    updated = render_index(existing, entries, kinds, heading=config.readme_path.parent.name)

    return UpdatePlan(
        config=config,
        kinds=kinds,
        renames=renames,
        documents=documents,
        existing_content=existing,
        updated_content=updated,
    )


def execute_update_plan(plan: UpdatePlan) -> UpdateResult:
    """
    Execute an update plan.

    This is the action phase - renames each kind's files, re-enumerates them,
    and writes the README once all kinds' entries are known.
    """
    result = UpdateResult(readme_path=plan.config.readme_path)

    entries: dict[Kind, list[str]] = {}
    for kind in plan.kinds:
        for step in plan.renames_for(kind):
            final_path = apply_rename(step)
            if final_path == step.source:
                result.skipped.append(step)
            else:
                result.renamed.append((step.source, final_path))
        entries.update(index_entries(plan.config, [kind]))

    result.readme_changed = update_index(plan.config.readme_path, entries, plan.kinds)
    return result


def run_update(directory: Path, kinds: list[Kind] | None = None, dry_run: bool = False) -> int:
    """Rename documents to match their titles and resync the README.

    Args:
        directory: Directory to start configuration lookup from
        kinds: Document kinds to process (default: all)
        dry_run: If True, show what would be done without writing

    Returns:
        Exit code
    """
    console = Console(stderr=True)

    # Phase 1: Compute (diagnostic) - pure, no side effects
    try:
        plan = compute_update_plan(directory, kinds)
    except DiataxisError as e:
        console.print(f"Error: {e}", style="red")
        return 1

    # Dry-run mode: show plan and exit
    if dry_run:
        console.print("\n[bold]DRY RUN[/bold] - No changes will be made\n")
        console.print(plan.summary(), markup=False)
        if plan.readme_changed and plan.existing_content is not None:
            diff = "".join(
                difflib.unified_diff(
                    plan.existing_content.splitlines(keepends=True),
                    plan.updated_content.splitlines(keepends=True),
                    fromfile="README (current)",
                    tofile="README (updated)",
                )
            )
            console.print(Syntax(diff, "diff", theme="monokai"))
        return 0

    # Phase 2: Execute (action) - performs renames and the README write
    result = execute_update_plan(plan)

    # Individual renames and README writes are logged as they happen.
    if result.skipped:
        console.print(f"{len(result.skipped)} document(s) kept their name: target already exists", style="yellow")
    if not result.renamed and not result.readme_changed:
        console.print("README is in sync with documents", style="dim")
    return 0
