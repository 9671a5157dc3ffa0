"""Title-driven renaming of documents, in place within their subdirectory."""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from ..kinds import KINDS, kind_for_filename
from ..models import Kind
from .parser import extract_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenameStep:
    """One pending rename. ``conflict`` marks a target already taken by another file."""

    source: Path
    target: Path
    kind: Kind
    title: str
    conflict: bool = False


def _is_taken(target: Path, source: Path) -> bool:
    if not target.exists():
        return False
    try:
        # Case-only renames on case-insensitive filesystems.
        return not target.samefile(source)
    except OSError:
        return True


def plan_rename(
    path: Path,
    base_dir: Path,
    kind: Kind | None = None,
    claimed: set[Path] | None = None,
) -> RenameStep | None:
    """Work out whether ``path`` needs a new name; reads the file, writes nothing.

    Returns None when the filename already matches the title, when the file
    has no title, or when no kind can be inferred from its name.
    ``claimed`` holds targets already promised to other files in this run.
    The file keeps its subdirectory below ``base_dir``; only the name changes.
    """
    if kind is None:
        kind = kind_for_filename(path.name)
        if kind is None:
            logger.debug(f"Skipping {path}: filename matches no document kind")
            return None

    title = extract_title(path)
    if title is None:
        logger.debug(f"Skipping {path}: no title heading")
        return None

    new_name = KINDS[Kind(kind)].title_to_filename(title, path.name)
    if new_name == path.name:
        return None

    # Renames never change the directory.
    target = path.parent / new_name
    conflict = _is_taken(target, path) or (claimed is not None and target in claimed)
    return RenameStep(source=path, target=target, kind=Kind(kind), title=title, conflict=conflict)


def apply_rename(step: RenameStep) -> Path:
    """Perform ``step`` and return the document's final path."""
    if step.conflict:
        logger.warning(f"Not renaming {step.source}: {step.target} already exists")
        return step.source

    if _is_taken(step.target, step.source):
        logger.warning(f"Not renaming {step.source}: {step.target} appeared since planning")
        return step.source

    step.source.rename(step.target)
    logger.info(f"Renamed: {step.source} -> {step.target}")
    return step.target


def sync_filename(path: Path, base_dir: Path, kind: Kind | None = None) -> Path:
    """Rename ``path`` to the canonical name for its current title, if it differs."""
    step = plan_rename(path, base_dir, kind)
    if step is None:
        return path
    return apply_rename(step)


def order_renames(steps: list[RenameStep], claimed: set[Path] | None = None) -> list[RenameStep]:
    """Settle conflicts against files that are themselves about to move.

    A target held by another document counts as free once that document's own
    rename is scheduled, so ``x -> y`` runs after ``y -> z``. Steps come back
    in execution order; whatever stays blocked (an occupied name, a name two
    documents want, or a swap cycle) is marked as a conflict at the end.
    ``claimed`` is updated with every scheduled target.
    """
    claimed = claimed if claimed is not None else set()
    pending = list(steps)
    vacated: set[Path] = set()
    ordered = []

    progress = True
    while pending and progress:
        progress = False
        for step in list(pending):
            if step.target in claimed:
                continue
            if step.conflict and step.target not in vacated:
                continue
            ordered.append(replace(step, conflict=False))
            claimed.add(step.target)
            vacated.add(step.source)
            pending.remove(step)
            progress = True

    return ordered + [replace(step, conflict=True) for step in pending]
