"""Recursive document discovery, scoped to each kind's configured directory."""

import logging
from pathlib import Path

from ..config import CONFIG_FILE, Config
from ..kinds import KINDS
from ..models import Document, Kind
from .parser import extract_title

logger = logging.getLogger(__name__)


def _inside_nested_tree(path: Path, base_dir: Path) -> bool:
    """True when a directory between ``path`` and ``base_dir`` has its own config marker."""
    for parent in path.parents:
        if parent == base_dir or parent == parent.parent:
            return False
        if (parent / CONFIG_FILE).is_file():
            return True
    return False


def find_documents(kind: Kind, config: Config) -> list[Path]:
    """Return every file of ``kind`` below its configured directory, sorted by path.

    Matching descends any number of subdirectories (including none). Files that
    belong to a nested tree with its own ``.diataxis`` are left to that tree.
    """
    kind = Kind(kind)
    descriptor = KINDS[kind]
    base_dir = config.directory_for(kind)
    if not base_dir.is_dir():
        logger.debug(f"No {kind.name.lower()} directory at {base_dir}")
        return []

    files = []
    for path in base_dir.rglob(descriptor.file_glob):
        if not path.is_file():
            continue
        # Skip hidden files and directories
        if any(part.startswith(".") for part in path.relative_to(base_dir).parts):
            continue
        if _inside_nested_tree(path, base_dir):
            logger.debug(f"Skipping {path}: belongs to a nested documentation tree")
            continue
        files.append(path)

    files.sort(key=str)
    logger.info(f"Found {len(files)} {kind.name.lower()} files matching {descriptor.pattern(base_dir)}")
    return files


def load_documents(paths: list[Path]) -> list[Document]:
    """Pair each path with its current title; files without one are dropped."""
    documents = []
    for path in paths:
        title = extract_title(path)
        if title is None:
            logger.debug(f"No title found in {path}; not listed")
            continue
        documents.append(Document(path=path, title=title))
    return documents
