"""README maintenance: one delimited section per document kind.

Each kind owns a block shaped like::

    ### How-To Guides

    <!-- howtolog -->
    * [How to configure system](how-to/how_to_configure_system.md)
    <!-- howtologstop -->

Only text strictly between a kind's own markers is rewritten. A kind whose
document list becomes empty loses its whole block, heading included; a kind
that gains its first document gets a new block appended to the end.
Everything else in the file is left exactly as written.
"""

import logging
import os
from pathlib import Path

from ..kinds import KINDS
from ..models import Document, Kind, KindDescriptor

logger = logging.getLogger(__name__)

README_SKELETON = "# {heading}\n\n## Description\n\n## Usage\n\n## Appendix\n"


def collect_entries(kind: Kind, documents: list[Document], index_dir: Path) -> list[str]:
    """Format one README line per document, linking relative to ``index_dir``."""
    descriptor = KINDS[Kind(kind)]
    entries = []
    for doc in documents:
        relative_path = Path(os.path.relpath(doc.path, index_dir)).as_posix()
        entries.append(descriptor.format_entry(doc.title, relative_path, doc.path))
    return entries


def _section_heading(descriptor: KindDescriptor) -> str:
    return f"### {descriptor.section_title}"


def _section_block(descriptor: KindDescriptor, entries: list[str], newline: str = "\n") -> str:
    lines = [_section_heading(descriptor), "", descriptor.start_marker, *entries, descriptor.stop_marker]
    return newline.join(lines) + newline


def _marker_spans(content: str, descriptor: KindDescriptor) -> list[tuple[int, int]]:
    """(start-marker offset, stop-marker offset) for each complete marker pair."""
    spans = []
    pos = 0
    while True:
        start = content.find(descriptor.start_marker, pos)
        if start == -1:
            break
        stop = content.find(descriptor.stop_marker, start + len(descriptor.start_marker))
        if stop == -1:
            break
        spans.append((start, stop))
        pos = stop + len(descriptor.stop_marker)
    return spans


def _replace_sections(
    content: str,
    descriptor: KindDescriptor,
    spans: list[tuple[int, int]],
    entries: list[str],
    newline: str = "\n",
) -> str:
    body = newline + newline.join(entries) + newline
    for start, stop in reversed(spans):
        inner_start = start + len(descriptor.start_marker)
        content = content[:inner_start] + body + content[stop:]
    return content


def _remove_sections(content: str, descriptor: KindDescriptor, spans: list[tuple[int, int]]) -> str:
    heading = _section_heading(descriptor)
    for start, stop in reversed(spans):
        cut_from = start
        before = content[:start].rstrip()
        if before.endswith(heading):
            candidate = len(before) - len(heading)
            if candidate == 0 or content[candidate - 1] == "\n":
                cut_from = candidate

        cut_to = stop + len(descriptor.stop_marker)
        while cut_to < len(content) and content[cut_to] in "\r\n":
            cut_to += 1

        content = content[:cut_from] + content[cut_to:]
    return content


def _append_section(content: str, descriptor: KindDescriptor, entries: list[str], newline: str = "\n") -> str:
    block = _section_block(descriptor, entries, newline)
    if not content.strip():
        return block
    return content.rstrip("\r\n") + newline * 2 + block


def _finish(content: str, newline: str = "\n") -> str:
    return content.rstrip("\r\n") + newline


def _line_ending(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def render_new_index(heading: str, entries_by_kind: dict[Kind, list[str]], kinds: list[Kind]) -> str:
    """Build a README from scratch; kinds without entries get no section."""
    content = README_SKELETON.format(heading=heading)
    sections = [
        _section_block(KINDS[Kind(kind)], entries_by_kind[kind])
        for kind in kinds
        if entries_by_kind.get(kind)
    ]
    if sections:
        content += "\n" + "\n".join(sections)
    return _finish(content)


def render_index(
    existing: str | None,
    entries_by_kind: dict[Kind, list[str]],
    kinds: list[Kind],
    heading: str = "Documentation",
) -> str:
    """Return the README text after applying ``entries_by_kind`` for ``kinds``.

    Pure function: ``existing`` is the current README text, or None when the
    file does not exist yet. Kinds not listed in ``kinds`` are not touched.
    A README written with CRLF line endings keeps them, generated lines included.
    """
    if existing is None:
        return render_new_index(heading, entries_by_kind, kinds)

    newline = _line_ending(existing)
    content = existing
    for kind in kinds:
        descriptor = KINDS[Kind(kind)]
        entries = entries_by_kind.get(kind, [])
        spans = _marker_spans(content, descriptor)

        if not spans and descriptor.start_marker in content:
            logger.warning(
                f"README has {descriptor.start_marker} without {descriptor.stop_marker}; "
                f"leaving the {descriptor.section_title} section alone"
            )
            continue

        if spans and entries:
            content = _replace_sections(content, descriptor, spans, entries, newline)
        elif spans:
            content = _remove_sections(content, descriptor, spans)
        elif entries:
            content = _append_section(content, descriptor, entries, newline)

    return _finish(content, newline)


def read_index(index_path: Path) -> str | None:
    """Return the README text with its line endings untranslated."""
    if not index_path.exists():
        return None
    with index_path.open(encoding="utf-8", newline="") as f:
        return f.read()


def update_index(index_path: Path, entries_by_kind: dict[Kind, list[str]], kinds: list[Kind]) -> bool:
    """Rewrite the README at ``index_path``; returns True when the file changed."""
    existing = read_index(index_path)
    updated = render_index(existing, entries_by_kind, kinds, heading=index_path.parent.name)
    if updated == existing:
        logger.debug(f"README unchanged: {index_path}")
        return False

    index_path.parent.mkdir(parents=True, exist_ok=True)
    index_path.write_text(updated, encoding="utf-8", newline="")
    if existing is None:
        logger.info(f"Created new README in {index_path.parent}")
    else:
        logger.info(f"Updated README: {index_path}")
    return True
