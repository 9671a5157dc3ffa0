"""Data models for documentation kinds and documents."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable


class Kind(str, Enum):
    """The closed set of document kinds."""

    HOWTO = "howto"
    TUTORIAL = "tutorial"
    EXPLANATION = "explanation"
    ADR = "adr"
    HANDOVER = "handover"
    FIVE_WHY = "5why"
    NOTE = "note"
    PROJECT = "project"


@dataclass(frozen=True)
class KindDescriptor:
    """Naming, discovery and index rules for one document kind.

    Every field is plain data or a pure function; nothing here touches the
    filesystem except ``next_filename``, which inspects the target directory.
    """

    kind: Kind
    config_key: str
    default_dir: str
    file_glob: str  # basename glob, e.g. "how_to_*.md"
    section_title: str  # "### <section_title>" in the README
    marker: str  # <!-- {marker}log --> ... <!-- {marker}logstop -->
    template: str  # template filename under diataxis/templates
    title_to_filename: Callable[[str, str | None], str]
    matches_filename: Callable[[str], bool]
    format_entry: Callable[[str, str, Path], str]
    normalize_title: Callable[[str], str]
    next_filename: Callable[[str, Path], str]

    def pattern(self, root: Path | str) -> str:
        """Recursive glob for this kind under ``root`` (zero or more subdirectories)."""
        return str(Path(root) / "**" / self.file_glob)

    @property
    def start_marker(self) -> str:
        return f"<!-- {self.marker}log -->"

    @property
    def stop_marker(self) -> str:
        return f"<!-- {self.marker}logstop -->"


@dataclass(frozen=True)
class Document:
    """A discovered document; the title is whatever its first heading says right now."""

    path: Path
    title: str
