"""
Plan/result types for commands that write to the documentation tree.

Each write command is split in two phases:
- compute: read the tree and decide what would change (no side effects)
- execute: perform the renames and writes the plan describes

The split gives every write command a ``--dry-run`` for free.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from .config import Config
from .docs.renamer import RenameStep
from .models import Document, Kind


@dataclass
class BasePlan(ABC):
    """Base class for operation plans (diagnostic output)."""
    config: Config

    @abstractmethod
    def summary(self) -> str:
        """Human-readable summary of what would be done."""
        ...


@dataclass
class BaseResult:
    """Base class for operation results (action output)."""
    success: bool = True
    error: str | None = None


# Create Plan/Result
@dataclass
class CreatePlan(BasePlan):
    """Plan for creating one new document."""
    kind: Kind
    title: str
    target_path: Path
    content: str
    refresh_kinds: list[Kind] = field(default_factory=list)

    def summary(self) -> str:
        lines = [
            f"Create Plan ({self.kind.name.lower()})",
            f"  Title: {self.title}",
            f"  Target: {self.target_path}",
            f"  README: {self.config.readme_path}",
            f"  Sections refreshed: {', '.join(k.name.lower() for k in self.refresh_kinds) or 'none'}",
        ]
        if self.target_path.exists():
            lines.append("  [CONFLICT] Target already exists; nothing will be written")
        return "\n".join(lines)


@dataclass
class CreateResult(BaseResult):
    """Result of document creation."""
    path: Path | None = None
    readme_changed: bool = False


# Update Plan/Result
@dataclass
class UpdatePlan(BasePlan):
    """Plan for a full resync: renames first, then one README write."""
    kinds: list[Kind] = field(default_factory=list)
    renames: list[RenameStep] = field(default_factory=list)
    documents: dict[Kind, list[Document]] = field(default_factory=dict)
    existing_content: str | None = None
    updated_content: str = ""

    @property
    def readme_changed(self) -> bool:
        return self.updated_content != self.existing_content

    def renames_for(self, kind: Kind) -> list[RenameStep]:
        return [step for step in self.renames if step.kind == kind]

    def summary(self) -> str:
        lines = [
            "Update Plan",
            f"  Root: {self.config.root}",
            f"  README: {self.config.readme_path}",
        ]
        for kind in self.kinds:
            lines.append(f"  {kind.name.lower()}: {len(self.documents.get(kind, []))} documents")

        actionable = [s for s in self.renames if not s.conflict]
        conflicts = [s for s in self.renames if s.conflict]
        lines.append(f"  Renames: {len(actionable)}")
        for step in actionable:
            lines.append(f"    {step.source} -> {step.target.name}")
        if conflicts:
            lines.append(f"  Skipped (target exists): {len(conflicts)}")
            for step in conflicts:
                lines.append(f"    {step.source} -/-> {step.target.name}")

        if self.existing_content is None:
            lines.append("  README will be created")
        elif self.readme_changed:
            existing_len = len(self.existing_content.encode("utf-8"))
            updated_len = len(self.updated_content.encode("utf-8"))
            lines.append(f"  README size change: {existing_len} -> {updated_len} bytes")
        else:
            lines.append("  README unchanged")
        return "\n".join(lines)


@dataclass
class UpdateResult(BaseResult):
    """Result of a resync."""
    renamed: list[tuple[Path, Path]] = field(default_factory=list)
    skipped: list[RenameStep] = field(default_factory=list)
    readme_path: Path | None = None
    readme_changed: bool = False
