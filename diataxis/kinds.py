"""The document kind table.

Each kind is one frozen :class:`KindDescriptor`; behavior differences between
kinds live in the small functions below, selected by :class:`Kind`.
"""

import re
from functools import partial
from pathlib import Path

from .models import Kind, KindDescriptor

ADR_FILENAME = re.compile(r"^(\d{4})-.*\.md$")
ADR_ORDINAL = re.compile(r"^\d+\.\s+")
ADR_GLOB = "[0-9][0-9][0-9][0-9]-*.md"

_TRAILING_PUNCTUATION = re.compile(r"[.!?]\s*$")
_HOWTO_PREFIX = re.compile(r"^how to\s+", re.IGNORECASE)
_UNDERSTANDING_PREFIX = re.compile(r"^understanding\s+", re.IGNORECASE)
_PROJECT_PREFIX = re.compile(r"^project:\s*", re.IGNORECASE)


def slugify(text: str, separator: str = "_") -> str:
    """Lower-case ``text`` and collapse every non-alphanumeric run into ``separator``."""
    slug = re.sub(r"[^a-z0-9]+", separator, text.lower())
    return slug.strip(separator)


# -----------------------------------------------------------------------------
# Filename rules
# -----------------------------------------------------------------------------


def _prefixed_filename(prefix: str, strip: re.Pattern | None, title: str, existing: str | None = None) -> str:
    if strip is not None:
        title = strip.sub("", title)
    return f"{prefix}_{slugify(title)}.md"


def _prefix_matcher(prefix: str, name: str) -> bool:
    return name.startswith(f"{prefix}_") and name.endswith(".md")


def _adr_filename(title: str, existing: str | None = None) -> str:
    match = ADR_FILENAME.match(existing or "")
    number = match.group(1) if match else "0001"
    return f"{number}-{slugify(ADR_ORDINAL.sub('', title), '-')}.md"


def _adr_matches(name: str) -> bool:
    return ADR_FILENAME.match(name) is not None


def adr_numbers(directory: Path) -> list[int]:
    """Ordinals already taken by ADR files anywhere below ``directory``."""
    if not directory.is_dir():
        return []
    return sorted(int(p.name[:4]) for p in directory.rglob(ADR_GLOB) if p.is_file())


def _adr_next_filename(title: str, directory: Path) -> str:
    numbers = adr_numbers(directory)
    next_number = (numbers[-1] if numbers else 0) + 1
    return f"{next_number:04d}-{slugify(ADR_ORDINAL.sub('', title), '-')}.md"


def _default_next_filename(title_to_filename, title: str, directory: Path) -> str:
    return title_to_filename(title, None)


# -----------------------------------------------------------------------------
# Index entries
# -----------------------------------------------------------------------------


def _link_entry(title: str, relative_path: str, filepath: Path) -> str:
    return f"* [{title}]({relative_path})"


def _adr_entry(title: str, relative_path: str, filepath: Path) -> str:
    number = Path(filepath).name[:4]
    return f"* [ADR-{number}]({relative_path}) - {ADR_ORDINAL.sub('', title)}"


# -----------------------------------------------------------------------------
# Creation-time title normalization
# -----------------------------------------------------------------------------


def _identity(title: str) -> str:
    return title.strip()


def _normalize_howto(title: str) -> str:
    """Turn an imperative phrase into "How to ..." form.

    "Configure system." -> "How to configure system"
    """
    title = title.strip()
    if not title or title.lower().startswith("how to"):
        return title
    action = _TRAILING_PUNCTUATION.sub("", title)
    if not action:
        return ""
    return f"How to {action[0].lower()}{action[1:]}"


def _normalize_explanation(title: str) -> str:
    title = title.strip()
    if not title or title.lower().startswith("understanding"):
        return title
    return f"Understanding {title}"


def _normalize_adr(title: str) -> str:
    # The template writes the ordinal itself.
    return ADR_ORDINAL.sub("", title.strip()).strip()


# -----------------------------------------------------------------------------
# Table
# -----------------------------------------------------------------------------


def _prefixed_kind(
    kind: Kind,
    *,
    prefix: str,
    config_key: str,
    default_dir: str,
    section_title: str,
    marker: str,
    template: str,
    strip: re.Pattern | None = None,
    normalize=_identity,
) -> KindDescriptor:
    title_to_filename = partial(_prefixed_filename, prefix, strip)
    return KindDescriptor(
        kind=kind,
        config_key=config_key,
        default_dir=default_dir,
        file_glob=f"{prefix}_*.md",
        section_title=section_title,
        marker=marker,
        template=template,
        title_to_filename=title_to_filename,
        matches_filename=partial(_prefix_matcher, prefix),
        format_entry=_link_entry,
        normalize_title=normalize,
        next_filename=partial(_default_next_filename, title_to_filename),
    )


KINDS: dict[Kind, KindDescriptor] = {
    Kind.HOWTO: _prefixed_kind(
        Kind.HOWTO,
        prefix="how_to",
        config_key="howtos",
        default_dir=".",
        section_title="How-To Guides",
        marker="howto",
        template="howto.md",
        strip=_HOWTO_PREFIX,
        normalize=_normalize_howto,
    ),
    Kind.TUTORIAL: _prefixed_kind(
        Kind.TUTORIAL,
        prefix="tutorial",
        config_key="tutorials",
        default_dir=".",
        section_title="Tutorials",
        marker="tutorial",
        template="tutorial.md",
    ),
    Kind.EXPLANATION: _prefixed_kind(
        Kind.EXPLANATION,
        prefix="understanding",
        config_key="explanations",
        default_dir=".",
        section_title="Explanations",
        marker="explanation",
        template="explanation.md",
        strip=_UNDERSTANDING_PREFIX,
        normalize=_normalize_explanation,
    ),
    Kind.ADR: KindDescriptor(
        kind=Kind.ADR,
        config_key="adr",
        default_dir="exp/adr",
        file_glob=ADR_GLOB,
        section_title="Design Decisions",
        marker="adr",
        template="adr.md",
        title_to_filename=_adr_filename,
        matches_filename=_adr_matches,
        format_entry=_adr_entry,
        normalize_title=_normalize_adr,
        next_filename=_adr_next_filename,
    ),
    Kind.HANDOVER: _prefixed_kind(
        Kind.HANDOVER,
        prefix="handover",
        config_key="handovers",
        default_dir="docs/handovers",
        section_title="Handovers",
        marker="handover",
        template="handover.md",
    ),
    Kind.FIVE_WHY: _prefixed_kind(
        Kind.FIVE_WHY,
        prefix="5why",
        config_key="five_why_analyses",
        default_dir="docs/five_why_analyses",
        section_title="Five Why Analyses",
        marker="fivewhyanalysis",
        template="fivewhyanalysis.md",
    ),
    Kind.NOTE: _prefixed_kind(
        Kind.NOTE,
        prefix="note",
        config_key="notes",
        default_dir="docs/notes",
        section_title="Notes",
        marker="note",
        template="note.md",
    ),
    Kind.PROJECT: _prefixed_kind(
        Kind.PROJECT,
        prefix="project",
        config_key="projects",
        default_dir="docs/references/projects",
        section_title="Projects",
        marker="project",
        template="project.md",
        strip=_PROJECT_PREFIX,
    ),
}

ALL_KINDS: list[Kind] = list(KINDS)


def kind_for_filename(name: str) -> Kind | None:
    """Route a bare filename to the kind whose naming rule it follows."""
    for kind, descriptor in KINDS.items():
        if descriptor.matches_filename(name):
            return kind
    return None
