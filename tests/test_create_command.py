from datetime import date
from pathlib import Path

import frontmatter
import pytest

from diataxis.commands.create import (
    compute_create_plan,
    create_document,
    normalize_title,
    run_create,
)
from diataxis.docs.parser import extract_title
from diataxis.errors import ConfigurationError, DocumentError
from diataxis.models import Kind


def test_howto_scenario(docs_root: Path) -> None:
    path = create_document(Kind.HOWTO, "Configure system.", docs_root)

    assert path == docs_root / "docs" / "how-to" / "how_to_configure_system.md"
    assert path.read_text(encoding="utf-8").startswith("# How to configure system\n")
    assert (docs_root / "docs" / "README.md").read_text(encoding="utf-8") == (
        "# docs\n"
        "\n"
        "## Description\n"
        "\n"
        "## Usage\n"
        "\n"
        "## Appendix\n"
        "\n"
        "### How-To Guides\n"
        "\n"
        "<!-- howtolog -->\n"
        "* [How to configure system](how-to/how_to_configure_system.md)\n"
        "<!-- howtologstop -->\n"
    )


def test_adr_scenario(tmp_path: Path) -> None:
    path = create_document(Kind.ADR, "Use PostgreSQL Database", tmp_path)

    assert path == tmp_path.resolve() / "exp" / "adr" / "0001-use-postgresql-database.md"
    text = path.read_text(encoding="utf-8")
    assert text.startswith("# 1. Use PostgreSQL Database\n")
    assert f"Date: {date.today().isoformat()}" in text

    readme = (tmp_path / "README.md").read_text(encoding="utf-8")
    assert (
        "### Design Decisions\n\n"
        "<!-- adrlog -->\n"
        "* [ADR-0001](exp/adr/0001-use-postgresql-database.md) - Use PostgreSQL Database\n"
        "<!-- adrlogstop -->\n"
    ) in readme


def test_adr_numbers_increase(tmp_path: Path) -> None:
    create_document(Kind.ADR, "Use PostgreSQL Database", tmp_path)
    second = create_document(Kind.ADR, "Adopt Click", tmp_path)

    assert second.name == "0002-adopt-click.md"
    assert second.read_text(encoding="utf-8").startswith("# 2. Adopt Click\n")


def test_explanation_filename(docs_root: Path) -> None:
    path = create_document(Kind.EXPLANATION, "System Architecture", docs_root)

    assert path.name == "understanding_system_architecture.md"
    assert extract_title(path) == "Understanding System Architecture"


@pytest.mark.parametrize("title", ["", "   ", "."])
def test_empty_title_is_rejected(docs_root: Path, title: str) -> None:
    with pytest.raises(DocumentError):
        compute_create_plan(Kind.HOWTO, title, docs_root)

    assert not (docs_root / "docs").exists()
    assert run_create(Kind.HOWTO, title, docs_root) == 1


def test_existing_target_is_not_overwritten(docs_root: Path) -> None:
    path = create_document(Kind.TUTORIAL, "Getting Started", docs_root)
    path.write_text("# Getting Started\n\nEdited by hand.\n", encoding="utf-8")

    with pytest.raises(DocumentError):
        create_document(Kind.TUTORIAL, "Getting Started", docs_root)

    assert path.read_text(encoding="utf-8") == "# Getting Started\n\nEdited by hand.\n"


def test_front_matter_template_keeps_title_extractable(docs_root: Path) -> None:
    path = create_document(Kind.NOTE, "Git tricks", docs_root)

    assert path == docs_root / "docs" / "notes" / "note_git_tricks.md"
    assert extract_title(path) == "Git tricks"
    post = frontmatter.load(path)
    assert post.metadata["aliases"] == ["Git tricks"]
    assert "note" in post.metadata["tags"]

    readme = (docs_root / "docs" / "README.md").read_text(encoding="utf-8")
    assert "* [Git tricks](notes/note_git_tricks.md)" in readme


def test_colon_in_title_stays_valid_front_matter(docs_root: Path) -> None:
    path = create_document(Kind.PROJECT, "Project: Launch", docs_root)

    assert path.name == "project_launch.md"
    assert frontmatter.load(path).metadata["aliases"] == ["Project: Launch"]


def test_only_listed_sections_are_refreshed(docs_root: Path) -> None:
    stale_notes = (
        "### Notes\n\n"
        "<!-- notelog -->\n"
        "* [Stale](notes/note_stale.md)\n"
        "<!-- notelogstop -->\n"
    )
    readme = docs_root / "docs" / "README.md"
    readme.parent.mkdir(parents=True)
    readme.write_text("# Docs\n\n" + stale_notes, encoding="utf-8")

    create_document(Kind.HOWTO, "Configure system.", docs_root)

    text = readme.read_text(encoding="utf-8")
    assert stale_notes in text
    assert "* [How to configure system](how-to/how_to_configure_system.md)" in text


def test_create_does_not_rename_other_documents(docs_root: Path) -> None:
    stray = docs_root / "docs" / "how-to" / "how_to_old.md"
    stray.parent.mkdir(parents=True)
    stray.write_text("# How to New Name\n", encoding="utf-8")

    create_document(Kind.HOWTO, "Configure system.", docs_root)

    assert stray.exists()
    readme = (docs_root / "docs" / "README.md").read_text(encoding="utf-8")
    assert "* [How to New Name](how-to/how_to_old.md)" in readme


def test_invalid_config(tmp_path: Path) -> None:
    (tmp_path / ".diataxis").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        compute_create_plan(Kind.NOTE, "Anything", tmp_path)

    assert run_create(Kind.NOTE, "Anything", tmp_path) == 1


def test_dry_run_writes_nothing(docs_root: Path) -> None:
    assert run_create(Kind.HOWTO, "Configure system.", docs_root, dry_run=True) == 0

    assert not (docs_root / "docs").exists()


def test_normalize_title_keeps_existing_prefix() -> None:
    assert normalize_title(Kind.HOWTO, "How to bake bread") == "How to bake bread"
    assert normalize_title(Kind.EXPLANATION, "Understanding caches") == "Understanding caches"
    assert normalize_title(Kind.NOTE, "  Git tricks  ") == "Git tricks"
