from pathlib import Path

from diataxis.docs.parser import extract_title, title_from_text


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "doc.md"
    path.write_text(content, encoding="utf-8")
    return path


def test_extracts_first_heading(tmp_path: Path) -> None:
    assert extract_title(_write(tmp_path, "# Simple Title\n\nSome content")) == "Simple Title"


def test_skips_blank_lines_before_title() -> None:
    assert title_from_text("\n\n# Title After Blank Lines\n\nContent") == "Title After Blank Lines"


def test_plain_text_has_no_title() -> None:
    assert title_from_text("Just plain text without a heading") is None


def test_empty_file_has_no_title(tmp_path: Path) -> None:
    assert extract_title(_write(tmp_path, "")) is None


def test_missing_file_has_no_title(tmp_path: Path) -> None:
    assert extract_title(tmp_path / "nope.md") is None


def test_undecodable_file_has_no_title(tmp_path: Path) -> None:
    path = tmp_path / "binary.md"
    path.write_bytes(b"\xff\xfe# \x00\x81")
    assert extract_title(path) is None


def test_skips_front_matter() -> None:
    content = "\n".join(
        [
            "---",
            "aliases:",
            '  - "How to Install Ruby"',
            "tags:",
            "  - ruby",
            "---",
            "",
            "# How to Install Ruby and Bundler on Windows Server",
            "",
            "## Description",
        ]
    )
    assert title_from_text(content) == "How to Install Ruby and Bundler on Windows Server"


def test_front_matter_title_key_is_ignored() -> None:
    content = "---\ntitle: My Document\ndate: 2025-11-19\n---\n\n# Actual Title in Content\n"
    assert title_from_text(content) == "Actual Title in Content"


def test_front_matter_without_heading() -> None:
    content = "---\ntitle: Metadata Title\n---\n\nJust plain text without a markdown heading\n"
    assert title_from_text(content) is None


def test_unterminated_front_matter_never_yields_a_title() -> None:
    content = "---\nincomplete front matter\n\n# Title Should Be Found\n\nContent\n"
    assert title_from_text(content) is None


def test_only_front_matter() -> None:
    assert title_from_text("---\nkey: value\n---\n") is None


def test_returns_first_of_several_headings() -> None:
    content = "# First Title\n\n## Second Heading\n\n# Another Top Level\n"
    assert title_from_text(content) == "First Title"


def test_stops_at_text_before_heading() -> None:
    content = "---\ntags: test\n---\n\nSome text\n\n# This heading comes after text\n"
    assert title_from_text(content) is None


def test_lower_level_heading_before_title_is_skipped() -> None:
    assert title_from_text("## Context\n\n# Real Title\n") == "Real Title"


def test_trims_heading_whitespace() -> None:
    assert title_from_text("#    Title With Spaces    \n\nContent") == "Title With Spaces"


def test_single_line_comment_is_skipped() -> None:
    assert title_from_text("<!-- generated -->\n# Commented Title\n") == "Commented Title"


def test_multi_line_comment_is_skipped() -> None:
    content = "<!--\nSome note\n# Not a title\n-->\n\n# Real Title\n"
    assert title_from_text(content) == "Real Title"


def test_comment_before_front_matter() -> None:
    content = "<!-- keep -->\n---\nstatus: open\n---\n# Handover Title\n"
    assert title_from_text(content) == "Handover Title"


def test_byte_order_mark_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "how_to_a.md"
    path.write_bytes("\ufeff# How to a\n".encode("utf-8"))

    assert extract_title(path) == "How to a"
