"""Markdown title extraction."""

from pathlib import Path

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
FRONT_MATTER_DELIMITER = "---"
TITLE_MARKER = "# "


def title_from_text(content: str) -> str | None:
    """Return the first top-level heading of ``content``.

    HTML comment blocks and YAML front matter are skipped, as are blank lines
    and lower-level headings. Any other text before the heading means the
    document has no extractable title.

    Front matter that is opened but never closed swallows the rest of the
    file, so the result is None.
    """
    in_comment = False
    delimiters = 0

    for line in content.splitlines():
        stripped = line.strip()

        if stripped.startswith(COMMENT_OPEN):
            in_comment = not stripped.endswith(COMMENT_CLOSE)
            continue

        if in_comment:
            if COMMENT_CLOSE in stripped:
                in_comment = False
            continue

        if stripped == FRONT_MATTER_DELIMITER:
            delimiters += 1
            continue

        # Inside front matter, or waiting for a closing delimiter that may never come.
        if delimiters == 1:
            continue

        if stripped.startswith(TITLE_MARKER):
            return stripped[len(TITLE_MARKER):].strip()

        if not stripped or stripped.startswith("#"):
            continue

        return None

    return None


def extract_title(path: Path) -> str | None:
    """Read ``path`` and return its title, or None when missing or unreadable."""
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError):
        return None
    return title_from_text(content)
