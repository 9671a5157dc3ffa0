"""Pytest configuration and fixtures."""

import json
import logging
from pathlib import Path

import pytest

from diataxis.config import CONFIG_FILE, Config, load_config
from diataxis.log import LOGGER_NAME

DOCS_CONFIG = {
    "readme": "docs/README.md",
    "howtos": "docs/how-to",
    "tutorials": "docs/tutorials",
    "explanations": "docs/explanations",
    "adr": "docs/exp/adr",
}


def write_doc(path: Path, title: str | None, body: str = "Body text.\n") -> Path:
    """Write a markdown document whose first heading is ``title``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    heading = f"# {title}\n\n" if title is not None else ""
    path.write_text(heading + body, encoding="utf-8")
    return path


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """A project root with a .diataxis file pointing every kind below docs/."""
    root = tmp_path.resolve() / "project"
    root.mkdir()
    (root / CONFIG_FILE).write_text(json.dumps(DOCS_CONFIG), encoding="utf-8")
    return root


@pytest.fixture
def docs_config(docs_root: Path) -> Config:
    return load_config(docs_root)


@pytest.fixture(autouse=True)
def _detach_cli_handler():
    """CliRunner swaps stdout per invocation; drop the CLI handler between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_diataxis_cli", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
