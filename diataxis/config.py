"""Configuration discovery and path resolution.

The ``.diataxis`` file is a JSON object mapping kind config keys
(``howtos``, ``adr``, ...) to directories, plus ``readme`` for the index file.
Relative values resolve against the directory holding the nearest ``.diataxis``
found by walking up from the start directory, never against the process's
current directory.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigurationError
from .kinds import KINDS
from .models import Kind

logger = logging.getLogger(__name__)

CONFIG_FILE = ".diataxis"

DEFAULT_CONFIG: dict[str, str] = {
    "readme": "README.md",
    "howtos": ".",
    "tutorials": ".",
    "adr": "exp/adr",
}

# Accepted as an alias for "readme".
INDEX_KEY_ALIAS = "index"


def find_config(start: Path) -> Path | None:
    """Return the nearest ``.diataxis`` at or above ``start``."""
    cur = Path(start).resolve()
    for p in (cur, *cur.parents):
        candidate = p / CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


@dataclass
class Config:
    """Resolved configuration: raw values plus the root they resolve against."""

    root: Path
    values: dict[str, str] = field(default_factory=dict)
    config_path: Path | None = None

    def path_for(self, key: str, default: str = ".") -> Path:
        """Resolve a configured path; relative values are taken from ``root``."""
        raw = Path(self.values.get(key) or default).expanduser()
        if raw.is_absolute():
            return raw
        return (self.root / raw).resolve()

    def directory_for(self, kind: Kind) -> Path:
        descriptor = KINDS[Kind(kind)]
        return self.path_for(descriptor.config_key, descriptor.default_dir)

    @property
    def readme_path(self) -> Path:
        return self.path_for("readme", DEFAULT_CONFIG["readme"])


def _parse_config(config_path: Path) -> dict[str, str]:
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}", config_path=config_path) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{config_path} must contain a JSON object, got {type(data).__name__}",
            config_path=config_path,
        )

    values: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigurationError(
                f"{config_path}: value for '{key}' must be a string path",
                config_path=config_path,
            )
        values[str(key)] = value

    if "readme" not in values and INDEX_KEY_ALIAS in values:
        values["readme"] = values[INDEX_KEY_ALIAS]
    return values


def load_config(start: Path | str = ".") -> Config:
    """Load the nearest configuration, overlaid on ``DEFAULT_CONFIG``.

    Without a configuration file the defaults resolve against ``start``.
    """
    start = Path(start).resolve()
    config_path = find_config(start)

    values = dict(DEFAULT_CONFIG)
    if config_path is None:
        logger.debug(f"No {CONFIG_FILE} found above {start}; using defaults")
        return Config(root=start, values=values)

    logger.debug(f"Using configuration {config_path}")
    values.update(_parse_config(config_path))
    return Config(root=config_path.parent, values=values, config_path=config_path)


def write_default_config(directory: Path, force: bool = False) -> Path:
    """Write ``DEFAULT_CONFIG`` to ``directory/.diataxis``."""
    config_path = Path(directory) / CONFIG_FILE
    if config_path.exists() and not force:
        raise ConfigurationError(f"{config_path} already exists (use --force to overwrite)", config_path=config_path)
    config_path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")
    return config_path
