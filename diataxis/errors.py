"""Exception hierarchy for diataxis."""

from pathlib import Path


class DiataxisError(Exception):
    """Base class for all diataxis errors."""


class DocumentError(DiataxisError):
    """Document creation or validation failed."""

    def __init__(self, message: str, *, kind: str | None = None, title: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.title = title


class ConfigurationError(DiataxisError):
    """The configuration file is malformed."""

    def __init__(self, message: str, *, config_path: Path | None = None):
        super().__init__(message)
        self.config_path = config_path


class FileSystemError(DiataxisError):
    """A path handed to a command cannot be used."""

    def __init__(self, message: str, *, path: Path | None = None, operation: str | None = None):
        super().__init__(message)
        self.path = path
        self.operation = operation


class TemplateError(DiataxisError):
    """A document template could not be found."""

    def __init__(self, message: str, *, template_name: str | None = None, search_paths: list[Path] | None = None):
        super().__init__(message)
        self.template_name = template_name
        self.search_paths = search_paths or []
