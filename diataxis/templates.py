"""Content writer: render new documents from the packaged markdown templates."""

from datetime import date
from pathlib import Path
from typing import Any

import frontmatter

from .errors import TemplateError
from .kinds import KINDS
from .models import Kind

TEMPLATE_DIR = Path(__file__).parent / "templates"


def find_template(kind: Kind, template_dir: Path = TEMPLATE_DIR) -> Path:
    template_name = KINDS[Kind(kind)].template
    template_path = template_dir / template_name
    if not template_path.is_file():
        raise TemplateError(
            f"Template not found: {template_name}",
            template_name=template_name,
            search_paths=[template_path],
        )
    return template_path


def _substitute(value: Any, variables: dict[str, str]) -> Any:
    if isinstance(value, str):
        for key, replacement in variables.items():
            value = value.replace("{{" + key + "}}", replacement)
        return value
    if isinstance(value, list):
        return [_substitute(v, variables) for v in value]
    if isinstance(value, dict):
        return {k: _substitute(v, variables) for k, v in value.items()}
    return value


def render_document(kind: Kind, title: str, template_dir: Path = TEMPLATE_DIR, **variables: Any) -> str:
    """Return the full text of a new ``kind`` document titled ``title``.

    ``{{title}}`` and ``{{date}}`` are always available; extra keyword
    arguments fill further placeholders (the ADR template uses ``{{number}}``).
    Front matter is parsed as YAML before substitution so titles with quotes
    or colons stay valid YAML when dumped back.
    """
    text = find_template(kind, template_dir).read_text(encoding="utf-8")

    values = {"title": title, "date": date.today().isoformat()}
    values.update({k: str(v) for k, v in variables.items()})

    post = frontmatter.loads(text)
    post.content = _substitute(post.content, values)
    if not post.metadata:
        return post.content.rstrip("\n") + "\n"

    post.metadata = _substitute(dict(post.metadata), values)
    return frontmatter.dumps(post, sort_keys=False) + "\n"
