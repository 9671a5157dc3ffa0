"""Document discovery, title extraction, renaming and README maintenance."""

from .locator import find_documents, load_documents
from .parser import extract_title, title_from_text
from .readme import collect_entries, render_index, update_index
from .renamer import plan_rename, sync_filename

__all__ = [
    "find_documents",
    "load_documents",
    "extract_title",
    "title_from_text",
    "collect_entries",
    "render_index",
    "update_index",
    "plan_rename",
    "sync_filename",
]
