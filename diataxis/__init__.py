"""diataxis - keep a documentation tree, its filenames and its README in sync."""

__version__ = "0.4.0"
