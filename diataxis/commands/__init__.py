"""Command implementations behind the diataxis CLI."""
