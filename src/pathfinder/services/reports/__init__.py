"""Report manifest service exports."""

from .manifest import list_runs, resolve_export_file

__all__ = ["list_runs", "resolve_export_file"]
