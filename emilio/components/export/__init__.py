# emilio/components/export/__init__.py
"""Project export for Emilio CLI."""
from .archive import ARCHIVE_NAME, build_archive, read_archive, export_archive

__all__ = ['ARCHIVE_NAME', 'build_archive', 'read_archive', 'export_archive']
