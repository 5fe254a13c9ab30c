# emilio/components/generation/__init__.py
"""
Response decomposition for Emilio CLI.

Turns a free-form model response into a StructuredDocument: four text
sections plus the ordered list of fenced code files.
"""
from .models import CodeFile, Sections, StructuredDocument
from .errors import (
    GenerationError,
    GenerationFailure,
    EmptyResultFailure,
    GenerationInProgressError,
)
from .sections import extract_sections
from .blocks import extract_code_files, scan_fences
from .parser import parse_response, require_files, build_document
from .selection import select_entry_file, select_default_file, select_file

__all__ = [
    'CodeFile', 'Sections', 'StructuredDocument',
    'GenerationError', 'GenerationFailure', 'EmptyResultFailure', 'GenerationInProgressError',
    'extract_sections', 'extract_code_files', 'scan_fences',
    'parse_response', 'require_files', 'build_document',
    'select_entry_file', 'select_default_file', 'select_file',
]
