# emilio/components/generation/parser.py
"""
Builds a StructuredDocument out of a raw model response.
"""
from emilio.components.generation.blocks import extract_code_files
from emilio.components.generation.errors import EmptyResultFailure
from emilio.components.generation.models import StructuredDocument
from emilio.components.generation.sections import extract_sections
from emilio.utils.logging import get_logger

logger = get_logger(__name__)


def parse_response(response_text: str) -> StructuredDocument:
    """
    Parse the model response into a structured document.

    Never raises; a response without any code block gives a document whose
    files list is empty (see require_files).
    """
    response_text = response_text or ""
    sections = extract_sections(response_text)
    files = extract_code_files(sections.files, response_text)

    document = StructuredDocument(
        header=sections.header,
        structure=sections.structure,
        notes=sections.notes,
        files=files,
    )
    logger.debug(
        f"Parsed response ({len(response_text)} chars) into {len(files)} files",
        extra={"files": [f.name for f in files]},
    )
    return document


def require_files(document: StructuredDocument) -> StructuredDocument:
    """Reject a document that has nothing to show."""
    if not document.has_files:
        logger.error("No code blocks found in the response.")
        raise EmptyResultFailure("No code blocks found in the response.")
    return document


def build_document(response_text: str) -> StructuredDocument:
    """Parse a response and insist on at least one file."""
    return require_files(parse_response(response_text))
