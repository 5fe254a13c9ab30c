# emilio/components/generation/sections.py
"""
Section scanning for model responses.

A response is expected to carry four headings, in this order: header,
project structure, code files and notes. The scanner looks for each heading
after the previous one it found and cuts the text at the headings it finds.
A missing heading yields an empty region; nothing here raises.

The first literal occurrence of a later heading always ends the earlier
region, even when that text is part of the earlier region's prose.
"""
from typing import List, NamedTuple

from emilio.components.generation.models import Sections
from emilio.constants import FILES_MARKER, HEADER_MARKER, NOTES_MARKER, STRUCTURE_MARKER
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

SECTION_MARKERS = [
    ("header", HEADER_MARKER),
    ("structure", STRUCTURE_MARKER),
    ("files", FILES_MARKER),
    ("notes", NOTES_MARKER),
]


class MarkerHit(NamedTuple):
    """A heading found in the response."""
    section: str
    start: int       # offset of the marker itself
    body_start: int  # offset just past the marker


def scan_sections(text: str) -> List[MarkerHit]:
    """
    Locate the section headings in order.

    A region starts right after its marker, so text on the heading line
    (for example " (Full & Unabridged)") is part of the region.

    Args:
        text: The raw response

    Returns:
        The headings that were found, in order
    """
    hits: List[MarkerHit] = []
    position = 0

    for section, marker in SECTION_MARKERS:
        start = text.find(marker, position)
        if start == -1:
            logger.debug(f"Section marker not found: {marker!r}")
            continue

        body_start = start + len(marker)
        hits.append(MarkerHit(section, start, body_start))
        position = body_start

    return hits


def extract_sections(text: str) -> Sections:
    """
    Split a raw response into its header, structure, files and notes regions.

    Args:
        text: The raw response

    Returns:
        Sections with every missing region set to an empty string
    """
    text = text or ""
    hits = scan_sections(text)

    regions = {}
    for index, hit in enumerate(hits):
        end = hits[index + 1].start if index + 1 < len(hits) else len(text)
        regions[hit.section] = text[hit.body_start:end].strip()

    logger.debug(f"Found {len(hits)} of {len(SECTION_MARKERS)} sections")
    return Sections(**regions)
