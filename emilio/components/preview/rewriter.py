# emilio/components/preview/rewriter.py
"""
Rewriting of local references in the entry document.
"""
import re
from typing import Dict

from emilio.utils.logging import get_logger

logger = get_logger(__name__)

# href/src attribute with a single- or double-quoted value, optionally prefixed by "./"
REFERENCE_PATTERN = re.compile(r"""(href|src)=["'](\./)?([^"']+)["']""")


def rewrite_references(html: str, handles: Dict[str, str]) -> str:
    """
    Point href/src attributes at the matching asset handles.

    The lookup key is the referenced path with one leading "/" removed.
    References that match no file are left exactly as written.

    Args:
        html: The entry document
        handles: Mapping of file name to handle

    Returns:
        The rewritten document
    """
    def _replace(match: re.Match) -> str:
        attr, _, path = match.groups()
        key = path[1:] if path.startswith("/") else path
        handle = handles.get(key)
        if handle is None:
            logger.debug(f"Leaving unmatched reference as is: {attr}={path}")
            return match.group(0)
        return f'{attr}="{handle}"'

    return REFERENCE_PATTERN.sub(_replace, html)
