# emilio/components/generation/blocks.py
"""
Fenced code block scanning.

Grammar understood by the scanner (line oriented):

    opening  := "```" info NEWLINE
    info     := ""  |  lang  |  lang ":" name  |  ":" name
    body     := any lines
    closing  := "```" alone on its line (surrounding whitespace ignored)

``lang`` is a word (``\\w+``) and ``name`` a path (``[\\w./\\\\-]+``). A fence
whose info string does not match is kept as a malformed block so that its
closing fence is never mistaken for a new opening one. A tagged opening fence
inside a body (a README with shell snippets, say) opens a nested block that
the next bare fence closes; when the nesting never balances, the first bare
fence closes the block. A block with no closing fence at all is dropped.
"""
import re
from typing import List, NamedTuple, Optional, Tuple

from emilio.components.generation.models import CodeFile
from emilio.constants import (
    DEFAULT_FILE_LANG,
    DEFAULT_FILE_NAME,
    FALLBACK_FILE_LANG,
    FALLBACK_FILE_NAME,
    FENCE,
)
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

_INFO_RE = re.compile(r"^(\w*)(?::([\w./\\-]+))?$")


class FencedBlock(NamedTuple):
    """A terminated fenced block found by the scanner."""
    info: str
    body: str
    line: int  # 1-based line number of the opening fence
    lang: Optional[str]
    name: Optional[str]
    well_formed: bool


def parse_info(info: str) -> Tuple[bool, Optional[str], Optional[str]]:
    """
    Split a fence info string into language and file name.

    Returns:
        (well_formed, lang, name); lang and name are None when absent
    """
    match = _INFO_RE.match(info)
    if not match:
        return False, None, None
    lang, name = match.group(1), match.group(2)
    return True, lang or None, name or None


def _is_tagged_opening(stripped: str) -> bool:
    if not stripped.startswith(FENCE):
        return False
    info = stripped[len(FENCE):].strip()
    if not info:
        return False
    well_formed, _, _ = parse_info(info)
    return well_formed


def _find_closing(lines: List[str], start: int) -> Optional[int]:
    """Index of the bare fence closing a block whose body starts at ``start``."""
    first_bare = None
    depth = 0
    for cursor in range(start, len(lines)):
        candidate = lines[cursor].strip()
        if candidate == FENCE:
            if first_bare is None:
                first_bare = cursor
            if depth == 0:
                return cursor
            depth -= 1
        elif _is_tagged_opening(candidate):
            depth += 1
    return first_bare


def scan_fences(text: str) -> List[FencedBlock]:
    """
    Scan text for fenced blocks in source order.

    Args:
        text: Text to scan

    Returns:
        Every terminated block, malformed ones included
    """
    lines = (text or "").split("\n")
    blocks: List[FencedBlock] = []
    index = 0

    while index < len(lines):
        stripped = lines[index].strip()
        if not stripped.startswith(FENCE):
            index += 1
            continue

        info = stripped[len(FENCE):].strip()

        # Inline span such as ```code``` on a single line
        if len(info) >= len(FENCE) and info.endswith(FENCE):
            body = info[:-len(FENCE)].strip()
            blocks.append(FencedBlock(info, body, index + 1, None, None, False))
            index += 1
            continue

        well_formed, lang, name = parse_info(info)
        closing = _find_closing(lines, index + 1)
        if closing is None:
            logger.warning(f"Unterminated code fence at line {index + 1}: {stripped!r}")
            break

        if not well_formed:
            logger.debug(f"Malformed fence info at line {index + 1}: {info!r}")

        body = "\n".join(lines[index + 1:closing])
        blocks.append(FencedBlock(info, body, index + 1, lang, name, well_formed))
        index = closing + 1

    return blocks


def extract_tagged_files(region: str) -> List[CodeFile]:
    """
    Turn every well-formed block of the files region into a CodeFile.

    A missing language becomes "text" and a missing name "untitled".
    """
    files: List[CodeFile] = []
    for block in scan_fences(region):
        if not block.well_formed:
            logger.warning(f"Skipping code block with malformed fence at line {block.line}: {block.info!r}")
            continue
        files.append(CodeFile(
            name=block.name or DEFAULT_FILE_NAME,
            lang=block.lang or DEFAULT_FILE_LANG,
            content=block.body.strip(),
        ))
    return files


def extract_fallback_file(text: str) -> Optional[CodeFile]:
    """
    Recover a single file from the first fenced block anywhere in the text.

    The fence tag is ignored: the file is always code.js / javascript.
    """
    blocks = scan_fences(text)
    if not blocks:
        return None

    first = blocks[0]
    logger.info(f"Falling back to the first code block (line {first.line}) as {FALLBACK_FILE_NAME}")
    return CodeFile(
        name=FALLBACK_FILE_NAME,
        lang=FALLBACK_FILE_LANG,
        content=first.body.strip(),
    )


def extract_code_files(files_region: str, raw_text: str) -> List[CodeFile]:
    """
    Extract the code files of a response.

    Args:
        files_region: The "code files" section of the response
        raw_text: The whole response, used by the single-file fallback

    Returns:
        Files in source order; empty when no fenced block exists at all
    """
    files = extract_tagged_files(files_region)
    if files:
        return files

    fallback = extract_fallback_file(raw_text)
    return [fallback] if fallback else []
