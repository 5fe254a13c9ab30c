# emilio/components/export/archive.py
"""
Export of a generated project as a ZIP archive.
"""
import io
import warnings
import zipfile
from pathlib import Path
from typing import Dict, List, Union

from emilio.components.generation.models import CodeFile
from emilio.constants import ARCHIVE_NAME
from emilio.utils.logging import get_logger

logger = get_logger(__name__)


def _write_archive(buffer: io.BytesIO, files: List[CodeFile]) -> None:
    with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as zf, warnings.catch_warnings():
        # Names are stored as declared; a repeated name adds a second entry
        # and zipfile's "Duplicate name" warning is silenced
        warnings.simplefilter("ignore", UserWarning)
        for code_file in files:
            zf.writestr(code_file.name, code_file.content.encode("utf-8"))


def build_archive(files: List[CodeFile]) -> bytes:
    """
    Pack files into a deflated ZIP archive.

    Each file is stored verbatim under its declared name. Names are
    neither normalized nor deduplicated.
    """
    with io.BytesIO() as buffer:
        _write_archive(buffer, files)
        data = buffer.getvalue()
    logger.debug(f"Built archive with {len(files)} files ({len(data)} bytes)")
    return data


def read_archive(data: bytes) -> Dict[str, str]:
    """Unpack an archive into a name to content mapping; later duplicates win."""
    contents: Dict[str, str] = {}
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        for info in zf.infolist():
            contents[info.filename] = zf.read(info).decode("utf-8")
    return contents


def export_archive(files: List[CodeFile], destination: Union[str, Path, None] = None) -> Path:
    """
    Write the project archive to disk.

    Args:
        files: Files to export
        destination: Directory to write ARCHIVE_NAME into, or a full file path

    Returns:
        Path of the written archive
    """
    target = Path(destination) if destination is not None else Path.cwd()
    if target.is_dir() or (target.suffix.lower() != ".zip" and not target.exists()):
        target = target / ARCHIVE_NAME

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(build_archive(files))

    logger.info(f"Exported {len(files)} files to {target}")
    return target
