# emilio/components/preview/assets.py
"""
In-memory assets backing the live preview.

Every generated file is published under a handle of the form
``{base_url}/assets/{token}/{name}``. The arena owns all handles of the
current document and revokes the whole set before publishing the next one,
so at most one set is ever live.
"""
import secrets
from pathlib import PurePosixPath
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from emilio.components.generation.models import CodeFile
from emilio.constants import DEFAULT_MIME_TYPE, MIME_TYPES
from emilio.utils.logging import get_logger

logger = get_logger(__name__)


def guess_mime_type(name: str) -> str:
    """Map a file name to the MIME type it is served with."""
    return MIME_TYPES.get(PurePosixPath(name).suffix.lower(), DEFAULT_MIME_TYPE)


class MaterializedAsset(BaseModel):
    """One file published by the arena."""
    name: str = Field(..., description="Declared file name")
    handle: str = Field(..., description="URL the asset is reachable under")
    mime_type: str = Field(..., description="Content type served for the asset")
    token: str = Field(..., description="Random token identifying the asset")
    content: bytes = Field(b"", description="UTF-8 encoded file content")


class AssetArena:
    """Owns the live asset set of one preview session."""

    def __init__(self, base_url: str = ""):
        self.base_url = base_url.rstrip("/")
        self._assets: Dict[str, MaterializedAsset] = {}
        self._handles: Dict[str, str] = {}
        self.generation = 0

    def materialize(self, files: List[CodeFile]) -> Dict[str, str]:
        """
        Publish one asset per file, replacing the previous set.

        Args:
            files: The document's files, in document order

        Returns:
            Mapping of file name to handle; a duplicated name maps to its first file
        """
        self.revoke_all()

        for code_file in files:
            token = secrets.token_urlsafe(12)
            asset = MaterializedAsset(
                name=code_file.name,
                handle=f"{self.base_url}/assets/{token}/{code_file.name}",
                mime_type=guess_mime_type(code_file.name),
                token=token,
                content=code_file.content.encode("utf-8"),
            )
            self._assets[token] = asset
            self._handles.setdefault(code_file.name, asset.handle)

        self.generation += 1
        logger.debug(f"Materialized {len(self._assets)} assets (generation {self.generation})")
        return dict(self._handles)

    def revoke_all(self) -> None:
        """Invalidate every handle of the current set."""
        if self._assets:
            logger.debug(f"Revoking {len(self._assets)} assets")
        self._assets.clear()
        self._handles.clear()

    def resolve(self, token: str) -> Optional[MaterializedAsset]:
        """The live asset for a token, or None once it has been revoked."""
        return self._assets.get(token)

    @property
    def handles(self) -> Dict[str, str]:
        return dict(self._handles)

    @property
    def assets(self) -> List[MaterializedAsset]:
        return list(self._assets.values())

    def __len__(self) -> int:
        return len(self._assets)

    def __enter__(self) -> "AssetArena":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.revoke_all()
