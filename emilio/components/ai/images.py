# emilio/components/ai/images.py
"""
Loading of the reference image sent along with a generation request.
"""
import io
from pathlib import Path
from typing import Union

from PIL import Image
from pydantic import BaseModel, Field

from emilio.constants import IMAGE_EXTENSIONS, IMAGE_MAX_DIMENSION
from emilio.utils.logging import get_logger

logger = get_logger(__name__)

_PIL_FORMATS = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/webp": "WEBP",
}


class ImageInput(BaseModel):
    """An image ready to be sent inline to the model."""
    mime_type: str = Field(..., description="MIME type of the encoded image")
    data: bytes = Field(..., description="Encoded image bytes")
    width: int = Field(0, description="Width after scaling")
    height: int = Field(0, description="Height after scaling")

    def as_blob(self) -> dict:
        """The inline-data part understood by the Gemini SDK."""
        return {"mime_type": self.mime_type, "data": self.data}


def scale_image(data: bytes, mime_type: str, max_dimension: int = IMAGE_MAX_DIMENSION) -> ImageInput:
    """
    Scale an encoded image so that its longest side is max_dimension.

    The image keeps its format. Smaller images are scaled up, as the
    upload form this replaces always drew to a fixed-size canvas.
    """
    with Image.open(io.BytesIO(data)) as image:
        scale = max_dimension / max(image.width, image.height)
        size = (max(1, round(image.width * scale)), max(1, round(image.height * scale)))
        resized = image.resize(size)

        pil_format = _PIL_FORMATS[mime_type]
        if pil_format == "JPEG" and resized.mode not in ("RGB", "L"):
            resized = resized.convert("RGB")

        buffer = io.BytesIO()
        resized.save(buffer, format=pil_format)

    logger.debug(f"Scaled image to {size[0]}x{size[1]} ({mime_type})")
    return ImageInput(mime_type=mime_type, data=buffer.getvalue(), width=size[0], height=size[1])


def load_image(path: Union[str, Path], max_dimension: int = IMAGE_MAX_DIMENSION) -> ImageInput:
    """
    Read and scale a PNG, JPEG or WEBP file.

    Raises:
        ValueError: If the extension is not a supported image type
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    mime_type = IMAGE_EXTENSIONS.get(path.suffix.lower())
    if mime_type is None:
        raise ValueError(f"Unsupported image type '{path.suffix}'. Use PNG, JPG or WEBP.")

    return scale_image(path.read_bytes(), mime_type, max_dimension)
