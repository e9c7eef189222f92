import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from .config import MAX_LONG_EDGE
from .exceptions import ImageLoadError

logger = logging.getLogger(__name__)


def load_image(source) -> Image.Image:
    """
    Decode a photo for analysis.

    ``source`` may be a path, raw bytes or a file-like object (such as a
    Streamlit upload). The result is orientation-corrected from EXIF, RGB,
    and no larger than MAX_LONG_EDGE on its long side.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        with Image.open(source) as img:
            img.load()
            img = ImageOps.exif_transpose(img)
            img = img.convert("RGB")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageLoadError(f"Could not decode image: {e}") from e

    if max(img.size) > MAX_LONG_EDGE:
        original = img.size
        img.thumbnail((MAX_LONG_EDGE, MAX_LONG_EDGE), Image.Resampling.LANCZOS)
        logger.info("Downscaled photo from %dx%d to %dx%d", *original, *img.size)

    return img
