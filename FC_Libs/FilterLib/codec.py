"""
JPEG codec for Film Camera.

Decodes captured bytes into PIL Images and encodes filtered images back to
JPEG. process_photo bundles decode, filter and encode into the single unit
of work the capture pipeline submits to its worker pool.
"""

import io
import logging
from typing import Any, Optional

from PIL import Image, UnidentifiedImageError

from FC_Libs.constants import DEFAULT_JPEG_QUALITY, JPEG_FORMAT, MAX_JPEG_QUALITY
from FC_Libs.errors import DecodeError, InvalidImage
from FC_Libs.FilterLib.film_filters import apply_filter
from FC_Libs.FilterLib.film_types import FilmType
from FC_Libs.FilterLib.filter_ops import ensure_raster

logger = logging.getLogger(__name__)


def decode_image(data: bytes) -> Image.Image:
    """
    Decode image bytes into an RGB or RGBA PIL Image.

    The pixel data is fully loaded so truncated files fail here rather than
    later in the filter stage.

    Args:
        data: Encoded image bytes (JPEG, PNG, or any format Pillow reads)

    Returns:
        Decoded PIL Image

    Raises:
        DecodeError: If data is empty, unsupported, truncated or has a zero dimension
    """
    if not data:
        raise DecodeError("No image data")

    try:
        with Image.open(io.BytesIO(data)) as opened:
            opened.load()
            image = ensure_raster(opened)
            if image is opened:
                image = opened.copy()
    except InvalidImage as e:
        raise DecodeError(f"Decoded image is unusable: {e}") from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"Cannot decode image data: {e}") from e

    logger.debug(f"Decoded {image.width}x{image.height} {image.mode} image")
    return image


def encode_image(image: Any, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """
    Encode an image as JPEG.

    Alpha is dropped since JPEG has no alpha channel. Output is deterministic
    for identical input and quality.

    Args:
        image: PIL Image
        quality: JPEG quality 0-100

    Returns:
        JPEG bytes

    Raises:
        ValueError: If quality is outside 0-100
        InvalidImage: If image is not a PIL Image or has a zero dimension
    """
    if not (0 <= quality <= MAX_JPEG_QUALITY):
        raise ValueError(f"quality must be 0-{MAX_JPEG_QUALITY}, got {quality}")

    raster = ensure_raster(image)
    if raster.mode != "RGB":
        raster = raster.convert("RGB")

    buffer = io.BytesIO()
    raster.save(buffer, format=JPEG_FORMAT, quality=int(quality))
    return buffer.getvalue()


def process_photo(
    data: bytes,
    film_type: FilmType,
    quality: int = DEFAULT_JPEG_QUALITY,
    seed: Optional[int] = None,
) -> bytes:
    """
    Decode captured bytes, apply a film type and re-encode as JPEG.

    Args:
        data: Raw captured image bytes
        film_type: Film type to apply
        quality: JPEG quality for the filtered output
        seed: Optional grain seed

    Returns:
        Filtered JPEG bytes

    Raises:
        DecodeError: If data cannot be decoded
        InvalidImage: If the decoded image is unusable
        ValueError: If quality or film_type is invalid
    """
    image = decode_image(data)
    filtered = apply_filter(image, film_type, seed=seed)
    encoded = encode_image(filtered, quality)
    logger.debug(
        f"Processed {image.width}x{image.height} photo with {FilmType.parse(film_type).value} "
        f"({len(data)} -> {len(encoded)} bytes)"
    )
    return encoded
