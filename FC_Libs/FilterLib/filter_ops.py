"""
Film filter primitives for Film Camera.

Each primitive takes a PIL Image (RGB or RGBA) and returns a new image of
the same size and mode; the input image is never modified. Channel math is
done in float32 and clamped back to 0-255 after every primitive. Alpha is
carried through unchanged.

Functions:
    ensure_raster: Validate an image and normalize its mode to RGB/RGBA
    desaturate: Convert to grayscale (BT.601 luma on all three channels)
    adjust_contrast: Scale channel distance from mid-gray
    adjust_saturation: Scale channel distance from the pixel's luma
    color_offset: Add fixed per-channel offsets
    add_grain: Add seeded uniform noise to every channel
    apply_vignette: Darken toward the image edges

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.jpg")
    >>> punchy = adjust_saturation(adjust_contrast(img, 1.3), 1.2)
"""

from typing import Any, Optional, Tuple

import numpy as np
from PIL import Image

from FC_Libs.constants import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    CONTRAST_PIVOT,
    DEFAULT_GRAIN_AMOUNT,
    DEFAULT_GRAIN_SEED,
    DEFAULT_VIGNETTE_STRENGTH,
    LUMA_BLUE,
    LUMA_GREEN,
    LUMA_RED,
    MAX_GRAIN_AMOUNT,
)
from FC_Libs.errors import InvalidImage

_ALPHA_MODES = ("RGBA", "LA", "PA")


# ============================================================================
# Helpers
# ============================================================================

def ensure_raster(image: Any) -> Image.Image:
    """
    Validate an image and return it in RGB or RGBA mode.

    Args:
        image: PIL Image

    Returns:
        The same image if already RGB/RGBA, otherwise a converted copy

    Raises:
        InvalidImage: If image is not a PIL Image or has a zero dimension
    """
    if not isinstance(image, Image.Image):
        raise InvalidImage(f"Expected PIL Image, got {type(image)}")

    width, height = image.size
    if width <= 0 or height <= 0:
        raise InvalidImage(f"Image has zero dimension: {width}x{height}")

    if image.mode in ("RGB", "RGBA"):
        return image
    if image.mode in _ALPHA_MODES or (image.mode == "P" and "transparency" in image.info):
        return image.convert("RGBA")
    return image.convert("RGB")


def _split(image: Any) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    raster = ensure_raster(image)
    data = np.asarray(raster, dtype=np.float32)
    if raster.mode == "RGBA":
        return data[..., :3].copy(), data[..., 3].copy()
    return data.copy(), None


def _merge(rgb: np.ndarray, alpha: Optional[np.ndarray]) -> Image.Image:
    rgb = np.clip(np.rint(rgb), CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
    if alpha is None:
        return Image.fromarray(rgb)
    alpha = np.clip(np.rint(alpha), CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
    return Image.fromarray(np.dstack([rgb, alpha]))


def _luma(rgb: np.ndarray) -> np.ndarray:
    return (
        rgb[..., 0] * LUMA_RED
        + rgb[..., 1] * LUMA_GREEN
        + rgb[..., 2] * LUMA_BLUE
    )[..., np.newaxis]


# ============================================================================
# Tone and color
# ============================================================================

def desaturate(image: Any) -> Image.Image:
    rgb, alpha = _split(image)
    gray = np.repeat(_luma(rgb), 3, axis=2)
    return _merge(gray, alpha)


def adjust_contrast(image: Any, factor: float) -> Image.Image:
    """
    Scale each channel's distance from mid-gray.

    Args:
        image: PIL Image
        factor: 1.0 = unchanged, >1.0 = more contrast, <1.0 = flatter

    Raises:
        ValueError: If factor is negative
        InvalidImage: If image is unusable
    """
    if factor < 0:
        raise ValueError(f"contrast factor must be >= 0, got {factor}")

    rgb, alpha = _split(image)
    rgb = (rgb - CONTRAST_PIVOT) * float(factor) + CONTRAST_PIVOT
    return _merge(rgb, alpha)


def adjust_saturation(image: Any, factor: float) -> Image.Image:
    """
    Scale each channel's distance from the pixel's luma.

    Args:
        image: PIL Image
        factor: 0.0 = grayscale, 1.0 = unchanged, >1.0 = more saturated

    Raises:
        ValueError: If factor is negative
        InvalidImage: If image is unusable
    """
    if factor < 0:
        raise ValueError(f"saturation factor must be >= 0, got {factor}")

    rgb, alpha = _split(image)
    luma = _luma(rgb)
    rgb = luma + (rgb - luma) * float(factor)
    return _merge(rgb, alpha)


def color_offset(image: Any, red: float = 0.0, green: float = 0.0, blue: float = 0.0) -> Image.Image:
    rgb, alpha = _split(image)
    rgb = rgb + np.array([red, green, blue], dtype=np.float32)
    return _merge(rgb, alpha)


# ============================================================================
# Texture
# ============================================================================

def add_grain(
    image: Any,
    amount: int = DEFAULT_GRAIN_AMOUNT,
    seed: Optional[int] = None,
) -> Image.Image:
    """
    Add film grain: independent uniform noise on every pixel channel.

    The noise is drawn from a generator seeded with ``seed`` (or
    DEFAULT_GRAIN_SEED), so the same image, amount and seed always produce
    the same result.

    Args:
        image: PIL Image
        amount: Maximum perturbation in levels (0-5); noise lies in [-amount, amount]
        seed: Optional generator seed

    Raises:
        ValueError: If amount is outside 0..MAX_GRAIN_AMOUNT
        InvalidImage: If image is unusable
    """
    if not (0 <= amount <= MAX_GRAIN_AMOUNT):
        raise ValueError(f"grain amount must be 0-{MAX_GRAIN_AMOUNT}, got {amount}")

    rgb, alpha = _split(image)
    if amount == 0:
        return _merge(rgb, alpha)

    rng = np.random.default_rng(DEFAULT_GRAIN_SEED if seed is None else seed)
    noise = rng.integers(-amount, amount + 1, size=rgb.shape).astype(np.float32)
    return _merge(rgb + noise, alpha)


def apply_vignette(image: Any, strength: float = DEFAULT_VIGNETTE_STRENGTH) -> Image.Image:
    """
    Darken the image toward its edges.

    Each pixel is scaled by ``1 - strength * (d / d_max) ** 2`` where ``d`` is
    its distance from the image centre and ``d_max`` the distance to a corner.

    Args:
        image: PIL Image
        strength: Darkening at the corners (0.0 = none, 1.0 = black corners)

    Raises:
        ValueError: If strength is outside 0..1
        InvalidImage: If image is unusable
    """
    if not (0.0 <= strength <= 1.0):
        raise ValueError(f"vignette strength must be 0-1, got {strength}")

    rgb, alpha = _split(image)
    height, width = rgb.shape[:2]

    center_x = (width - 1) / 2.0
    center_y = (height - 1) / 2.0
    max_distance = float(np.hypot(center_x, center_y))
    if max_distance == 0.0:
        return _merge(rgb, alpha)

    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    distance = np.hypot(xs - center_x, ys - center_y) / max_distance
    falloff = 1.0 - float(strength) * distance ** 2
    return _merge(rgb * falloff[..., np.newaxis], alpha)
