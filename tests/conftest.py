"""
Pytest configuration and shared fixtures for Film Camera tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import io

import numpy as np
import pytest
from PIL import Image

from FC_Libs.PairStoreLib import FileStore, ImagePairStore, InMemoryPathStore


def make_gradient_image(width: int = 64, height: int = 48, mode: str = "RGB") -> Image.Image:
    """Build a deterministic colour gradient test image."""
    xs = np.linspace(0, 255, width, dtype=np.float32)[np.newaxis, :]
    ys = np.linspace(0, 255, height, dtype=np.float32)[:, np.newaxis]
    red = np.broadcast_to(xs, (height, width))
    green = np.broadcast_to(ys, (height, width))
    blue = np.full((height, width), 96, dtype=np.float32)
    image = Image.fromarray(np.dstack([red, green, blue]).astype(np.uint8))
    if mode != "RGB":
        image = image.convert(mode)
    return image


def encode_jpeg(image: Image.Image, quality: int = 95) -> bytes:
    buffer = io.BytesIO()
    image.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


@pytest.fixture
def sample_image():
    """
    Provide a 64x48 RGB gradient image.

    Returns:
        PIL Image with every channel varying across the frame
    """
    return make_gradient_image()


@pytest.fixture
def sample_jpeg_bytes():
    """Provide the sample gradient encoded as JPEG."""
    return encode_jpeg(make_gradient_image())


@pytest.fixture
def images_dir(tmp_path):
    """
    Provide a temporary directory for image files.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to an existing empty directory
    """
    directory = tmp_path / "Images"
    directory.mkdir()
    return directory


@pytest.fixture
def file_store(images_dir):
    return FileStore(images_dir)


@pytest.fixture
def path_store():
    return InMemoryPathStore()


@pytest.fixture
def pair_store(path_store, file_store):
    return ImagePairStore(path_store, file_store)
