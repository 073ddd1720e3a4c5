"""
Capture source abstractions for Film Camera.

A capture source delivers the raw bytes of one photo per call. Device and
permission handling belong to the concrete source; the capture pipeline
only sees ``take_photo()``.

Implementations:
    FileCaptureSource: Replays a single image file on every shot
    DirectoryCaptureSource: Takes the next image file from a folder each shot
    MockCaptureSource: Generates synthetic JPEG photos with Pillow

Usage:

```python
source = MockCaptureSource(width=640, height=480)
raw = source.take_photo()
```
"""

import io
import logging
import threading
from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from FC_Libs.constants import DEFAULT_JPEG_QUALITY, JPEG_FORMAT, SUPPORTED_STANDARD_IMAGES

logger = logging.getLogger(__name__)


class CaptureSource:
    """Abstract base class for capture sources."""

    def take_photo(self) -> bytes:
        """Capture one photo.

        Returns:
            The encoded photo bytes exactly as the device delivered them.

        Raises:
            OSError or RuntimeError: if the source cannot deliver a photo.
            NotImplementedError: if not implemented by subclass.
        """
        raise NotImplementedError("take_photo must be implemented by subclasses")


class FileCaptureSource(CaptureSource):
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def take_photo(self) -> bytes:
        data = self.path.read_bytes()
        logger.debug(f"Captured {len(data)} bytes from {self.path}")
        return data


class DirectoryCaptureSource(CaptureSource):
    """Hands out the images of a folder one per shot, in file name order."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)
        self._lock = threading.Lock()
        self._queue: List[Path] = sorted(
            path
            for path in self.directory.iterdir()
            if path.is_file() and path.suffix.lower() in SUPPORTED_STANDARD_IMAGES
        )

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def take_photo(self) -> bytes:
        with self._lock:
            if not self._queue:
                raise RuntimeError(f"No more images in {self.directory}")
            path = self._queue.pop(0)
        data = path.read_bytes()
        logger.debug(f"Captured {len(data)} bytes from {path}")
        return data


class MockCaptureSource(CaptureSource):
    """Mock capture source for development on machines without a camera.

    Each shot is a colour gradient whose hue shifts with the shot number,
    encoded as JPEG.
    """

    def __init__(self, width: int = 640, height: int = 480, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Mock photo size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.quality = quality
        self.shots = 0

    def _render(self, shot: int) -> Image.Image:
        xs = np.linspace(0, 255, self.width, dtype=np.float32)[np.newaxis, :]
        ys = np.linspace(0, 255, self.height, dtype=np.float32)[:, np.newaxis]
        offset = (shot * 37) % 256
        red = np.broadcast_to(xs, (self.height, self.width))
        green = np.broadcast_to(ys, (self.height, self.width))
        blue = (red + green + offset) % 256
        pixels = np.dstack([red, green, blue]).astype(np.uint8)
        return Image.fromarray(pixels)

    def take_photo(self) -> bytes:
        image = self._render(self.shots)
        self.shots += 1
        buffer = io.BytesIO()
        image.save(buffer, format=JPEG_FORMAT, quality=self.quality)
        return buffer.getvalue()
