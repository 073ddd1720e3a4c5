"""
Capture pipeline for Film Camera.

One capture takes a photo from the capture source, stores the raw bytes as
the original file, runs decode/filter/encode on the worker pool, stores the
result as the filtered file and records the pair in the image pair store.

No partial pair is ever exposed: if filtering fails the original file is
deleted again, and if recording the pair fails both files are deleted.
Only one capture may be in flight at a time.
"""

import concurrent.futures
import logging
import threading
from pathlib import Path
from typing import Optional

from FC_Libs.constants import (
    DEFAULT_FILTER_TIMEOUT,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MAX_WORKERS,
    FILTERED_FILE_PREFIX,
    MAX_JPEG_QUALITY,
    MIN_CAPTURE_QUALITY,
    ORIGINAL_FILE_PREFIX,
)
from FC_Libs.errors import CaptureError, PersistError
from FC_Libs.FilterLib.codec import process_photo
from FC_Libs.FilterLib.film_types import FilmType
from FC_Libs.CaptureLib.capture_sources import CaptureSource
from FC_Libs.PairStoreLib.file_store import FileStore
from FC_Libs.PairStoreLib.image_models import ImagePair
from FC_Libs.PairStoreLib.image_pair_store import ImagePairStore

logger = logging.getLogger(__name__)


class CapturePipeline:
    """
    Capture → store original → filter on worker pool → store filtered → record pair.

    Args:
        source: Capture source delivering raw photo bytes
        file_store: File store for original and filtered images
        pair_store: Image pair store that records successful captures
        executor: Worker pool for decode/filter/encode. When omitted the
                  pipeline owns a ThreadPoolExecutor with max_workers threads
        quality: JPEG quality of filtered output (90-100)
        timeout: Seconds to wait for the filter task (None = no limit)
        max_workers: Size of the owned worker pool
        seed: Grain seed forwarded to the filter engine

    Example:
        >>> pipeline = CapturePipeline(MockCaptureSource(), file_store, pair_store)
        >>> pair = pipeline.capture(FilmType.VINTAGE)
    """

    def __init__(
        self,
        source: CaptureSource,
        file_store: FileStore,
        pair_store: ImagePairStore,
        executor: Optional[concurrent.futures.Executor] = None,
        quality: int = DEFAULT_JPEG_QUALITY,
        timeout: Optional[float] = DEFAULT_FILTER_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
        seed: Optional[int] = None,
    ) -> None:
        if not (MIN_CAPTURE_QUALITY <= quality <= MAX_JPEG_QUALITY):
            raise ValueError(
                f"quality must be {MIN_CAPTURE_QUALITY}-{MAX_JPEG_QUALITY}, got {quality}"
            )

        self.source = source
        self.file_store = file_store
        self.pair_store = pair_store
        self.quality = quality
        self.timeout = timeout
        self.seed = seed

        self._owns_executor = executor is None
        self._executor = executor or concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="film-filter"
        )
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def capture(self, film_type: FilmType) -> ImagePair:
        """
        Capture one photo and record its original/filtered pair.

        Args:
            film_type: Film type applied to the filtered image

        Returns:
            The recorded ImagePair

        Raises:
            CaptureError: kind "busy" if another capture is in flight,
                          "source_unavailable" if no photo was delivered,
                          "filter_failed" if decode/filter/encode or the
                          filtered write failed
            PersistError: If the original file or the path lists cannot be written
        """
        film_type = FilmType.parse(film_type)

        if not self._in_flight.acquire(blocking=False):
            raise CaptureError.busy()
        try:
            return self._capture(film_type)
        finally:
            self._in_flight.release()

    def _capture(self, film_type: FilmType) -> ImagePair:
        try:
            raw = self.source.take_photo()
        except Exception as e:
            raise CaptureError.source_unavailable(f"Capture source failed: {e}") from e
        if not raw:
            raise CaptureError.source_unavailable("Capture source delivered no data")

        original_path = self.file_store.new_image_path(ORIGINAL_FILE_PREFIX)
        self.file_store.write_bytes(original_path, raw)
        logger.debug(f"Original image saved to: {original_path}")

        filtered_path: Optional[Path] = None
        try:
            future = self._executor.submit(process_photo, raw, film_type, self.quality, self.seed)
            filtered = future.result(timeout=self.timeout)
            filtered_path = self.file_store.new_image_path(FILTERED_FILE_PREFIX)
            self.file_store.write_bytes(filtered_path, filtered)
        except Exception as e:
            self._discard(original_path, filtered_path)
            raise CaptureError.filter_failed(f"Failed to process image: {e}") from e
        logger.debug(f"Filtered image saved to: {filtered_path}")

        pair = ImagePair(str(original_path), str(filtered_path))
        try:
            self.pair_store.append(pair)
        except PersistError:
            self._discard(original_path, filtered_path)
            raise

        logger.info(f"Captured {film_type.value} image pair: {pair.filtered_path}")
        return pair

    def _discard(self, *paths: Optional[Path]) -> None:
        for path in paths:
            if path is not None:
                self.file_store.delete(path)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "CapturePipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
