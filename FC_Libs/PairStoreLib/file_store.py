"""
Image file storage for Film Camera.

FileStore resolves the application's image directory, generates unique
capture file names and wraps the byte-level file operations the capture
pipeline and the image pair store need.

File names follow ``{prefix}_{epoch-millis}.jpg``. When a name is already
taken (two captures within the same millisecond) a ``_{n}`` counter is
appended.
"""

import logging
import time
from pathlib import Path
from typing import Callable, Union

from FC_Libs.constants import IMAGE_EXTENSION, IMAGES_DIR_NAME
from FC_Libs.errors import PersistError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def get_images_dir(base_dir: Path) -> Path:
    images_dir = Path(base_dir) / IMAGES_DIR_NAME
    images_dir.mkdir(parents=True, exist_ok=True)
    return images_dir


class FileStore:
    def __init__(
        self,
        images_dir: PathLike,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.images_dir = Path(images_dir)
        self._clock = clock

    @classmethod
    def for_base_dir(cls, base_dir: PathLike, **kwargs) -> "FileStore":
        return cls(get_images_dir(Path(base_dir)), **kwargs)

    def new_image_path(self, prefix: str) -> Path:
        """
        Generate an unused path for a new image file.

        Args:
            prefix: File name prefix distinguishing original and filtered output

        Returns:
            Path inside images_dir that does not exist yet

        Raises:
            PersistError: If images_dir cannot be created
        """
        try:
            self.images_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistError(f"Cannot create image directory {self.images_dir}: {e}") from e
        millis = int(self._clock() * 1000)
        stem = f"{prefix}_{millis}"

        candidate = self.images_dir / f"{stem}{IMAGE_EXTENSION}"
        counter = 1
        while candidate.exists():
            candidate = self.images_dir / f"{stem}_{counter}{IMAGE_EXTENSION}"
            counter += 1
        return candidate

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        """
        Write data to path.

        Raises:
            PersistError: If the file cannot be written
        """
        try:
            Path(path).write_bytes(data)
        except OSError as e:
            raise PersistError(f"Cannot write image file {path}: {e}") from e
        logger.debug(f"Wrote {len(data)} bytes to {path}")

    def read_bytes(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def delete(self, path: PathLike) -> bool:
        """
        Delete a file if it exists.

        Returns:
            True if a file was removed, False if there was nothing to remove
            or the removal failed (the failure is logged)
        """
        target = Path(path)
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Could not delete {target}: {e}")
            return False
        logger.debug(f"Deleted {target}")
        return True
