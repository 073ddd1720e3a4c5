"""
Configuration for Film Camera.

CameraConfig collects the settings a camera session is built from. It is
stored as JSON next to the image directory; missing files and unknown keys
fall back to the defaults in FC_Libs.constants.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from FC_Libs.constants import (
    DEFAULT_FILTER_TIMEOUT,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MAX_WORKERS,
    FIELD_FILM_TYPE,
    IMAGES_DIR_NAME,
    MAX_JPEG_QUALITY,
    MIN_CAPTURE_QUALITY,
    PATH_STORE_FILE_NAME,
)
from FC_Libs.FilterLib.film_types import FilmType

logger = logging.getLogger(__name__)


@dataclass
class CameraConfig:
    """Settings for a camera session.

    Attributes:
        images_dir: Directory for captured images (relative paths resolve against the base dir)
        store_path: JSON path store file (relative paths resolve against the base dir)
        quality: JPEG quality of filtered images (90-100)
        film_type: Film type selected when the session starts
        max_workers: Worker pool size for filter processing
        filter_timeout: Seconds to wait for a filter task (None = no limit)
    """
    images_dir: str = IMAGES_DIR_NAME
    store_path: str = PATH_STORE_FILE_NAME
    quality: int = DEFAULT_JPEG_QUALITY
    film_type: str = FilmType.MONOCHROME.value
    max_workers: int = DEFAULT_MAX_WORKERS
    filter_timeout: Optional[float] = DEFAULT_FILTER_TIMEOUT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Raises:
            ValueError: If any setting is out of range
        """
        if not (MIN_CAPTURE_QUALITY <= int(self.quality) <= MAX_JPEG_QUALITY):
            raise ValueError(
                f"quality must be {MIN_CAPTURE_QUALITY}-{MAX_JPEG_QUALITY}, got {self.quality}"
            )
        if int(self.max_workers) < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.filter_timeout is not None and float(self.filter_timeout) <= 0:
            raise ValueError(f"filter_timeout must be > 0, got {self.filter_timeout}")
        self.film_type = FilmType.parse(self.film_type).value

    @property
    def selected_film_type(self) -> FilmType:
        return FilmType.parse(self.film_type)

    def resolve_images_dir(self, base_dir: Path) -> Path:
        return _resolve(base_dir, self.images_dir)

    def resolve_store_path(self, base_dir: Path) -> Path:
        return _resolve(base_dir, self.store_path)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CameraConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if FIELD_FILM_TYPE in filtered:
            filtered[FIELD_FILM_TYPE] = FilmType.parse(filtered[FIELD_FILM_TYPE]).value
        return cls(**filtered)


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return Path(base_dir) / path


def load_config(config_path: Path) -> CameraConfig:
    """
    Load a configuration file.

    Args:
        config_path: Path to the JSON configuration

    Returns:
        The loaded configuration, or defaults if the file does not exist

    Raises:
        ValueError: If the file is not valid JSON or holds invalid settings
    """
    try:
        payload = json.loads(Path(config_path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug(f"No config at {config_path}, using defaults")
        return CameraConfig()
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    return CameraConfig.from_dict(payload)


def save_config(config_path: Path, config: CameraConfig) -> None:
    config.validate()
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
