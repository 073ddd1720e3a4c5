"""
Command-line front end for Film Camera.

Usage:
    python film_camera.py films
    python film_camera.py filter photo.jpg out.jpg --film vintage
    python film_camera.py capture --source mock --count 3 --film warm_tone
    python film_camera.py list --newest-first
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from FC_Libs.config import CameraConfig, load_config
from FC_Libs.constants import CONFIG_FILE_NAME
from FC_Libs.errors import FilmCameraError
from FC_Libs.FilterLib import FilmType, process_photo
from FC_Libs.CaptureLib import (
    CameraSession,
    CapturePipeline,
    CaptureSource,
    DirectoryCaptureSource,
    FileCaptureSource,
    MockCaptureSource,
)
from FC_Libs.PairStoreLib import FileStore, ImagePairStore, JsonPathStore

logger = logging.getLogger("film_camera")

DEFAULT_BASE_DIR = Path.home() / ".film_camera"
MOCK_SOURCE = "mock"


def build_pair_store(base_dir: Path, config: CameraConfig, file_store: Optional[FileStore] = None) -> ImagePairStore:
    file_store = file_store or FileStore(config.resolve_images_dir(base_dir))
    path_store = JsonPathStore(config.resolve_store_path(base_dir))
    store = ImagePairStore(path_store, file_store)
    store.load()
    return store


def build_source(source: str) -> CaptureSource:
    if source == MOCK_SOURCE:
        return MockCaptureSource()
    path = Path(source)
    if path.is_dir():
        return DirectoryCaptureSource(path)
    return FileCaptureSource(path)


def build_session(base_dir: Path, config: CameraConfig, source: CaptureSource) -> CameraSession:
    file_store = FileStore(config.resolve_images_dir(base_dir))
    pair_store = build_pair_store(base_dir, config, file_store)
    pipeline = CapturePipeline(
        source,
        file_store,
        pair_store,
        quality=config.quality,
        timeout=config.filter_timeout,
        max_workers=config.max_workers,
    )
    return CameraSession(pipeline, film_type=config.selected_film_type)


def _cmd_films(args: argparse.Namespace, config: CameraConfig) -> int:
    for film_type in FilmType:
        marker = "*" if film_type == config.selected_film_type else " "
        print(f"{marker} {film_type.index}  {film_type.value:<14} {film_type.label}")
    return 0


def _cmd_filter(args: argparse.Namespace, config: CameraConfig) -> int:
    film_type = FilmType.parse(args.film) if args.film else config.selected_film_type
    quality = args.quality if args.quality is not None else config.quality
    data = Path(args.input).read_bytes()
    Path(args.output).write_bytes(process_photo(data, film_type, quality))
    print(f"Saved {film_type.label} image to {args.output}")
    return 0


def _cmd_capture(args: argparse.Namespace, config: CameraConfig) -> int:
    with build_session(args.base_dir, config, build_source(args.source)) as session:
        if args.film:
            session.select_film_type(args.film)
        for _ in range(args.count):
            pair = session.submit_capture().result()
            print(f"{pair.original_path} -> {pair.filtered_path}")
    return 0


def _cmd_list(args: argparse.Namespace, config: CameraConfig) -> int:
    store = build_pair_store(args.base_dir, config)
    pairs = store.newest_first() if args.newest_first else store.all()
    if not pairs:
        print("No photos yet")
        return 0
    for pair in pairs:
        print(f"{pair.original_path}\t{pair.filtered_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Film Camera - simulated film filters for photos")
    parser.add_argument("--base-dir", type=Path, default=DEFAULT_BASE_DIR,
                        help="Application directory for images and the path store")
    parser.add_argument("--config", type=Path, default=None,
                        help=f"Config file (default: <base-dir>/{CONFIG_FILE_NAME})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    films = subparsers.add_parser("films", help="List film types")
    films.set_defaults(handler=_cmd_films)

    filter_cmd = subparsers.add_parser("filter", help="Apply a film type to an image file")
    filter_cmd.add_argument("input", help="Input image")
    filter_cmd.add_argument("output", help="Output JPEG")
    filter_cmd.add_argument("--film", help="Film type name or index")
    filter_cmd.add_argument("--quality", type=int, default=None, help="JPEG quality 0-100")
    filter_cmd.set_defaults(handler=_cmd_filter)

    capture = subparsers.add_parser("capture", help="Capture photos and store original/filtered pairs")
    capture.add_argument("--source", default=MOCK_SOURCE,
                         help="Image file, directory of images, or 'mock'")
    capture.add_argument("--count", type=int, default=1, help="Number of photos to take")
    capture.add_argument("--film", help="Film type name or index")
    capture.set_defaults(handler=_cmd_capture)

    list_cmd = subparsers.add_parser("list", help="List stored image pairs")
    list_cmd.add_argument("--newest-first", action="store_true", help="Show the latest capture first")
    list_cmd.set_defaults(handler=_cmd_list)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config or args.base_dir / CONFIG_FILE_NAME)
        return args.handler(args, config)
    except (FilmCameraError, ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
