"""
Ordered, persisted collection of original/filtered image pairs.

The durable form is two parallel string lists in a PathStore, one holding
original paths and one holding filtered paths. Loading pairs them by index
up to the shorter list and drops pairs whose files are gone. Appending
writes both lists back; if the write fails the in-memory append is undone
so the visible collection always matches what was last persisted.

Classes:
    ImagePairStore: The image pair collection
"""

import logging
import threading
from typing import List, Optional, Sequence

from FC_Libs.constants import FILTERED_IMAGES_KEY, ORIGINAL_IMAGES_KEY
from FC_Libs.errors import PersistError
from FC_Libs.PairStoreLib.file_store import FileStore
from FC_Libs.PairStoreLib.image_models import ImagePair
from FC_Libs.PairStoreLib.path_store import PathStore

logger = logging.getLogger(__name__)


class ImagePairStore:
    """
    Image pairs in capture order (oldest first).

    All mutations go through a single lock, so concurrent appends never
    lose updates.

    Example:
        >>> store = ImagePairStore(JsonPathStore(path), FileStore(images_dir))
        >>> store.load()
        >>> store.append(ImagePair("original_1.jpg", "film_1.jpg"))
        >>> store.all()[-1].filtered_path
        'film_1.jpg'
    """

    def __init__(self, path_store: PathStore, file_store: FileStore) -> None:
        self._path_store = path_store
        self._file_store = file_store
        self._pairs: List[ImagePair] = []
        self._lock = threading.Lock()

    def load(self) -> List[ImagePair]:
        """
        Reload pairs from the path store.

        Pairs are formed index-wise up to the shorter of the two lists.
        Pairs whose original or filtered file is missing are dropped; the
        stored lists are left as they are.

        Returns:
            The loaded pairs in capture order
        """
        with self._lock:
            original_paths = self._path_store.get_string_list(ORIGINAL_IMAGES_KEY)
            filtered_paths = self._path_store.get_string_list(FILTERED_IMAGES_KEY)

            if len(original_paths) != len(filtered_paths):
                logger.warning(
                    f"Path lists differ in length ({len(original_paths)} originals, "
                    f"{len(filtered_paths)} filtered); pairing the first "
                    f"{min(len(original_paths), len(filtered_paths))}"
                )

            pairs: List[ImagePair] = []
            for original_path, filtered_path in zip(original_paths, filtered_paths):
                pair = self._valid_pair(original_path, filtered_path)
                if pair is not None:
                    pairs.append(pair)

            self._pairs = pairs
            logger.info(f"Loaded {len(pairs)} image pairs")
            return list(pairs)

    def _valid_pair(self, original_path: str, filtered_path: str) -> Optional[ImagePair]:
        try:
            pair = ImagePair(original_path, filtered_path)
        except ValueError as e:
            logger.warning(f"Dropping invalid image pair: {e}")
            return None

        if not self._file_store.exists(pair.original_path) or not self._file_store.exists(pair.filtered_path):
            logger.debug(f"Dropping image pair with missing file: {pair}")
            return None

        return pair

    def append(self, pair: ImagePair) -> None:
        """
        Add a pair and persist both path lists.

        Raises:
            ValueError: If the pair is already in the store
            PersistError: If the path store write fails; the pair is not added
        """
        with self._lock:
            if pair in self._pairs:
                raise ValueError(f"Image pair already stored: {pair}")

            previous = list(self._pairs)
            self._pairs.append(pair)
            try:
                self._save(self._pairs, previous)
            except PersistError:
                self._pairs = previous
                raise

            logger.info(f"Saved {len(self._pairs)} image pairs")

    def _save(self, pairs: Sequence[ImagePair], previous: Sequence[ImagePair]) -> None:
        self._path_store.set_string_list(
            ORIGINAL_IMAGES_KEY, [pair.original_path for pair in pairs]
        )
        try:
            self._path_store.set_string_list(
                FILTERED_IMAGES_KEY, [pair.filtered_path for pair in pairs]
            )
        except PersistError:
            # Put the originals list back so both lists match the last good save
            try:
                self._path_store.set_string_list(
                    ORIGINAL_IMAGES_KEY, [pair.original_path for pair in previous]
                )
            except PersistError as e:
                logger.warning(f"Could not restore original path list: {e}")
            raise

    def all(self) -> List[ImagePair]:
        with self._lock:
            return list(self._pairs)

    def newest_first(self) -> List[ImagePair]:
        return list(reversed(self.all()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._pairs)
