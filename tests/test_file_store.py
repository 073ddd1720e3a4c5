"""
Unit tests for file_store module.

Tests image path generation and the byte-level file operations.
"""

import pytest

from FC_Libs.errors import PersistError
from FC_Libs.PairStoreLib.file_store import FileStore, get_images_dir


class TestGetImagesDir:
    def test_creates_images_directory(self, tmp_path):
        images_dir = get_images_dir(tmp_path)
        assert images_dir.is_dir()
        assert images_dir.name == "Images"

    def test_for_base_dir(self, tmp_path):
        store = FileStore.for_base_dir(tmp_path)
        assert store.images_dir == tmp_path / "Images"


class TestNewImagePath:
    def test_uses_prefix_and_epoch_millis(self, images_dir):
        store = FileStore(images_dir, clock=lambda: 1700000000.123)
        path = store.new_image_path("original")
        assert path == images_dir / "original_1700000000123.jpg"

    def test_adds_counter_on_collision(self, images_dir):
        store = FileStore(images_dir, clock=lambda: 42.0)
        first = store.new_image_path("film")
        first.write_bytes(b"x")
        second = store.new_image_path("film")
        second.write_bytes(b"y")
        third = store.new_image_path("film")

        assert first.name == "film_42000.jpg"
        assert second.name == "film_42000_1.jpg"
        assert third.name == "film_42000_2.jpg"

    def test_prefixes_do_not_collide(self, images_dir):
        store = FileStore(images_dir, clock=lambda: 1.0)
        assert store.new_image_path("original") != store.new_image_path("film")


class TestFileOperations:
    def test_write_read_exists(self, file_store, images_dir):
        path = images_dir / "a.jpg"
        file_store.write_bytes(path, b"data")
        assert file_store.exists(path)
        assert file_store.read_bytes(path) == b"data"

    def test_exists_is_false_for_directories(self, file_store, images_dir):
        assert not file_store.exists(images_dir)

    def test_delete(self, file_store, images_dir):
        path = images_dir / "a.jpg"
        path.write_bytes(b"data")
        assert file_store.delete(path) is True
        assert not path.exists()

    def test_delete_missing_file(self, file_store, images_dir):
        assert file_store.delete(images_dir / "missing.jpg") is False

    def test_write_failure_raises_persist_error(self, file_store, images_dir):
        with pytest.raises(PersistError):
            file_store.write_bytes(images_dir / "no_such_dir" / "a.jpg", b"data")

    def test_uncreatable_images_dir_raises_persist_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = FileStore(blocker / "Images")
        with pytest.raises(PersistError):
            store.new_image_path("original")
