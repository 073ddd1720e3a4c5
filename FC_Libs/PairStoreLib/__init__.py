"""
PairStoreLib - Image pair storage and persistence

This module handles the original/filtered image pairs produced by each
capture, the files behind them and the durable path lists that record them.
"""

from FC_Libs.PairStoreLib.image_models import ImagePair
from FC_Libs.PairStoreLib.path_store import PathStore, InMemoryPathStore, JsonPathStore
from FC_Libs.PairStoreLib.file_store import FileStore, get_images_dir
from FC_Libs.PairStoreLib.image_pair_store import ImagePairStore

__all__ = [
    "ImagePair",
    "PathStore",
    "InMemoryPathStore",
    "JsonPathStore",
    "FileStore",
    "get_images_dir",
    "ImagePairStore",
]
