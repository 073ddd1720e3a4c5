"""
Image pair data model for Film Camera.

Classes:
    ImagePair: The original and filtered files produced by one capture
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImagePair:
    original_path: str
    filtered_path: str

    def __post_init__(self) -> None:
        if not self.original_path or not self.filtered_path:
            raise ValueError("ImagePair paths must not be empty")
        if self.original_path == self.filtered_path:
            raise ValueError(f"ImagePair paths must differ: {self.original_path}")
