"""
Film type presets for Film Camera.

A film type names a fixed sequence of filter primitives that emulates an
analog film look. The member order matches the selector order in the
camera UI (index 0..3).
"""

from enum import Enum
from typing import Any, List


class FilmType(Enum):
    MONOCHROME = "monochrome"
    VINTAGE = "vintage"
    HIGH_CONTRAST = "high_contrast"
    WARM_TONE = "warm_tone"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def index(self) -> int:
        return list(FilmType).index(self)

    @classmethod
    def from_index(cls, index: int) -> "FilmType":
        members = list(cls)
        if not 0 <= index < len(members):
            raise ValueError(f"Film type index out of range: {index}")
        return members[index]

    @classmethod
    def parse(cls, value: Any) -> "FilmType":
        """
        Resolve a film type from a member, an index, a member name or a value.

        Args:
            value: FilmType, int index, or string such as "vintage",
                   "HIGH_CONTRAST" or "high-contrast"

        Returns:
            The matching FilmType

        Raises:
            ValueError: If value does not name a film type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown film type: {value!r}")
        if isinstance(value, int):
            return cls.from_index(value)

        text = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        if text.isdigit():
            return cls.from_index(int(text))
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member

        raise ValueError(
            f"Unknown film type: {value!r}. "
            f"Available types: {', '.join(list_film_types())}"
        )


_LABELS = {
    FilmType.MONOCHROME: "Black & White",
    FilmType.VINTAGE: "Vintage",
    FilmType.HIGH_CONTRAST: "High Contrast",
    FilmType.WARM_TONE: "Warm Tone",
}


def list_film_types() -> List[str]:
    return [member.value for member in FilmType]
