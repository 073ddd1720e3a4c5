"""
Film filter pipelines for Film Camera.

Every film type is a fixed, declarative list of FilterStep entries that name
a primitive from filter_ops and its parameters. apply_filter runs the steps
in order, feeding each stage's output into the next.

Classes:
    FilterStep: One primitive invocation within a film pipeline

Functions:
    get_film_pipeline: Get the step list for a film type
    run_filter_steps: Run an arbitrary step list over an image
    apply_filter: Apply a film type's pipeline to an image
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from PIL import Image

from FC_Libs.constants import DEFAULT_GRAIN_AMOUNT, DEFAULT_VIGNETTE_STRENGTH
from FC_Libs.FilterLib.film_types import FilmType
from FC_Libs.FilterLib.filter_ops import (
    add_grain,
    adjust_contrast,
    adjust_saturation,
    apply_vignette,
    color_offset,
    desaturate,
    ensure_raster,
)

STEP_DESATURATE = "desaturate"
STEP_CONTRAST = "contrast"
STEP_SATURATION = "saturation"
STEP_COLOR_OFFSET = "color_offset"
STEP_GRAIN = "grain"
STEP_VIGNETTE = "vignette"

FILTER_PRIMITIVES: Dict[str, Callable[..., Image.Image]] = {
    STEP_DESATURATE: desaturate,
    STEP_CONTRAST: adjust_contrast,
    STEP_SATURATION: adjust_saturation,
    STEP_COLOR_OFFSET: color_offset,
    STEP_GRAIN: add_grain,
    STEP_VIGNETTE: apply_vignette,
}


@dataclass(frozen=True)
class FilterStep:
    """A single primitive invocation.

    Attributes:
        name: Key into FILTER_PRIMITIVES
        params: Keyword arguments passed to the primitive, as (name, value) pairs
    """
    name: str
    params: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    def kwargs(self) -> Dict[str, Any]:
        return dict(self.params)


def _step(name: str, **params: Any) -> FilterStep:
    return FilterStep(name, tuple(sorted(params.items())))


FILM_PIPELINES: Dict[FilmType, Tuple[FilterStep, ...]] = {
    FilmType.MONOCHROME: (
        _step(STEP_DESATURATE),
        _step(STEP_CONTRAST, factor=1.2),
        _step(STEP_GRAIN, amount=DEFAULT_GRAIN_AMOUNT),
    ),
    FilmType.VINTAGE: (
        _step(STEP_SATURATION, factor=0.7),
        _step(STEP_CONTRAST, factor=1.1),
        _step(STEP_COLOR_OFFSET, red=10, green=0, blue=-10),
        _step(STEP_GRAIN, amount=DEFAULT_GRAIN_AMOUNT),
        _step(STEP_VIGNETTE, strength=DEFAULT_VIGNETTE_STRENGTH),
    ),
    FilmType.HIGH_CONTRAST: (
        _step(STEP_CONTRAST, factor=1.3),
        _step(STEP_SATURATION, factor=1.2),
        _step(STEP_GRAIN, amount=DEFAULT_GRAIN_AMOUNT),
    ),
    FilmType.WARM_TONE: (
        _step(STEP_SATURATION, factor=1.1),
        _step(STEP_COLOR_OFFSET, red=10, green=8, blue=-5),
        _step(STEP_CONTRAST, factor=1.05),
        _step(STEP_GRAIN, amount=DEFAULT_GRAIN_AMOUNT),
    ),
}


def get_film_pipeline(film_type: FilmType) -> List[FilterStep]:
    return list(FILM_PIPELINES[FilmType.parse(film_type)])


def run_filter_steps(
    image: Any,
    steps: Sequence[FilterStep],
    seed: Optional[int] = None,
) -> Image.Image:
    """
    Run a sequence of filter steps over an image.

    Args:
        image: PIL Image (RGB or RGBA, other modes are converted)
        steps: FilterStep entries applied in order
        seed: Grain seed forwarded to every grain step

    Returns:
        A new PIL Image; the input is left untouched

    Raises:
        InvalidImage: If image is not a PIL Image or has a zero dimension
        KeyError: If a step names an unknown primitive
    """
    result = ensure_raster(image)
    if result is image:
        result = image.copy()

    for step in steps:
        if step.name not in FILTER_PRIMITIVES:
            available = ", ".join(sorted(FILTER_PRIMITIVES))
            raise KeyError(f"Unknown filter step '{step.name}'. Available steps: {available}")

        kwargs = step.kwargs()
        if step.name == STEP_GRAIN:
            kwargs["seed"] = seed
        result = FILTER_PRIMITIVES[step.name](result, **kwargs)

    return result


def apply_filter(image: Any, film_type: FilmType, seed: Optional[int] = None) -> Image.Image:
    """
    Apply a film type's pipeline to an image.

    Pure and deterministic: the same image, film type and seed always give
    the same output, and the output has the input's width and height.

    Args:
        image: PIL Image
        film_type: FilmType (or anything FilmType.parse accepts)
        seed: Optional grain seed (defaults to DEFAULT_GRAIN_SEED)

    Returns:
        Filtered PIL Image in RGB or RGBA mode

    Raises:
        InvalidImage: If image is not a PIL Image or has a zero dimension
        ValueError: If film_type is unknown
    """
    return run_filter_steps(image, FILM_PIPELINES[FilmType.parse(film_type)], seed=seed)
