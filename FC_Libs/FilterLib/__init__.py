"""
FilterLib - Film filter engine and codec

This module provides the filter primitives, the per-film-type pipelines
and the JPEG codec used by the capture pipeline.
"""

from FC_Libs.FilterLib.film_types import FilmType, list_film_types
from FC_Libs.FilterLib.filter_ops import (
    ensure_raster,
    desaturate,
    adjust_contrast,
    adjust_saturation,
    color_offset,
    add_grain,
    apply_vignette,
)
from FC_Libs.FilterLib.film_filters import (
    FilterStep,
    FILM_PIPELINES,
    get_film_pipeline,
    run_filter_steps,
    apply_filter,
)
from FC_Libs.FilterLib.codec import decode_image, encode_image, process_photo

__all__ = [
    "FilmType",
    "list_film_types",
    "ensure_raster",
    "desaturate",
    "adjust_contrast",
    "adjust_saturation",
    "color_offset",
    "add_grain",
    "apply_vignette",
    "FilterStep",
    "FILM_PIPELINES",
    "get_film_pipeline",
    "run_filter_steps",
    "apply_filter",
    "decode_image",
    "encode_image",
    "process_photo",
]
