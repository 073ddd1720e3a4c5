"""
Unit tests for codec module.

Tests JPEG encoding/decoding and the combined process_photo step.
"""

import io

import pytest
from PIL import Image

from FC_Libs.errors import DecodeError, InvalidImage
from FC_Libs.FilterLib.codec import decode_image, encode_image, process_photo
from FC_Libs.FilterLib.film_types import FilmType
from conftest import encode_jpeg, make_gradient_image


class TestDecodeImage:
    """Tests for decode_image function."""

    def test_decodes_jpeg(self, sample_jpeg_bytes):
        image = decode_image(sample_jpeg_bytes)
        assert image.size == (64, 48)
        assert image.mode == "RGB"

    def test_decodes_png_with_alpha(self):
        buffer = io.BytesIO()
        make_gradient_image(mode="RGBA").save(buffer, format="PNG")
        image = decode_image(buffer.getvalue())
        assert image.mode == "RGBA"

    def test_converts_palette_image(self):
        buffer = io.BytesIO()
        make_gradient_image().convert("P").save(buffer, format="PNG")
        assert decode_image(buffer.getvalue()).mode == "RGB"

    def test_empty_bytes_raise(self):
        with pytest.raises(DecodeError):
            decode_image(b"")

    def test_garbage_raises(self):
        with pytest.raises(DecodeError):
            decode_image(b"definitely not an image")

    def test_truncated_jpeg_raises(self):
        data = encode_jpeg(make_gradient_image(256, 256))
        with pytest.raises(DecodeError):
            decode_image(data[: len(data) // 2])

    def test_decompression_bomb_raises(self, sample_jpeg_bytes, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
        with pytest.raises(DecodeError):
            decode_image(sample_jpeg_bytes)


class TestEncodeImage:
    """Tests for encode_image function."""

    def test_produces_jpeg(self, sample_image):
        data = encode_image(sample_image, quality=90)
        assert data[:2] == b"\xff\xd8"

    @pytest.mark.parametrize("quality", [100, 95, 50, 1])
    def test_round_trip_keeps_dimensions(self, quality):
        image = make_gradient_image(123, 77)
        assert decode_image(encode_image(image, quality)).size == (123, 77)

    def test_deterministic(self, sample_image):
        assert encode_image(sample_image, 95) == encode_image(sample_image, 95)

    def test_lower_quality_is_smaller(self):
        image = make_gradient_image(256, 256)
        assert len(encode_image(image, 20)) < len(encode_image(image, 100))

    def test_flattens_alpha(self):
        data = encode_image(make_gradient_image(mode="RGBA"))
        assert Image.open(io.BytesIO(data)).mode == "RGB"

    @pytest.mark.parametrize("quality", [-1, 101])
    def test_quality_out_of_range_raises(self, sample_image, quality):
        with pytest.raises(ValueError):
            encode_image(sample_image, quality)

    def test_zero_dimension_raises(self):
        with pytest.raises(InvalidImage):
            encode_image(Image.new("RGB", (0, 0)))


class TestProcessPhoto:
    """Tests for process_photo function."""

    def test_returns_filtered_jpeg_of_same_size(self, sample_jpeg_bytes):
        result = process_photo(sample_jpeg_bytes, FilmType.VINTAGE, quality=95)
        assert decode_image(result).size == (64, 48)

    def test_deterministic(self, sample_jpeg_bytes):
        first = process_photo(sample_jpeg_bytes, FilmType.HIGH_CONTRAST)
        second = process_photo(sample_jpeg_bytes, FilmType.HIGH_CONTRAST)
        assert first == second

    def test_film_types_differ(self, sample_jpeg_bytes):
        outputs = {process_photo(sample_jpeg_bytes, film_type) for film_type in FilmType}
        assert len(outputs) == len(FilmType)

    def test_invalid_bytes_raise(self):
        with pytest.raises(DecodeError):
            process_photo(b"\x00\x01\x02", FilmType.MONOCHROME)
