"""
Smoke tests for the film_camera command-line front end.
"""

import pytest
from PIL import Image

from film_camera import main
from conftest import encode_jpeg, make_gradient_image


@pytest.fixture
def base_dir(tmp_path):
    return tmp_path / "app"


def run(base_dir, *args):
    return main(["--base-dir", str(base_dir), *args])


class TestFilmsCommand:
    def test_lists_all_film_types(self, base_dir, capsys):
        assert run(base_dir, "films") == 0
        output = capsys.readouterr().out
        for name in ("monochrome", "vintage", "high_contrast", "warm_tone"):
            assert name in output


class TestFilterCommand:
    def test_filters_file(self, base_dir, tmp_path):
        source = tmp_path / "in.jpg"
        source.write_bytes(encode_jpeg(make_gradient_image(40, 30)))
        target = tmp_path / "out.jpg"

        assert run(base_dir, "filter", str(source), str(target), "--film", "vintage") == 0

        with Image.open(target) as result:
            assert result.size == (40, 30)
            assert result.format == "JPEG"

    def test_undecodable_input_fails(self, base_dir, tmp_path, capsys):
        source = tmp_path / "in.jpg"
        source.write_bytes(b"not an image")

        assert run(base_dir, "filter", str(source), str(tmp_path / "out.jpg")) == 1
        assert "Error" in capsys.readouterr().err

    def test_unknown_film_type_fails(self, base_dir, tmp_path):
        source = tmp_path / "in.jpg"
        source.write_bytes(encode_jpeg(make_gradient_image()))
        assert run(base_dir, "filter", str(source), str(tmp_path / "out.jpg"), "--film", "sepia") == 1


class TestCaptureAndList:
    def test_capture_then_list(self, base_dir, capsys):
        assert run(base_dir, "capture", "--source", "mock", "--count", "2", "--film", "warm_tone") == 0
        capsys.readouterr()

        assert run(base_dir, "list") == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert all("original_" in line and "film_" in line for line in lines)

    def test_list_newest_first(self, base_dir, capsys):
        run(base_dir, "capture", "--count", "2")
        capsys.readouterr()

        run(base_dir, "list")
        oldest_first = capsys.readouterr().out.strip().splitlines()
        run(base_dir, "list", "--newest-first")
        newest_first = capsys.readouterr().out.strip().splitlines()

        assert newest_first == list(reversed(oldest_first))

    def test_capture_from_directory(self, base_dir, tmp_path, capsys):
        shots = tmp_path / "shots"
        shots.mkdir()
        for index in range(2):
            (shots / f"shot_{index}.jpg").write_bytes(encode_jpeg(make_gradient_image(20 + index, 10)))

        assert run(base_dir, "capture", "--source", str(shots), "--count", "2") == 0
        assert run(base_dir, "capture", "--source", str(shots), "--count", "3") == 1

    def test_failed_capture_stops_remaining_count(self, base_dir, tmp_path, capsys):
        shots = tmp_path / "shots"
        shots.mkdir()
        (shots / "a_good.jpg").write_bytes(encode_jpeg(make_gradient_image(20, 10)))
        (shots / "b_bad.jpg").write_bytes(b"not an image")
        (shots / "c_good.jpg").write_bytes(encode_jpeg(make_gradient_image(24, 12)))

        assert run(base_dir, "capture", "--source", str(shots), "--count", "3") == 1
        capsys.readouterr()

        assert run(base_dir, "list") == 0
        assert len(capsys.readouterr().out.strip().splitlines()) == 1

    def test_empty_list(self, base_dir, capsys):
        assert run(base_dir, "list") == 0
        assert "No photos yet" in capsys.readouterr().out
