"""Tests for cli module."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from PIL import Image
from seam_carver.cli import main, parse_args


@pytest.fixture
def input_image(tmp_path):
    img = Image.new('RGB', (12, 8), (40, 40, 40))
    for y in range(8):
        img.putpixel((6, y), (250, 10, 10))
    path = tmp_path / "input.png"
    img.save(path)
    return path


class TestParseArgs:
    def test_minimal_args(self):
        config = parse_args(["prog", "in.png", "out.png"])
        assert config.input_path == "in.png"
        assert config.output_path == "out.png"
        assert config.target_width is None
        assert config.target_height is None

    def test_targets_and_flags(self):
        config = parse_args(["prog", "in.png", "out.png", "--width", "10",
                             "--height", "4", "--mark-seams", "--debug"])
        assert config.target_width == 10
        assert config.target_height == 4
        assert config.mark_seams is True
        assert config.debug is True

    def test_missing_output(self):
        with pytest.raises(SystemExit):
            parse_args(["prog", "in.png"])


class TestMain:
    def test_carves_image(self, input_image, tmp_path):
        out = tmp_path / "out.png"
        assert main(["prog", str(input_image), str(out), "--width", "9", "--height", "6"]) == 0
        with Image.open(out) as img:
            assert img.size == (9, 6)

    def test_mark_seams(self, input_image, tmp_path):
        out = tmp_path / "marked.png"
        assert main(["prog", str(input_image), str(out), "--mark-seams"]) == 0
        with Image.open(out) as img:
            assert img.size == (12, 8)
            colors = {c for _, c in img.convert('RGB').getcolors()}
            assert (255, 0, 0) in colors

    def test_target_too_large(self, input_image, tmp_path, capsys):
        out = tmp_path / "out.png"
        assert main(["prog", str(input_image), str(out), "--width", "20"]) == 1
        assert "exceeds" in capsys.readouterr().err
        assert not out.exists()

    def test_missing_input(self, tmp_path, capsys):
        assert main(["prog", str(tmp_path / "nope.png"), str(tmp_path / "out.png")]) == 1
        assert "I/O error" in capsys.readouterr().err

    def test_unknown_output_format(self, input_image, tmp_path, capsys):
        out = tmp_path / "out.unknownext"
        assert main(["prog", str(input_image), str(out), "--width", "3"]) == 1
        assert "Processing error" in capsys.readouterr().err
