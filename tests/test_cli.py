"""End-to-end tests for the raytracer command line.

Tests cover:
- Rendering tiny images to a PNG and printing the path
- Output resizing and reproducibility for a fixed seed
- BVH fallback for scenes with planes
- Argument validation and logging setup
"""

import logging

import pytest
from PIL import Image

from raytracer import main as cli


REAL_SETUP_LOGGING = cli.setup_logging


@pytest.fixture(autouse=True)
def keep_logging(monkeypatch):
    """Leave pytest's log capture handlers in place."""
    monkeypatch.setattr(cli, "setup_logging", lambda verbose: None)


def run_cli(tmp_path, *extra, name="out.png"):
    out = tmp_path / name
    argv = ["-x", "4", "-y", "3", "-p", "1", "-e", "7", "-j", "2", "-o", str(out), *extra]
    return cli.main(argv), out


class TestRender:
    """Tests for successful renders."""

    def test_writes_png_and_prints_path(self, tmp_path, capsys):
        """Test the image is written and its path printed to stdout."""
        status, out = run_cli(tmp_path)
        assert status == 0
        assert capsys.readouterr().out.strip() == str(out)
        with Image.open(out) as img:
            assert img.format == "PNG"
            assert img.size == (4, 3)

    def test_resized_output(self, tmp_path):
        """Test -w/-h resize the rendered image."""
        status, out = run_cli(tmp_path, "-w", "8", "-h", "6")
        assert status == 0
        with Image.open(out) as img:
            assert img.size == (8, 6)

    def test_same_seed_same_image(self, tmp_path):
        """Test two runs with one seed produce identical pixels."""
        _, first = run_cli(tmp_path, "-s", "2spheres", name="a.png")
        _, second = run_cli(tmp_path, "-s", "2spheres", "-j", "1", name="b.png")
        with Image.open(first) as a, Image.open(second) as b:
            assert a.tobytes() == b.tobytes()

    def test_random_scene_with_bvh(self, tmp_path):
        """Test a bounded scene renders through the BVH."""
        status, out = run_cli(tmp_path, "-s", "random", "-b")
        assert status == 0
        assert out.exists()

    def test_bvh_falls_back_for_planes(self, tmp_path, caplog):
        """Test a plane scene warns and renders without the BVH."""
        with caplog.at_level(logging.WARNING):
            status, out = run_cli(tmp_path, "-s", "default", "--bvh")
        assert status == 0
        assert out.exists()
        assert "linear search" in caplog.text

    def test_verbose_logs_timings(self, tmp_path, caplog):
        """Test verbose runs report the render parameters and timings."""
        with caplog.at_level(logging.INFO):
            run_cli(tmp_path, "-v")
        assert "seed=7" in caplog.text
        assert "Raytrace complete" in caplog.text


class TestArguments:
    """Tests for argument handling."""

    def test_unknown_scene(self, tmp_path):
        """Test the parser rejects scenes it does not know."""
        with pytest.raises(SystemExit) as excinfo:
            run_cli(tmp_path, "-s", "teapot")
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("flag", ["-x", "-p", "-j", "-w"])
    def test_non_positive_values(self, tmp_path, flag):
        """Test zero sizes, samples and workers are usage errors."""
        with pytest.raises(SystemExit) as excinfo:
            run_cli(tmp_path, flag, "0")
        assert excinfo.value.code == 2

    def test_short_h_is_height(self):
        """Test -h sets the output height rather than printing help."""
        args = cli.build_parser().parse_args(["-h", "10"])
        assert args.height == 10

    def test_help(self, capsys):
        """Test --help prints usage and exits cleanly."""
        with pytest.raises(SystemExit) as excinfo:
            cli.build_parser().parse_args(["--help"])
        assert excinfo.value.code == 0
        assert "--samples-per-pixel" in capsys.readouterr().out

    def test_defaults(self):
        """Test the documented defaults."""
        args = cli.build_parser().parse_args([])
        assert (args.nx, args.ny, args.samples_per_pixel) == (64, 48, 100)
        assert args.scene == "default"
        assert args.seed is None
        assert not args.bvh


class TestLoggingSetup:
    """Tests for the logging configuration."""

    def test_levels(self, monkeypatch):
        """Test verbose selects INFO and quiet selects WARNING on stderr."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        REAL_SETUP_LOGGING(True)
        REAL_SETUP_LOGGING(False)
        assert calls[0]["level"] == logging.INFO
        assert calls[1]["level"] == logging.WARNING
        assert "%(asctime)s" in calls[0]["format"]
