import io
import random

import pytest

from oslab.fda import main, smooth
from oslab.pgm import PgmImage, read_binary_pgm


def _random_image(width, height, seed):
    rng = random.Random(seed)
    return PgmImage(width, height, 255, bytearray(rng.randint(0, 255) for _ in range(width * height)))


def _write_ascii(path, image):
    rows = [
        " ".join(str(v) for v in image.pixels[r * image.width : (r + 1) * image.width])
        for r in range(image.height)
    ]
    path.write_text(f"P2\n{image.width} {image.height}\n{image.max_value}\n" + "\n".join(rows) + "\n")
    return path


def test_zero_iterations_keeps_pixels():
    image = _random_image(5, 4, 1)
    out = smooth(image, 3.0, 0)
    assert out == image


def test_zero_image_stays_zero():
    image = PgmImage(4, 3, 255, bytearray(12))
    out = smooth(image, 2.0, 3)
    assert list(out.pixels) == [0] * 12


def test_smoothing_stays_within_range():
    image = _random_image(6, 6, 2)
    out = smooth(image, 10.0, 2)
    assert (out.width, out.height, out.max_value) == (6, 6, 255)
    assert min(out.pixels) >= min(image.pixels) - 1
    assert max(out.pixels) <= max(image.pixels)


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        smooth(_random_image(2, 2, 3), 1.0, -1)


def test_main_with_options(tmp_path, capsys):
    image = _random_image(5, 3, 4)
    src = _write_ascii(tmp_path / "in.pgm", image)
    dst = tmp_path / "out.pgm"
    code = main([str(src), str(dst), "--lam", "5", "--iterations", "2"])
    assert code == 0
    result = read_binary_pgm(dst)
    assert (result.width, result.height) == (5, 3)
    assert result == smooth(image, 5.0, 2)
    out = capsys.readouterr().out
    assert "iteration number:   2" in out


def test_main_prompts_on_stdin(tmp_path, monkeypatch):
    image = _random_image(3, 3, 5)
    src = _write_ascii(tmp_path / "in.pgm", image)
    dst = tmp_path / "out.pgm"
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1\n"))
    assert main([str(src), str(dst)]) == 0
    assert read_binary_pgm(dst) == smooth(image, 4.0, 1)


def test_main_missing_input(tmp_path, capsys):
    code = main([str(tmp_path / "missing.pgm"), str(tmp_path / "out.pgm"), "--lam", "1", "--iterations", "1"])
    assert code == 1
    assert "Error Opening PGM image file" in capsys.readouterr().err
    assert not (tmp_path / "out.pgm").exists()


def test_main_bad_lambda(tmp_path):
    src = _write_ascii(tmp_path / "in.pgm", _random_image(2, 2, 6))
    dst = tmp_path / "out.pgm"
    assert main([str(src), str(dst), "--lam", "0", "--iterations", "1"]) == 1
    assert not dst.exists()