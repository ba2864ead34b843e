"""Reading and writing 8-bit greyscale PGM images."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

_WHITESPACE = b" \t\r\n\v\f"


class PgmError(Exception):
    """Base class for PGM file errors."""

    code = 0
    default_message = "Unknow error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class PgmOpenError(PgmError):
    """The image file could not be opened."""

    code = -1
    default_message = "Error Opening PGM image file"


class PgmFormatError(PgmError):
    """The file is not a PGM image of the expected kind."""

    code = -2
    default_message = "Error: not a PGM image file"


class PgmDepthError(PgmError):
    """The image uses more than 8 bits per pixel."""

    code = -3
    default_message = "The Data in PGM file isn't in 8 bit format"


@dataclass
class PgmImage:
    """An 8-bit greyscale image stored row by row."""

    width: int
    height: int
    max_value: int = 255
    pixels: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        self.pixels = bytearray(self.pixels)
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y, or 0 outside the image."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.pixels[y * self.width + x]
        return 0


def _load(path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise PgmOpenError(f"Error Opening PGM image file {os.fspath(path)}") from exc


def _skip_blanks(data: bytes, pos: int) -> int:
    while pos < len(data):
        char = data[pos : pos + 1]
        if char in _WHITESPACE and char:
            pos += 1
        elif char == b"#":
            end = data.find(b"\n", pos)
            pos = len(data) if end < 0 else end + 1
        else:
            break
    return pos


def _parse_header(data: bytes, magic: bytes) -> tuple[int, int, int, int]:
    """Return width, height, max value and the offset just past the max value."""
    if not data.startswith(magic):
        raise PgmFormatError()
    pos = len(magic)
    if pos >= len(data) or data[pos : pos + 1] not in _WHITESPACE:
        raise PgmFormatError()
    fields = []
    for _ in range(3):
        pos = _skip_blanks(data, pos)
        start = pos
        while pos < len(data) and data[pos : pos + 1].isdigit():
            pos += 1
        if start == pos:
            raise PgmFormatError("Error: malformed PGM header")
        fields.append(int(data[start:pos]))
    width, height, max_value = fields
    if max_value > 255:
        raise PgmDepthError()
    return width, height, max_value, pos


def read_ascii_pgm(path: PathLike) -> PgmImage:
    """Read a plain (P2) PGM file."""
    data = _load(path)
    width, height, max_value, pos = _parse_header(data, b"P2")
    count = width * height
    tokens = data[pos:].split()
    if len(tokens) < count:
        raise PgmFormatError("Error: PGM image data is truncated")
    try:
        values = [int(token) for token in tokens[:count]]
    except ValueError as exc:
        raise PgmFormatError("Error: PGM image data is not numeric") from exc
    if any(not 0 <= value <= 255 for value in values):
        raise PgmDepthError()
    return PgmImage(width, height, max_value, bytearray(values))


def read_binary_pgm(path: PathLike) -> PgmImage:
    """Read a raw (P5) PGM file."""
    data = _load(path)
    width, height, max_value, pos = _parse_header(data, b"P5")
    if pos >= len(data) or data[pos : pos + 1] not in _WHITESPACE:
        raise PgmFormatError("Error: malformed PGM header")
    start = pos + 1
    count = width * height
    body = data[start : start + count]
    if len(body) < count:
        raise PgmFormatError("Error: PGM image data is truncated")
    return PgmImage(width, height, max_value, bytearray(body))


def _rows(image: PgmImage) -> Iterator[bytearray]:
    for row in range(image.height):
        yield image.pixels[row * image.width : (row + 1) * image.width]


def write_binary_pgm(image: PgmImage, path: PathLike) -> int:
    """Write the image as a raw (P5) PGM file and return the pixel count."""
    header = f"P5\n{image.width}\n{image.height}\n{image.max_value}\n".encode("ascii")
    try:
        with open(path, "wb") as out:
            out.write(header)
            out.write(bytes(image.pixels))
    except OSError as exc:
        raise PgmOpenError(f"Error Opening PGM image file {os.fspath(path)}") from exc
    return image.width * image.height


def write_pixel_list(image: PgmImage, path: PathLike) -> None:
    """Write the pixel values as text, one image row per line."""
    try:
        with open(path, "w", encoding="ascii") as out:
            for row in _rows(image):
                out.write("".join(f"{value} " for value in row))
                out.write("\n")
    except OSError as exc:
        raise PgmOpenError(f"cannot open {os.fspath(path)}") from exc