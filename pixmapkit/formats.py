"""The PBM (bitmap), PGM (greymap) and PPM (pixmap) plain-text formats."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TextIO

from pixmapkit.image import ImageError, Netpbm, split_ints


def _take_header(lines: list[str], count: int) -> tuple[list[str], list[str]]:
    if len(lines) < count:
        raise ImageError("image header is incomplete")
    return lines[:count], lines[count:]


def _parse_dimensions(line: str) -> tuple[int, int]:
    values = split_ints(line)
    if len(values) < 2:
        raise ImageError(f"invalid width and height line: {line!r}")
    return values[0], values[1]


def _parse_colour(line: str) -> int:
    values = split_ints(line)
    if not values:
        raise ImageError(f"invalid maximum colour line: {line!r}")
    return values[0]


def _grid_rows(image: Netpbm) -> Iterator[list[int]]:
    if not image.width:
        return
    for start in range(0, len(image.pixels), image.width):
        yield image.pixels[start : start + image.width]


def _write_grid(image: Netpbm, stream: TextIO) -> None:
    stream.write("\n".join("".join(f"{p} " for p in row) for row in _grid_rows(image)))


def _read_grid(image: Netpbm, lines: Sequence[str]) -> None:
    if len(lines) != image.height:
        raise ImageError(f"expected {image.height} rows, found {len(lines)}")
    pixels: list[int] = []
    for line in lines:
        row = split_ints(line)
        if len(row) != image.width:
            raise ImageError(f"expected {image.width} values in row, found {len(row)}")
        pixels.extend(row)
    image.pixels = pixels


class PBM(Netpbm):
    """Black and white image with pixel values 0 and 1."""

    VERSION = 1

    def __init__(self, width: int | None = None, height: int | None = None) -> None:
        super().__init__(width, height, self.VERSION, 1)

    def export_header(self, stream: TextIO) -> None:
        stream.write(f"P{self.version}\n{self.width} {self.height}\n")

    def export_body(self, stream: TextIO) -> None:
        _write_grid(self, stream)

    def import_header(self, lines: list[str]) -> list[str]:
        header, rest = _take_header(lines, 2)
        self.width, self.height = _parse_dimensions(header[1])
        return rest

    def import_body(self, lines: list[str]) -> None:
        _read_grid(self, lines)


class PGM(Netpbm):
    """Greyscale image with pixel values from 0 to the maximum colour."""

    VERSION = 2
    DEFAULT_MAX_COLOUR = 15

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        max_colour: int | None = None,
    ) -> None:
        if max_colour is None and width is not None and height is not None:
            max_colour = self.DEFAULT_MAX_COLOUR
        super().__init__(width, height, self.VERSION, max_colour)

    def export_header(self, stream: TextIO) -> None:
        stream.write(f"P{self.version}\n{self.width} {self.height}\n{self.max_colour}\n")

    def export_body(self, stream: TextIO) -> None:
        _write_grid(self, stream)

    def import_header(self, lines: list[str]) -> list[str]:
        header, rest = _take_header(lines, 3)
        self.width, self.height = _parse_dimensions(header[1])
        self.max_colour = _parse_colour(header[2])
        return rest

    def import_body(self, lines: list[str]) -> None:
        _read_grid(self, lines)


class PPM(Netpbm):
    """Colour image; each pixel packs red, green and blue into one integer."""

    VERSION = 3
    DEFAULT_MAX_COLOUR = 255

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        max_colour: int | None = None,
    ) -> None:
        if max_colour is None and width is not None and height is not None:
            max_colour = self.DEFAULT_MAX_COLOUR
        super().__init__(width, height, self.VERSION, max_colour)

    def export_header(self, stream: TextIO) -> None:
        stream.write(f"P{self.version}\n{self.width} {self.height}\n{self.max_colour}\n")

    def export_body(self, stream: TextIO) -> None:
        for value in self.pixels:
            stream.write(self.rgb_to_string(value) + "\n")

    def import_header(self, lines: list[str]) -> list[str]:
        header, rest = _take_header(lines, 3)
        self.width, self.height = _parse_dimensions(header[1])
        self.max_colour = _parse_colour(header[2])
        return rest

    def import_body(self, lines: list[str]) -> None:
        if len(lines) != self.size:
            raise ImageError(f"expected {self.size} pixel lines, found {len(lines)}")
        self.pixels = [self.string_to_rgb(line) for line in lines]

    def invert(self) -> None:
        colour = self._colour()
        self.pixels = [
            self.pack_rgb(tuple(colour - channel for channel in self.unpack_rgb(value)))
            for value in self.pixels
        ]

    @staticmethod
    def pack_rgb(rgb: Sequence[int]) -> int:
        """Pack (red, green, blue) into one integer, red in the lowest byte."""
        red, green, blue = rgb
        for channel in (red, green, blue):
            if not 0 <= channel <= 0xFF:
                raise ImageError(f"colour channel out of range: {channel}")
        return (blue << 16) | (green << 8) | red

    @staticmethod
    def unpack_rgb(value: int) -> tuple[int, int, int]:
        """Split a packed pixel into (red, green, blue)."""
        return value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF

    @staticmethod
    def rgb_to_string(value: int) -> str:
        """Format a packed pixel as "red green blue"."""
        return " ".join(str(channel) for channel in PPM.unpack_rgb(value))

    @staticmethod
    def string_to_rgb(line: str) -> int:
        """Parse "red green blue" into a packed pixel."""
        values = split_ints(line)
        if len(values) < 3:
            raise ImageError(f"expected three colour values in {line!r}")
        return PPM.pack_rgb(values[:3])