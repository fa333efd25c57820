"""Common behaviour of Netpbm images and reading/writing them to files."""

from __future__ import annotations

import copy
import itertools
import os
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import TextIO

_LEADING_INT = re.compile(r"[+-]?\d+")


class ImageError(ValueError):
    """Raised when an image is malformed or an operation does not apply to it."""


def split_ints(text: str) -> list[int]:
    """Read whitespace-separated integers from ``text``, stopping at the first non-integer."""
    values: list[int] = []
    for token in text.split():
        match = _LEADING_INT.match(token)
        if match is None:
            break
        values.append(int(match.group()))
        if match.end() != len(token):
            break
    return values


class Netpbm(ABC):
    """A rectangular image stored as a flat, row-major list of pixel values."""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        version: int = 0,
        max_colour: int | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.version = version
        self.max_colour = max_colour
        self.pixels: list[int] = [0] * self.size if self.has_dimensions else []

    @property
    def has_dimensions(self) -> bool:
        """Whether both width and height are known."""
        return self.width is not None and self.height is not None

    @property
    def size(self) -> int:
        """Number of pixels the dimensions call for."""
        if not self.has_dimensions:
            return 0
        return self.width * self.height

    def set_pixels(self, values: Iterable[int]) -> None:
        """Replace the pixels with the first ``size`` entries of ``values``."""
        if not self.has_dimensions:
            raise ImageError(
                f"invalid height or width, height: {self.height}, width: {self.width}"
            )
        values = list(values)
        if len(values) < self.size:
            raise ImageError(f"expected {self.size} pixel values, got {len(values)}")
        self.pixels = values[: self.size]

    def _colour(self) -> int:
        if self.max_colour is None:
            raise ImageError("image has no maximum colour value")
        return self.max_colour

    def _clone(self) -> Netpbm:
        result = copy.copy(self)
        result.pixels = list(self.pixels)
        return result

    def _rows(self) -> Iterator[list[int]]:
        if not self.width:
            return
        for start in range(0, len(self.pixels), self.width):
            yield self.pixels[start : start + self.width]

    def __add__(self, other: Netpbm | int) -> Netpbm:
        if isinstance(other, Netpbm):
            if (self.width, self.height) != (other.width, other.height):
                raise ImageError(
                    f"unable to add images with sizes ({self.width}, {self.height}) "
                    f"+ ({other.width}, {other.height})"
                )
            addends: Iterable[int] = other.pixels
        elif isinstance(other, int):
            addends = itertools.repeat(other)
        else:
            return NotImplemented
        colour = self._colour()
        result = self._clone()
        result.pixels = [(p + a) % colour for p, a in zip(self.pixels, addends)]
        return result

    def __mod__(self, divisor: int) -> Netpbm:
        if not isinstance(divisor, int):
            return NotImplemented
        result = self._clone()
        result.pixels = [p % divisor for p in self.pixels]
        return result

    def __mul__(self, factor: int) -> Netpbm:
        if not isinstance(factor, int):
            return NotImplemented
        result = self._clone()
        result.pixels = [p * factor for p in self.pixels]
        return result

    def binarize(self, value: int) -> Netpbm:
        """Return a copy with 1 where a pixel differs from ``value`` and 0 where it equals it."""
        result = self._clone()
        result.pixels = [int(p != value) for p in self.pixels]
        return result

    def __invert__(self) -> Netpbm:
        result = self._clone()
        result.invert()
        return result

    def __getitem__(self, index):
        return self.pixels[index]

    def __setitem__(self, index, value) -> None:
        self.pixels[index] = value

    def pixel(self, row: int, column: int) -> int:
        """Return the pixel at ``row`` and ``column``."""
        return self.pixels[self.width * row + column]

    def array_string(self) -> str:
        """Render the pixels as bracketed rows, one row per line."""
        rows = ("".join(f"{p} " for p in row) for row in self._rows())
        return "[" + "]\n[".join(rows) + "]"

    def __str__(self) -> str:
        return self.array_string()

    def invert(self) -> None:
        """Invert every pixel in place against the maximum colour value."""
        colour = self._colour()
        self.pixels = [p - colour if p > colour else colour - p for p in self.pixels]

    def copy_to(self, target: Netpbm) -> None:
        """Copy dimensions, colour depth, version and pixels into ``target``."""
        target.width = self.width
        target.height = self.height
        target.max_colour = self.max_colour
        target.version = self.version
        target.pixels = list(self.pixels)

    @abstractmethod
    def export_header(self, stream: TextIO) -> None:
        """Write the file header to ``stream``."""

    @abstractmethod
    def export_body(self, stream: TextIO) -> None:
        """Write the pixel data to ``stream``."""

    @abstractmethod
    def import_header(self, lines: list[str]) -> list[str]:
        """Read the header from ``lines`` and return the lines that follow it."""

    @abstractmethod
    def import_body(self, lines: list[str]) -> None:
        """Read the pixel data from ``lines``."""


def export_image(image: Netpbm, filename: str | os.PathLike) -> None:
    """Write ``image`` to ``filename``."""
    with open(filename, "w", newline="\n") as stream:
        image.export_header(stream)
        image.export_body(stream)


def import_image_into(image: Netpbm, filename: str | os.PathLike) -> None:
    """Load ``filename`` into ``image``, ignoring lines that start with '#'."""
    with open(filename, newline="") as stream:
        lines = [line.removesuffix("\n") for line in stream if not line.startswith("#")]
    body = image.import_header(lines)
    try:
        image.import_body(body)
    except ImageError as exc:
        raise ImageError(f"failed to load body of image in file {filename}: {exc}") from exc