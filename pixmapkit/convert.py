"""Conversions between the bitmap, greymap and pixmap image types."""

from __future__ import annotations

from pixmapkit.formats import PBM, PGM, PPM


def pbm_to_pgm(pbm: PBM) -> PGM:
    """Turn a bitmap into a greymap, mapping black (1) to 0 and white (0) to the maximum colour."""
    grey = PGM(pbm.width, pbm.height)
    grey.set_pixels(pbm.pixels)
    # Replace every 1 with the maximum colour, then invert so black stays lowest.
    grey = grey * grey.max_colour
    grey.invert()
    return grey


def pgm_to_pbm(pgm: PGM) -> PBM:
    """Turn a greymap into a bitmap: pixels at 0 become black (1), all others white (0)."""
    bitmap = PBM(pgm.width, pgm.height)
    bitmap.set_pixels(pgm.pixels)
    bitmap = bitmap.binarize(0)
    bitmap.invert()
    return bitmap


def ppm_to_pgm(ppm: PPM) -> PGM:
    """Turn a pixmap into a greymap by reducing each packed pixel modulo the grey depth."""
    grey = PGM(ppm.width, ppm.height)
    grey.set_pixels(ppm.pixels)
    return grey % grey.max_colour