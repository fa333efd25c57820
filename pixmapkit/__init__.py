"""Read, write, invert and convert plain-text PBM, PGM and PPM images."""

__version__ = "1.0.0"