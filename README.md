# pixmapkit

A small library for the plain-text Netpbm image formats:

- **PBM** (`P1`): black-and-white bitmaps, one value of 0 or 1 per pixel
- **PGM** (`P2`): greymaps with a maximum grey value (15 by default)
- **PPM** (`P3`): colour pixmaps, each pixel an `R G B` triple packed into
  one integer (red in the lowest byte); the maximum colour defaults to 255

Images can be read from and written to files, inverted, combined with
arithmetic operators and converted between formats.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
pixmapkit [IMAGE]
```

`pixmapkit` loads a PBM file (by default `images/letterj.pbm`), prints its
pixel grid, inverts it and prints the inverted grid. If the file cannot be
read or is malformed, it prints a message to standard error and exits with
status 1. Run `pixmapkit --help` for its usage.

## Library use

Reading, inverting and writing an image:

```python
from pixmapkit.formats import PBM
from pixmapkit.image import import_image_into, export_image

pbm = PBM()
import_image_into(pbm, "letterj.pbm")
print(pbm)          # one bracketed row of pixel values per line

pbm.invert()        # in place
export_image(pbm, "letterj-inverted.pbm")
```

`import_image_into` skips every line that starts with `#`, reads the header
(the type line, a `width height` line and, for PGM and PPM, the maximum
colour line) and then the body. PBM and PGM bodies must have one line per
row with exactly `width` values; PPM bodies must have one `r g b` line per
pixel. A malformed file raises `pixmapkit.image.ImageError`; a missing file
raises `OSError`.

`export_image` writes the header followed by the pixel rows, each value
followed by a space.

Building an image in memory:

```python
from pixmapkit.formats import PGM

pgm = PGM(5, 5)     # maximum colour 15
pgm.set_pixels([0, 3, 3, 3, 3,
                0, 3, 0, 0, 0,
                0, 3, 3, 3, 0,
                0, 3, 0, 0, 0,
                0, 3, 0, 0, 0])
print(pgm.pixel(1, 1))   # 3
```

`set_pixels` takes the first `width * height` values and raises
`ImageError` if there are fewer or if the dimensions are not set.

### Pixel operations

The operators return a new image and leave the original unchanged:

- `image + n` adds `n` to every pixel, wrapping at the maximum colour
- `image + other` adds pixel by pixel, wrapping at the maximum colour;
  images of different sizes raise `ImageError`
- `image % n` and `image * n` apply to every pixel without wrapping
- `image.binarize(v)` gives 1 where a pixel differs from `v`, else 0
- `~image` gives an inverted copy

`image.invert()` inverts in place. Pixels can be read and set with
`image[i]` and `image[i] = value` on the flat, row-major pixel list,
which is also available as `image.pixels`. `image.copy_to(other)` copies
dimensions, version, maximum colour and pixels into another image.

PPM inversion subtracts each colour channel from the maximum colour.
`PPM.pack_rgb`, `PPM.unpack_rgb`, `PPM.rgb_to_string` and
`PPM.string_to_rgb` convert between the packed integer, an `(r, g, b)`
triple and the `"r g b"` text form; `pack_rgb` raises `ImageError` for a
channel outside 0–255.

### Converting between formats

```python
from pixmapkit.convert import pgm_to_pbm, pbm_to_pgm, ppm_to_pgm

bitmap = pgm_to_pbm(pgm)      # grey 0 becomes 1, anything else 0
greymap = pbm_to_pgm(bitmap)  # 1 becomes 0, 0 becomes 15
```

`ppm_to_pgm` builds a greymap whose pixels are the packed PPM values
modulo 15.

## Limitations

- Only the plain-text variants (`P1`, `P2`, `P3`) are handled; the binary
  variants `P4`, `P5` and `P6` are not.
- The type line of a file is not checked: the file is read according to
  the class of the image it is loaded into.
- Comments are recognised only as whole lines starting with `#`.

## Modules

- `pixmapkit.image`: the shared `Netpbm` base class, `ImageError`,
  `split_ints`, `import_image_into` and `export_image`
- `pixmapkit.formats`: `PBM`, `PGM` and `PPM`
- `pixmapkit.convert`: `pbm_to_pgm`, `pgm_to_pbm`, `ppm_to_pgm`
- `pixmapkit.cli`: the `pixmapkit` command