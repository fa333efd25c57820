import io

import pytest

from pixmapkit.formats import PBM, PGM, PPM
from pixmapkit.image import ImageError


def test_pbm_defaults():
    image = PBM(2, 3)
    assert (image.version, image.max_colour) == (1, 1)
    assert (image.width, image.height) == (2, 3)
    assert len(image.pixels) == 6


def test_pgm_defaults():
    assert PGM(2, 2).max_colour == 15
    assert PGM(2, 2, 255).max_colour == 255
    empty = PGM()
    assert empty.max_colour is None
    assert empty.width is None


def test_ppm_defaults_and_dimensions():
    image = PPM(4, 2)
    assert (image.width, image.height) == (4, 2)
    assert (image.version, image.max_colour) == (3, 255)


def test_pbm_export_header():
    stream = io.StringIO()
    PBM(3, 2).export_header(stream)
    assert stream.getvalue() == "P1\n3 2\n"


def test_pbm_export_body():
    image = PBM(3, 2)
    image.set_pixels([1, 0, 1, 0, 1, 0])
    stream = io.StringIO()
    image.export_body(stream)
    assert stream.getvalue() == "1 0 1 \n0 1 0 "


def test_pgm_export_header():
    stream = io.StringIO()
    PGM(2, 1).export_header(stream)
    assert stream.getvalue() == "P2\n2 1\n15\n"


def test_pbm_import_header_returns_remaining_lines():
    image = PBM()
    rest = image.import_header(["P1", "3 2", "1 0 1", "0 1 0"])
    assert rest == ["1 0 1", "0 1 0"]
    assert (image.width, image.height) == (3, 2)
    image.import_body(rest)
    assert image.pixels == [1, 0, 1, 0, 1, 0]


def test_grid_body_wrong_row_count_raises():
    image = PBM(2, 2)
    with pytest.raises(ImageError):
        image.import_body(["1 0"])


def test_grid_body_wrong_column_count_raises():
    image = PGM(2, 2)
    with pytest.raises(ImageError):
        image.import_body(["1 0", "1"])


def test_header_incomplete_raises():
    with pytest.raises(ImageError):
        PGM().import_header(["P2", "2 1"])


def test_header_missing_dimensions_raises():
    with pytest.raises(ImageError):
        PBM().import_header(["P1", "2"])


def test_pgm_import_header_reads_colour():
    image = PGM()
    rest = image.import_header(["P2", "2 1", "7", "1 2"])
    assert image.max_colour == 7
    assert rest == ["1 2"]


def test_pgm_bad_colour_line_raises():
    with pytest.raises(ImageError):
        PGM().import_header(["P2", "2 1", "deep", "1 2"])


def test_pack_rgb_puts_red_in_low_byte():
    assert PPM.pack_rgb((1, 2, 3)) == 0x030201


@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (10, 20, 30), (0, 128, 255)])
def test_pack_unpack_round_trip(rgb):
    assert PPM.unpack_rgb(PPM.pack_rgb(rgb)) == rgb


def test_pack_out_of_range_raises():
    with pytest.raises(ImageError):
        PPM.pack_rgb((256, 0, 0))


def test_rgb_string_conversions():
    value = PPM.pack_rgb((10, 20, 30))
    assert PPM.rgb_to_string(value) == "10 20 30"
    assert PPM.string_to_rgb("10 20 30") == value


def test_string_to_rgb_too_short_raises():
    with pytest.raises(ImageError):
        PPM.string_to_rgb("1 2")


def test_ppm_export():
    image = PPM(2, 1)
    image.set_pixels([PPM.pack_rgb((1, 2, 3)), PPM.pack_rgb((4, 5, 6))])
    stream = io.StringIO()
    image.export_header(stream)
    image.export_body(stream)
    assert stream.getvalue() == "P3\n2 1\n255\n1 2 3\n4 5 6\n"


def test_ppm_text_round_trip():
    image = PPM(1, 2, 100)
    image.set_pixels([PPM.pack_rgb((7, 8, 9)), PPM.pack_rgb((90, 0, 45))])
    stream = io.StringIO()
    image.export_header(stream)
    image.export_body(stream)
    loaded = PPM()
    rest = loaded.import_header(stream.getvalue().splitlines())
    loaded.import_body(rest)
    assert (loaded.width, loaded.height, loaded.max_colour) == (1, 2, 100)
    assert loaded.pixels == image.pixels


def test_ppm_body_wrong_count_raises():
    with pytest.raises(ImageError):
        PPM(2, 1).import_body(["1 2 3"])


def test_ppm_invert_complements_each_channel():
    rgb = (10, 200, 0)
    image = PPM(1, 1)
    image.set_pixels([PPM.pack_rgb(rgb)])
    image.invert()
    inverted = PPM.unpack_rgb(image.pixels[0])
    assert all(a + b == 255 for a, b in zip(rgb, inverted))
    image.invert()
    assert PPM.unpack_rgb(image.pixels[0]) == rgb


@pytest.mark.parametrize(
    "image_type, width, height, values",
    [(PBM, 2, 2, [1, 0, 0, 1]), (PGM, 3, 1, [0, 7, 15])],
)
def test_grid_text_round_trip(image_type, width, height, values):
    image = image_type(width, height)
    image.set_pixels(values)
    stream = io.StringIO()
    image.export_header(stream)
    image.export_body(stream)
    loaded = image_type()
    loaded.import_body(loaded.import_header(stream.getvalue().splitlines()))
    assert (loaded.width, loaded.height) == (width, height)
    assert loaded.pixels == values