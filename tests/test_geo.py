import math
import sys

import pytest

from osmsieve.geo import (
    Box,
    box_contains,
    common_area,
    extend_box,
    lat_lng_to_web_merc,
    min_box,
    pad,
)


def test_min_box_is_identity_for_extend():
    box = Box(1.0, 2.0, 3.0, 4.0)
    assert extend_box(box, min_box()) == box
    assert extend_box(min_box(), box) == box


def test_min_box_is_inverted():
    box = min_box()
    assert box.min_x == sys.float_info.max
    assert box.max_x == -sys.float_info.max
    assert not box_contains(box, 0.0, 0.0)


def test_pad_grows_every_side():
    box = pad(Box(1.0, 2.0, 3.0, 4.0), 0.5)
    assert box == Box(0.5, 1.5, 3.5, 4.5)


def test_pad_zero_is_identity():
    box = Box(-1.0, -2.0, 1.0, 2.0)
    assert pad(box, 0.0) == box


def test_extend_box_covers_both():
    a = Box(0.0, 0.0, 1.0, 1.0)
    b = Box(2.0, -1.0, 3.0, 0.5)
    ext = extend_box(a, b)
    assert ext == Box(0.0, -1.0, 3.0, 1.0)
    assert extend_box(b, a) == ext


def test_common_area_disjoint_is_zero():
    assert common_area(Box(0.0, 0.0, 1.0, 1.0), Box(2.0, 2.0, 3.0, 3.0)) == 0.0


def test_common_area_overlap():
    assert common_area(Box(0.0, 0.0, 2.0, 2.0), Box(1.0, 1.0, 3.0, 3.0)) == pytest.approx(1.0)


def test_common_area_with_itself_is_area():
    box = Box(0.0, 0.0, 2.0, 3.0)
    assert common_area(box, box) == pytest.approx((box.max_x - box.min_x) * (box.max_y - box.min_y))


def test_box_contains_inclusive_borders():
    box = Box(0.0, 0.0, 1.0, 1.0)
    assert box_contains(box, 0.0, 0.0)
    assert box_contains(box, 1.0, 1.0)
    assert box_contains(box, 0.5, 0.5)
    assert not box_contains(box, 1.0001, 0.5)
    assert not box_contains(box, 0.5, -0.0001)


def test_corners():
    box = Box(1.0, 2.0, 3.0, 4.0)
    assert box.lower_left == (1.0, 2.0)
    assert box.upper_right == (3.0, 4.0)


def test_web_merc_origin():
    x, y = lat_lng_to_web_merc(0.0, 0.0)
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0)


def test_web_merc_antimeridian():
    x, _ = lat_lng_to_web_merc(0.0, 180.0)
    assert x == pytest.approx(math.pi * 6378137.0)


def test_web_merc_symmetry():
    _, north = lat_lng_to_web_merc(45.0, 10.0)
    _, south = lat_lng_to_web_merc(-45.0, 10.0)
    assert north == pytest.approx(-south)
    assert north > 0