import pytest

from osmsieve.bbox_idx import BBoxIdx
from osmsieve.geo import Box, box_contains, min_box


def test_empty_index():
    idx = BBoxIdx(0.0)
    assert len(idx) == 0
    assert not idx.contains(0.0, 0.0)
    assert idx.full_box() == min_box()
    assert idx.leafs() == [min_box()]


def test_single_box_without_padding():
    box = Box(7.0, 47.0, 8.0, 48.0)
    idx = BBoxIdx(0.0)
    idx.add(box)
    assert len(idx) == 1
    assert idx.full_box() == box
    assert idx.leafs() == [box]
    assert idx.contains(7.5, 47.5)
    assert not idx.contains(9.0, 47.5)


def test_padding_in_metres():
    idx = BBoxIdx(83000.0)
    idx.add(Box(0.0, 0.0, 1.0, 1.0))
    full = idx.full_box()
    assert full.min_x == pytest.approx(-1.0)
    assert full.max_y == pytest.approx(2.0)
    assert idx.contains(1.5, 1.5)
    assert not idx.contains(2.5, 0.5)


def test_disjoint_boxes_make_separate_leafs():
    a = Box(0.0, 0.0, 1.0, 1.0)
    b = Box(10.0, 10.0, 11.0, 11.0)
    idx = BBoxIdx(0.0)
    idx.add(a)
    idx.add(b)
    assert len(idx) == 2
    assert idx.leafs() == [a, b]
    assert idx.full_box() == Box(0.0, 0.0, 11.0, 11.0)
    assert idx.contains(0.5, 0.5)
    assert idx.contains(10.5, 10.5)
    assert not idx.contains(5.0, 5.0)


def test_overlapping_boxes_merge_into_one_leaf():
    a = Box(0.0, 0.0, 2.0, 2.0)
    b = Box(1.0, 1.0, 3.0, 3.0)
    idx = BBoxIdx(0.0)
    idx.add(a)
    idx.add(b)
    assert len(idx) == 2
    assert idx.leafs() == [Box(0.0, 0.0, 3.0, 3.0)]


def test_leafs_cover_all_added_points():
    boxes = [Box(i * 5.0, 0.0, i * 5.0 + 1.0, 1.0) for i in range(4)]
    idx = BBoxIdx(0.0)
    for box in boxes:
        idx.add(box)
    leafs = idx.leafs()
    for box in boxes:
        cx = (box.min_x + box.max_x) / 2
        cy = (box.min_y + box.max_y) / 2
        assert any(box_contains(leaf, cx, cy) for leaf in leafs)
        assert idx.contains(cx, cy)


def test_web_merc_box_of_origin():
    idx = BBoxIdx(0.0)
    idx.add(Box(0.0, 0.0, 0.0, 0.0))
    merc = idx.full_web_merc_box()
    assert merc.min_x == pytest.approx(0.0)
    assert merc.max_y == pytest.approx(0.0)


def test_web_merc_box_is_ordered():
    idx = BBoxIdx(0.0)
    idx.add(Box(-10.0, -20.0, 10.0, 20.0))
    merc = idx.full_web_merc_box()
    assert merc.min_x < merc.max_x
    assert merc.min_y < merc.max_y
    assert merc.min_x == pytest.approx(-merc.max_x)