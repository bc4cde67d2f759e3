import pytest

from flukit.watermark import Watermark


def test_defaults():
    mark = Watermark(text="draft")
    assert mark.gap == (100, 100)
    assert mark.offset == (50, 50)
    assert mark.rotate == 22
    assert mark.text_size == 16
    assert mark.text_color == (222, 222, 222, 222)


def test_offset_follows_custom_gap():
    mark = Watermark(gap=(40, 60))
    assert mark.offset == (20, 30)


def test_explicit_offset_kept():
    mark = Watermark(offset=(3, 7))
    assert mark.offset == (3, 7)


def test_first_center_is_offset_plus_half_text():
    mark = Watermark(offset=(10, 20))
    centers = mark.tile_centers(300, 200, 40, 12)
    assert centers[0] == (10 + 40 / 2, 20 + 12 / 2)


def test_grid_spacing_matches_step():
    mark = Watermark(gap=(60, 30))
    centers = mark.tile_centers(500, 400, 40, 10)
    xs = sorted({x for x, _ in centers})
    ys = sorted({y for _, y in centers})
    assert len(centers) == len(xs) * len(ys)
    assert all(b - a == 100 for a, b in zip(xs, xs[1:]))
    assert all(b - a == 40 for a, b in zip(ys, ys[1:]))


def test_tiles_cover_area():
    mark = Watermark()
    centers = mark.tile_centers(1000, 800, 50, 20)
    assert max(x for x, _ in centers) + 150 >= 1000
    assert max(y for _, y in centers) + 120 >= 800


def test_empty_area_gives_single_tile():
    mark = Watermark()
    assert len(mark.tile_centers(0, 0, 10, 10)) == 1


def test_zero_step_rejected():
    mark = Watermark(gap=(0, 0))
    with pytest.raises(ValueError):
        mark.tile_centers(100, 100, 0, 0)