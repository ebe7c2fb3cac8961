"""Tests for ui/icon.py - the pixel mask behind the window icon."""

from ui.icon import ICON_SIZE, icon_mask


def test_mask_dimensions():
    mask = icon_mask()
    assert len(mask) == ICON_SIZE
    assert all(len(row) == ICON_SIZE for row in mask)


def test_letter_i_bar():
    mask = icon_mask()
    assert all(mask[y][9] for y in range(6, 18))
    assert not mask[18][9]
    assert not mask[5][9]


def test_letter_v_strokes_meet_at_bottom():
    mask = icon_mask()
    # Both strokes start apart at the top and converge by row 17
    assert mask[6][16] and mask[6][26]
    assert mask[17][21]
    assert not any(mask[y][x] for y in range(26, ICON_SIZE) for x in range(ICON_SIZE))


def test_corners_transparent():
    mask = icon_mask()
    assert not mask[0][0]
    assert not mask[31][31]
