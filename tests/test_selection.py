import pytest

from selection import MaskedSelection, Rect, RectSelection, SelectionError, ShapeMask


def test_rect_selection_scans_row_major():
    sel = RectSelection(10, 20, 3, 2)
    members = list(sel.members())
    assert [(xx, yy) for xx, yy, _, _ in members] == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert members[-1][2:] == (12, 21)


def test_masked_selection_maps_mask_local_to_absolute():
    mask = ShapeMask.from_cells(5, 7, 3, 3, [(2, 0), (0, 2)])
    sel = MaskedSelection(5, 7, 3, 3, mask)
    assert list(sel.members()) == [(2, 0, 7, 7), (0, 2, 5, 9)]


def test_masked_selection_iterates_mask_bounds_not_selection_size():
    mask = ShapeMask.from_cells(0, 0, 4, 1, [(3, 0)])
    sel = MaskedSelection(0, 0, 2, 2, mask)
    assert [(xx, yy) for xx, yy, _, _ in sel.members()] == [(3, 0)]


def test_masked_selection_rejects_misaligned_mask():
    mask = ShapeMask.from_cells(1, 1, 2, 2, [(0, 0)])
    with pytest.raises(SelectionError):
        MaskedSelection(0, 0, 2, 2, mask)


def test_masked_selection_rejects_short_mask_data():
    mask = ShapeMask(Rect(0, 0, 2, 2), bytes(8))
    with pytest.raises(SelectionError):
        MaskedSelection(0, 0, 2, 2, mask)


@pytest.mark.parametrize("w,h", [(0, 1), (1, 0), (-2, 3)])
def test_degenerate_size_is_rejected(w, h):
    with pytest.raises(SelectionError):
        RectSelection(0, 0, w, h)


def test_rect_union_and_contains():
    r = Rect().united(Rect(2, 2, 2, 2)).united(Rect(5, 0, 1, 1))
    assert r == Rect(2, 0, 4, 4)
    assert r.contains(5, 3)
    assert not r.contains(6, 3)
    assert Rect(0, 0, 0, 5).is_empty()
