import pytest
from PyQt6.QtGui import QColor, QImage

from batch import Batch, image_bytes


def test_resize_by_rect_uses_inclusive_extent():
    batch = Batch(3, 4)
    batch.resize_by_rect(3, 4, 1, 2)
    assert (batch.bounds.w, batch.bounds.h) == (2, 3)


def test_emptiness_tracks_writes():
    batch = Batch(0, 0)
    assert batch.is_empty()
    batch.erase_pixel_fast(1, 1, QColor(1, 2, 3))
    assert not batch.is_empty()


def test_texture_is_deferred_until_requested():
    batch = Batch(0, 0)
    batch.resize_by_rect(0, 0, 1, 1)
    batch.draw_pixel_fast(1, 0, QColor(255, 0, 0))
    batch.refresh_texture(False)
    assert batch.texture is None
    texture = batch.get_texture()
    assert texture.size().width() == 2
    assert texture.pixelColor(1, 0) == QColor(255, 0, 0)
    assert texture.pixelColor(0, 0).alpha() == 0


def test_immediate_refresh_builds_texture():
    batch = Batch(0, 0)
    batch.resize_by_rect(0, 0, 0, 0)
    batch.draw_pixel_fast(0, 0, QColor(0, 0, 255))
    batch.refresh_texture(True)
    assert batch.texture is not None
    assert not batch.texture_dirty


def test_matrix_data_must_match_bounds():
    image = QImage(3, 2, QImage.Format.Format_RGBA8888)
    batch = Batch(0, 0)
    batch.buffer = image
    batch.data = image_bytes(image)
    batch.bounds.update(5, 5, 3, 2)
    batch.resize_by_matrix_data()
    assert len(batch.data) == 3 * 2 * 4
    batch.buffer = None
    batch.data = b"\x00" * 4
    with pytest.raises(ValueError):
        batch.resize_by_matrix_data()
