import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtGui import QColor, QGuiApplication

from canvas import PixelCanvas
from commands import PasteCommand
from editing import SelectionEditor


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QGuiApplication.instance() or QGuiApplication([])
    yield app


RED = QColor(255, 0, 0)
GREEN = QColor(0, 255, 0)
BLUE = QColor(0, 0, 255)


def draw(canvas, pixels, layer=None):
    """把 {(x, y): color} 直接画到图层上，不留历史记录。"""
    layer = layer or canvas.get_current_layer()
    xs = [x for x, _ in pixels]; ys = [y for _, y in pixels]
    batch = canvas.create_dynamic_batch(min(xs), min(ys))
    batch.resize_by_rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
    for (x, y), color in pixels.items():
        batch.draw_pixel_fast(x, y, color)
    canvas.execute_command(PasteCommand(layer, batch))
    canvas.undo_stack.clear()
    return batch


def fill(canvas, x, y, w, h, color):
    return draw(canvas, {(x + xx, y + yy): color for yy in range(h) for xx in range(w)})


@pytest.fixture
def canvas():
    return PixelCanvas(settings={"canvas_width": 32, "canvas_height": 32})


@pytest.fixture
def editor(canvas):
    return SelectionEditor.for_canvas(canvas)
