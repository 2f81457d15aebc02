from PyQt6.QtGui import QColor, QImage
from PyQt6.QtCore import Qt

from selection import Rect


def image_bytes(image: QImage) -> bytes:
    """QImage 原始像素字节 (按扫描行顺序)。"""
    ptr = image.constBits()
    ptr.setsize(image.sizeInBytes())
    return bytes(ptr)


class Batch:
    """
    像素写入累加器，也是撤销/重做的最小单位。
    writes 保存绝对坐标 -> 颜色；擦除批次里颜色是被擦掉的原色。
    预览批次 (get_shape_by_offset) 不走 writes，而是直接带 buffer/data。
    """
    def __init__(self, x, y):
        self.x, self.y = x, y
        self.bounds = Rect(x, y, 0, 0)
        self.is_eraser = False
        self.writes = {}
        self.previous = {}
        self.layer = None
        self.buffer = None
        self.data = None
        self.texture = None
        self.texture_dirty = True

    def resize_by_rect(self, x, y, w, h):
        # w/h 为包含式跨度 (宽-1, 高-1)
        self.bounds.update(x, y, w + 1, h + 1)

    def resize_by_matrix_data(self):
        if self.data is None: return
        if self.buffer is not None:
            self.bounds.update(self.bounds.x, self.bounds.y, self.buffer.width(), self.buffer.height())
        expected = self.bounds.w * self.bounds.h * 4
        if len(self.data) != expected:
            raise ValueError(f"batch data holds {len(self.data)} bytes, bounds need {expected}")

    def draw_pixel_fast(self, x, y, color):
        self.writes[(x, y)] = QColor(color)

    def erase_pixel_fast(self, x, y, color):
        self.writes[(x, y)] = QColor(color)

    def is_empty(self):
        return not self.writes and self.data is None

    def refresh_texture(self, rebuild_geometry):
        """rebuild_geometry 为 False 时只标记脏，纹理在 get_texture() 时再生成。"""
        self.texture_dirty = True
        if rebuild_geometry:
            self._rebuild_texture()

    def get_texture(self):
        if self.texture_dirty or self.texture is None:
            self._rebuild_texture()
        return self.texture

    def _rebuild_texture(self):
        if self.buffer is not None:
            self.texture = self.buffer.copy()
        else:
            b = self.bounds
            texture = QImage(max(b.w, 1), max(b.h, 1), QImage.Format.Format_ARGB32)
            texture.fill(Qt.GlobalColor.transparent)
            if not self.is_eraser:
                for (x, y), color in self.writes.items():
                    if b.contains(x, y): texture.setPixelColor(x - b.x, y - b.y, color)
            self.texture = texture
        self.texture_dirty = False

    def __repr__(self):
        mode = "erase" if self.is_eraser else "paint"
        return f"Batch({self.x}, {self.y}, {mode}, {len(self.writes)} writes, bounds={self.bounds!r})"
