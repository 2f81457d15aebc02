from PyQt6.QtGui import QColor, QImage
from PyQt6.QtCore import Qt

from selection import Rect


class Layer:
    def __init__(self, name, width, height):
        self.name = name
        self.is_visible = True
        self.image = QImage(width, height, QImage.Format.Format_ARGB32)
        self.image.fill(Qt.GlobalColor.transparent)
        self.batches = []
        self.bounds = Rect()

    def get_pixel_at(self, x, y):
        """透明或越界返回 None。"""
        if not self.image.valid(x, y): return None
        color = self.image.pixelColor(x, y)
        if color.alpha() == 0: return None
        return color

    def add_batch(self, batch):
        previous = {}
        for (x, y), color in batch.writes.items():
            if not self.image.valid(x, y): continue
            previous[(x, y)] = self.image.pixelColor(x, y)
            if batch.is_eraser:
                self.image.setPixelColor(x, y, QColor(Qt.GlobalColor.transparent))
            else:
                self.image.setPixelColor(x, y, color)
        batch.previous = previous
        batch.layer = self
        self.batches.append(batch)
        # 擦除不收缩内容边界
        if not batch.is_eraser and not batch.bounds.is_empty():
            self.bounds = self.bounds.united(batch.bounds)

    def forget_batch(self, batch):
        """只停止跟踪，像素保持不变。"""
        if batch in self.batches: self.batches.remove(batch)

    def remove_batch(self, batch):
        if batch in self.batches: self.batches.remove(batch)
        for (x, y), color in reversed(list(batch.previous.items())):
            self.image.setPixelColor(x, y, color)

    def __repr__(self):
        return f"Layer({self.name!r}, {len(self.batches)} batches)"
