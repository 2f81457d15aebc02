"""
选区编辑引擎：复制 / 粘贴 / 剪切 / 清除，以及魔棒选区预览。

所有失败路径都是静默的空操作 (返回 None)，不会抛出异常：
选区内没有可绘制像素、没有可剪切的内容、取色点为空、或结果批次为空。
"""
import logging

from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtCore import Qt

from batch import image_bytes
from clipboard import Clipboard, ClipboardEntry, PixelEntry
from commands import CommandKind
from raster_algorithms import INTERIOR
from selection import MaskedSelection
from settings_manager import resolve_settings

logger = logging.getLogger(__name__)


class SelectionEditor:
    def __init__(self, get_pixel_at, create_batch, get_current_layer, enqueue,
                 get_binary_shape, get_bounds, clipboard=None, settings=None):
        self.get_pixel_at = get_pixel_at
        self.create_batch = create_batch
        self.get_current_layer = get_current_layer
        self.enqueue = enqueue
        self.get_binary_shape = get_binary_shape
        self.get_bounds = get_bounds
        self.clipboard = clipboard if clipboard is not None else Clipboard()
        self.settings = resolve_settings(settings)

    @classmethod
    def for_canvas(cls, canvas, clipboard=None, settings=None):
        return cls(canvas.get_pixel_at, canvas.create_dynamic_batch, canvas.get_current_layer,
                   canvas.enqueue, canvas.get_binary_shape, lambda: canvas.bounds,
                   clipboard=clipboard, settings=settings if settings is not None else canvas.settings)

    def selection_tint(self):
        tint = QColor(self.settings["selection_color"])
        tint.setAlphaF(self.settings["selection_alpha"])
        return tint

    # --- 复制 ---
    def copy(self, selection):
        self.clipboard.clear()
        if selection.kind == "shape":
            return self.copy_by_shape(selection)
        return self.copy_by_selection(selection)

    def copy_by_shape(self, selection):
        return self._copy_members(selection)

    def copy_by_selection(self, selection):
        return self._copy_members(selection)

    def _copy_members(self, selection):
        pixels = []
        for xx, yy, ax, ay in selection.members():
            color = self.get_pixel_at(ax, ay)
            if color is None: continue
            pixels.append(PixelEntry(xx, yy, color))
        entry = ClipboardEntry(pixels, selection)
        self.clipboard.set(entry)
        if not pixels:
            logger.debug("copy over %r found no drawn pixels", selection)
        return entry

    # --- 粘贴 ---
    def paste(self, x, y, board=None):
        if board is None: board = self.clipboard.peek()
        if board is None or not board.pixels:
            logger.debug("paste at (%d, %d) skipped, nothing on the clipboard", x, y)
            return None
        selection = board.selection
        batch = self.create_batch(x, y)
        layer = self.get_current_layer()
        batch.resize_by_rect(x, y, selection.w - 1, selection.h - 1)
        for pixel in board.pixels:
            batch.draw_pixel_fast(x + pixel.x, y + pixel.y, pixel.color)
        batch.refresh_texture(False)
        layer.add_batch(batch)
        self.enqueue(CommandKind.PASTE, batch)
        return batch

    # --- 剪切 ---
    def cut(self, selection):
        entry = self.copy(selection)
        if not entry.pixels:
            logger.debug("nothing to cut in %r", selection)
            return None
        return self.clear_rect(selection)

    # --- 清除 ---
    def _create_eraser(self, selection):
        batch = self.create_batch(selection.x, selection.y)
        batch.is_eraser = True
        batch.resize_by_rect(selection.x, selection.y, selection.w - 1, selection.h - 1)
        return batch

    def clear_rect(self, selection):
        if selection.kind == "shape":
            return self.clear_by_shape(selection)
        batch = self._create_eraser(selection)
        for xx, yy, ax, ay in selection.members():
            color = self.get_pixel_at(ax, ay)
            if color is None: continue
            batch.erase_pixel_fast(ax, ay, color)
        batch.refresh_texture(False)
        # 没有可删除的像素
        if batch.is_empty():
            logger.debug("clear over %r erased nothing", selection)
            return None
        return self._commit_clear(batch)

    def clear_by_shape(self, selection):
        x, y = selection.origin()
        batch = self._create_eraser(selection)
        count = 0
        for xx, yy, ax, ay in selection.members():
            color = self.get_pixel_at(ax, ay)
            if color is None: continue
            # 遮罩原点与选区原点一致 (MaskedSelection 构造时保证)
            batch.erase_pixel_fast(x + xx, y + yy, color)
            count += 1
        if count <= 0:
            logger.debug("shape clear over %r erased nothing", selection)
            return None
        batch.refresh_texture(False)
        return self._commit_clear(batch)

    def _commit_clear(self, batch):
        self.get_current_layer().add_batch(batch)
        self.enqueue(CommandKind.CLEAR, batch)
        return batch

    # --- 魔棒预览 ---
    def get_shape_by_offset(self, x, y):
        color = self.get_pixel_at(x, y)
        if color is None:
            logger.debug("no pixel at (%d, %d), no shape to select", x, y)
            return None
        shape = self.get_binary_shape(x, y, color)
        if shape is None:
            logger.debug("no enclosable shape at (%d, %d)", x, y)
            return None
        bounds = self.get_bounds()
        bx, by, bw, bh = bounds.x, bounds.y, bounds.w, bounds.h

        buffer = QImage(bw, bh, QImage.Format.Format_RGBA8888)
        buffer.fill(Qt.GlobalColor.transparent)
        tint = self.selection_tint()
        painter = QPainter(buffer)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        for ii in range(len(shape)):
            if shape[ii] != INTERIOR: continue
            painter.fillRect(ii % bw, ii // bw, 1, 1, tint)
        painter.end()

        batch = self.create_batch(x, y)
        batch.buffer = buffer
        batch.data = image_bytes(buffer)
        batch.bounds.update(bx, by, bw, bh)
        batch.resize_by_matrix_data()
        batch.refresh_texture(True)
        return batch

    def select_shape_at(self, x, y):
        """魔棒选区：预览批次本身就是遮罩。"""
        preview = self.get_shape_by_offset(x, y)
        if preview is None: return None
        return MaskedSelection.from_mask(preview)
