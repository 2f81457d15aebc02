import logging

from PyQt6.QtCore import QObject, pyqtSignal

from commands import create_command
from layer import Layer
from selection import Rect
from settings_manager import resolve_settings
from batch import Batch
import raster_algorithms

logger = logging.getLogger(__name__)


class PixelCanvas(QObject):
    """
    像素画布：提供取色 (PixelSource)、批次工厂、图层容器与撤销/重做历史。
    """
    undo_stack_changed = pyqtSignal(bool)
    redo_stack_changed = pyqtSignal(bool)
    layers_changed = pyqtSignal(list, int)

    def __init__(self, parent=None, settings=None):
        super().__init__(parent)
        self.settings = resolve_settings(settings)
        self.width = self.settings["canvas_width"]
        self.height = self.settings["canvas_height"]
        self.undo_limit = self.settings["undo_limit"]

        self.layers, self.current_layer_index = [], -1
        self.undo_stack, self.redo_stack = [], []
        self.add_layer("图层 1")

    # --- 图层 ---
    def add_layer(self, name=None):
        layer = Layer(name or f"图层 {len(self.layers) + 1}", self.width, self.height)
        self.layers.append(layer)
        self.current_layer_index = len(self.layers) - 1
        self.layers_changed.emit(self.layers, self.current_layer_index)
        return layer

    def set_current_layer(self, index):
        if 0 <= index < len(self.layers):
            self.current_layer_index = index
            self.layers_changed.emit(self.layers, self.current_layer_index)

    def get_current_layer(self):
        if 0 <= self.current_layer_index < len(self.layers):
            return self.layers[self.current_layer_index]
        return None

    # --- 取色 ---
    def get_pixel_at(self, x, y):
        """自上而下取第一个可见图层上的像素；透明或越界返回 None。"""
        for layer in reversed(self.layers):
            if not layer.is_visible: continue
            color = layer.get_pixel_at(x, y)
            if color is not None: return color
        return None

    @property
    def bounds(self):
        """所有图层已绘制内容的外接矩形，只增不减。"""
        bounds = Rect()
        for layer in self.layers:
            bounds = bounds.united(layer.bounds)
        return bounds

    def get_binary_shape(self, x, y, color):
        return raster_algorithms.binary_shape(self.get_pixel_at, self.bounds, x, y, color)

    def create_dynamic_batch(self, x, y):
        return Batch(x, y)

    # --- 历史记录 ---
    def enqueue(self, kind, batch):
        """记录已经应用到图层上的批次，不再重复执行。"""
        command = create_command(kind, batch.layer or self.get_current_layer(), batch)
        self.undo_stack.append(command)
        if self.undo_limit > 0 and len(self.undo_stack) > self.undo_limit:
            overflow = len(self.undo_stack) - self.undo_limit
            # 被挤出历史的批次不可能再撤销，图层不再跟踪它们
            for old in self.undo_stack[:overflow]:
                old.layer.forget_batch(old.batch)
            del self.undo_stack[:overflow]
        self.redo_stack.clear()
        logger.info("recorded %s for %r", command.kind.name, batch)
        self.update_stacks()

    def execute_command(self, command):
        command.redo()
        self.undo_stack.append(command)
        self.redo_stack.clear()
        self.update_stacks()

    def undo(self):
        if self.undo_stack:
            command = self.undo_stack.pop()
            command.undo()
            self.redo_stack.append(command)
            self.update_stacks()

    def redo(self):
        if self.redo_stack:
            command = self.redo_stack.pop()
            command.redo()
            self.undo_stack.append(command)
            self.update_stacks()

    def update_stacks(self):
        self.undo_stack_changed.emit(bool(self.undo_stack))
        self.redo_stack_changed.emit(bool(self.redo_stack))
