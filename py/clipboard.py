from collections import namedtuple

# 相对于选区自身原点的坐标 (矩形取 x,y；形状取遮罩 bounds 的 bx,by)
PixelEntry = namedtuple("PixelEntry", ["x", "y", "color"])


class ClipboardEntry:
    def __init__(self, pixels, selection):
        self.pixels = list(pixels) if pixels is not None else None
        self.selection = selection

    def is_empty(self):
        return not self.pixels

    def __repr__(self):
        count = len(self.pixels) if self.pixels is not None else 0
        return f"ClipboardEntry({count} pixels, {self.selection!r})"


class Clipboard:
    """单槽剪贴板，同一时刻最多保存一次复制结果。"""
    def __init__(self):
        self._entry = None

    @property
    def copy(self):
        return self._entry

    def set(self, entry):
        self._entry = entry

    def peek(self):
        return self._entry

    def take(self):
        entry, self._entry = self._entry, None
        return entry

    def clear(self):
        self._entry = None

    def has_content(self):
        return self._entry is not None and not self._entry.is_empty()
