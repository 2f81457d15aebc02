"""
选区模型：矩形选区与带遮罩的形状选区。

三套坐标：画布绝对坐标、选区相对坐标、遮罩局部坐标。
两种选区共用同一个扫描例程 members()，区别只在成员判定与坐标映射。
"""


class SelectionError(ValueError):
    pass


class Rect:
    def __init__(self, x=0, y=0, w=0, h=0):
        self.x, self.y, self.w, self.h = x, y, w, h

    def update(self, x, y, w, h):
        self.x, self.y, self.w, self.h = x, y, w, h

    def is_empty(self):
        return self.w <= 0 or self.h <= 0

    def contains(self, x, y):
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def united(self, other):
        if self.is_empty(): return Rect(other.x, other.y, other.w, other.h)
        if other.is_empty(): return Rect(self.x, self.y, self.w, self.h)
        x1 = min(self.x, other.x); y1 = min(self.y, other.y)
        x2 = max(self.x + self.w, other.x + other.w); y2 = max(self.y + self.h, other.y + other.h)
        return Rect(x1, y1, x2 - x1, y2 - y1)

    def __eq__(self, other):
        if not isinstance(other, Rect): return NotImplemented
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def __repr__(self):
        return f"Rect({self.x}, {self.y}, {self.w}, {self.h})"


class ShapeMask:
    """
    遮罩网格：bounds 为绝对锚点与尺寸，data 每像素 4 字节，第 4 字节 (alpha) > 0 表示属于选区。
    get_shape_by_offset 返回的预览 Batch 也具备 bounds/data，可直接当遮罩使用。
    """
    def __init__(self, bounds, data):
        self.bounds = bounds
        self.data = bytes(data)

    @classmethod
    def from_cells(cls, x, y, w, h, cells):
        """cells 为遮罩局部坐标 (xx, yy) 的集合。"""
        data = bytearray(w * h * 4)
        for xx, yy in cells:
            data[(yy * w + xx) * 4 + 3] = 255
        return cls(Rect(x, y, w, h), data)


def mask_alpha(mask, xx, yy):
    bw = mask.bounds.w
    return mask.data[(yy * bw + xx) * 4 + 3]


class Selection:
    kind = None

    def __init__(self, x, y, w, h):
        if w < 1 or h < 1:
            raise SelectionError(f"selection size must be at least 1x1, got {w}x{h}")
        self.x, self.y, self.w, self.h = x, y, w, h

    def origin(self):
        return self.x, self.y

    # --- 子类提供：扫描范围、成员判定、坐标映射 ---
    def scan_size(self): raise NotImplementedError
    def contains_local(self, xx, yy): raise NotImplementedError
    def to_absolute(self, xx, yy): raise NotImplementedError

    def members(self):
        """按行优先顺序产出 (xx, yy, ax, ay)：局部偏移与对应的绝对坐标。"""
        w, h = self.scan_size()
        for yy in range(h):
            for xx in range(w):
                if not self.contains_local(xx, yy): continue
                ax, ay = self.to_absolute(xx, yy)
                yield xx, yy, ax, ay


class RectSelection(Selection):
    kind = "rect"

    def scan_size(self): return self.w, self.h
    def contains_local(self, xx, yy): return True
    def to_absolute(self, xx, yy): return self.x + xx, self.y + yy

    def __repr__(self):
        return f"RectSelection({self.x}, {self.y}, {self.w}, {self.h})"


class MaskedSelection(Selection):
    kind = "shape"

    def __init__(self, x, y, w, h, mask):
        super().__init__(x, y, w, h)
        bounds = mask.bounds
        # 擦除坐标取自选区原点，成员判定取自遮罩局部坐标，两者原点必须一致
        if (bounds.x, bounds.y) != (x, y):
            raise SelectionError(
                f"mask origin ({bounds.x}, {bounds.y}) does not match selection origin ({x}, {y})")
        if len(mask.data) < bounds.w * bounds.h * 4:
            raise SelectionError("mask data is shorter than its bounds")
        self.mask = mask

    @classmethod
    def from_mask(cls, mask):
        b = mask.bounds
        return cls(b.x, b.y, b.w, b.h, mask)

    def scan_size(self): return self.mask.bounds.w, self.mask.bounds.h
    def contains_local(self, xx, yy): return mask_alpha(self.mask, xx, yy) > 0

    def to_absolute(self, xx, yy):
        b = self.mask.bounds
        return b.x + xx, b.y + yy

    def __repr__(self):
        return f"MaskedSelection({self.x}, {self.y}, {self.w}, {self.h}, mask={self.mask.bounds!r})"
