from collections import deque

# --- 魔棒分类码 ---
EXTERIOR = 0
BOUNDARY = 1
INTERIOR = 2


def binary_shape(get_pixel, bounds, x, y, color):
    """
    魔棒：从 (x, y) 出发做四邻域洪水填充，收集与种子颜色 RGBA 完全相同的连通像素。
    返回 bounds 范围内行优先的分类码列表 (长度 bw*bh)：
    INTERIOR 为填充区域，BOUNDARY 为紧贴区域外侧的一圈，其余为 EXTERIOR。
    bounds 为空或种子不在 bounds 内时返回 None。
    """
    if bounds.is_empty() or not bounds.contains(x, y):
        return None
    bx, by, bw, bh = bounds.x, bounds.y, bounds.w, bounds.h
    target = color.rgba()

    codes = [EXTERIOR] * (bw * bh)
    visited = bytearray(bw * bh)
    queue = deque([(x - bx, y - by)])
    region = []

    while queue:
        xx, yy = queue.popleft()
        idx = yy * bw + xx
        if visited[idx]: continue
        visited[idx] = 1
        pixel = get_pixel(bx + xx, by + yy)
        if pixel is None or pixel.rgba() != target: continue
        codes[idx] = INTERIOR
        region.append((xx, yy))
        if xx > 0 and not visited[idx - 1]: queue.append((xx - 1, yy))
        if xx + 1 < bw and not visited[idx + 1]: queue.append((xx + 1, yy))
        if yy > 0 and not visited[idx - bw]: queue.append((xx, yy - 1))
        if yy + 1 < bh and not visited[idx + bw]: queue.append((xx, yy + 1))

    if not region:
        return None

    for xx, yy in region:
        for nx, ny in ((xx - 1, yy), (xx + 1, yy), (xx, yy - 1), (xx, yy + 1)):
            if 0 <= nx < bw and 0 <= ny < bh and codes[ny * bw + nx] == EXTERIOR:
                codes[ny * bw + nx] = BOUNDARY
    return codes
