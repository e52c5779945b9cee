"""Integer line rasterisation with an error-accumulating stepper."""

from __future__ import annotations

__all__ = ["line_points"]


def line_points(x: int, y: int, x_end: int, y_end: int) -> list[tuple[int, int]]:
    """Return the grid points of the line from ``(x, y)`` to ``(x_end, y_end)``.

    The line advances one unit per point along its longer axis and holds
    ``max(|dx|, |dy|) + 1`` points, both ends included.
    """
    dx = x_end - x
    dy = y_end - y
    x_step = 1 if dx >= 0 else -1
    y_step = 1 if dy >= 0 else -1
    adx, ady = abs(dx), abs(dy)
    points = [(x, y)]
    if adx > ady:
        error = adx // 2
        for _ in range(adx):
            error -= ady
            x += x_step
            if error < 0:
                y += y_step
                error += adx
            points.append((x, y))
    else:
        error = ady // 2
        for _ in range(ady):
            error -= adx
            y += y_step
            if error < 0:
                x += x_step
                error += ady
            points.append((x, y))
    return points