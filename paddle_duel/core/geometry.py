"""
Scalar helpers and axis-aligned rectangle overlap test
"""


def absolute(a: float) -> float:
    """Absolute value, returning ``-a`` only for strictly negative input"""
    return -a if a < 0 else a


def sign(a: float) -> float:
    """Sign of ``a``; zero counts as positive"""
    return -1.0 if a < 0 else 1.0


def rect_overlap(
    ax: float,
    ay: float,
    aw: float,
    ah: float,
    bx: float,
    by: float,
    bw: float,
    bh: float,
) -> bool:
    """
    Checks whether two axis-aligned rectangles overlap.

    Rectangles are given by their top-left corner and size. The test compares
    the distance between centers with the half-extents of the Minkowski sum,
    so rectangles that only share an edge do not overlap.

    Returns:
        True if the rectangles intersect with a non-zero area
    """
    a_center_x = ax + aw / 2
    a_center_y = ay + ah / 2
    b_center_x = bx + bw / 2
    b_center_y = by + bh / 2

    dx = absolute(a_center_x - b_center_x) - (aw + bw) / 2
    dy = absolute(a_center_y - b_center_y) - (ah + bh) / 2

    return dx < 0 and dy < 0
