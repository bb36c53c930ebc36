def boxes_overlap(cx, cy, radius, rx, ry, rw, rh):
    """True when the ball's bounding square strictly overlaps the rectangle.

    Corners count as hits: this is a box-vs-box test, not a true circle
    distance check.
    """
    return (
        cx + radius > rx
        and cx - radius < rx + rw
        and cy + radius > ry
        and cy - radius < ry + rh
    )
