"""
collision_checks.py
-------------------
Pure intersection predicates. No side effects, no owned state.
"""


def is_bubble_hit(bubble, bullet) -> bool:
    """
    True if the bullet center lies strictly inside the bubble.

    The bullet is treated as a point; a bullet exactly on the rim misses.
    """
    dx = bubble.get_center_x() - bullet.get_center_x()
    dy = bubble.get_center_y() - bullet.get_center_y()
    r = bubble.get_radius()
    return dx * dx + dy * dy < r * r


def is_shooter_hit(shooter, bubble) -> bool:
    """
    True if the bubble touches the shooter's head or body.

    Head: circle-vs-circle overlap.
    Body: bubble center inside the body rectangle grown by the bubble
    radius on every side. This over-reports near the rectangle corners.
    """
    bx = bubble.get_center_x()
    by = bubble.get_center_y()
    br = bubble.get_radius()

    # Head circle
    hx = shooter.get_head_center_x() - bx
    hy = shooter.get_head_center_y() - by
    reach = shooter.get_head_radius() + br
    if hx * hx + hy * hy < reach * reach:
        return True

    # Expanded body rectangle
    half_w = shooter.get_body_width() / 2 + br
    half_h = shooter.get_body_height() / 2 + br
    cx = shooter.get_body_center_x()
    cy = shooter.get_body_center_y()
    return (cx - half_w < bx < cx + half_w) and (cy - half_h < by < cy + half_h)
