"""Circle versus axis-aligned rectangle overlap test."""


def circle_rect_collision(cx, cy, radius, rx, ry, rw, rh):
    """
    Returns True when the circle centered at (cx, cy) overlaps the rectangle
    with top-left corner (rx, ry) and size (rw, rh).

    The circle center is clamped into the rectangle to find the nearest point;
    the shapes overlap when that point lies strictly inside the radius, so a
    circle that is exactly tangent to an edge or corner does not collide.
    """
    closest_x = max(rx, min(cx, rx + rw))
    closest_y = max(ry, min(cy, ry + rh))

    distance_x = cx - closest_x
    distance_y = cy - closest_y

    return (distance_x * distance_x + distance_y * distance_y) < (radius * radius)


def ball_hits(ball, rect):
    # Works for anything carrying x, y, width, height (Paddle, Block)
    return circle_rect_collision(
        ball.x, ball.y, ball.radius, rect.x, rect.y, rect.width, rect.height
    )
