import math

import pytest

from breakout.collision import ball_hits, circle_rect_collision
from breakout.entities import Ball, Block, Paddle


def test_center_inside_rect_collides():
    assert circle_rect_collision(100, 100, 8, 90, 90, 20, 20)


def test_far_circle_does_not_collide():
    assert not circle_rect_collision(200, 100, 8, 90, 90, 20, 20)


def test_edge_overlap_collides():
    # Center 5px left of the rect's left edge
    assert circle_rect_collision(85, 100, 8, 90, 90, 20, 20)


def test_tangent_to_edge_is_not_a_collision():
    assert not circle_rect_collision(82, 100, 8, 90, 90, 20, 20)
    assert not circle_rect_collision(100, 118, 8, 90, 90, 20, 20)


def test_corner_uses_euclidean_distance():
    # 6px off both axes from the (110, 110) corner is ~8.49px away
    assert not circle_rect_collision(116, 116, 8, 90, 90, 20, 20)
    # 5px off both axes is ~7.07px away
    assert circle_rect_collision(115, 115, 8, 90, 90, 20, 20)


@pytest.mark.parametrize("cx, cy", [(70, 70), (85, 100), (100, 125), (118, 95), (130, 130), (105, 105)])
def test_matches_minimum_distance(cx, cy):
    rx, ry, rw, rh, r = 90, 90, 20, 20, 8
    nearest_x = min(max(cx, rx), rx + rw)
    nearest_y = min(max(cy, ry), ry + rh)
    distance = math.hypot(cx - nearest_x, cy - nearest_y)
    assert circle_rect_collision(cx, cy, r, rx, ry, rw, rh) == (distance < r)


def test_ball_hits_accepts_entities():
    ball = Ball(100, 100, 8)
    assert ball_hits(ball, Block(90, 90, 20, 20, "#FF6B6B", 10))
    assert not ball_hits(ball, Paddle(300, 100, 120, 15))
