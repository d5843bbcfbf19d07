import pytest

from breakout.entities import Ball, Block, Paddle, darken_color, hex_to_rgb


@pytest.mark.parametrize("dx, dy", [(4, -4), (10, 0), (0, -20), (-7, 7), (30, 40), (-0.5, 0.25), (8, 0)])
def test_speed_is_clamped_after_update(dx, dy):
    ball = Ball(400, 300, 8, max_speed=8)
    ball.dx, ball.dy = dx, dy
    ball.update()
    assert ball.speed <= 8 + 1e-9


def test_speed_clamp_keeps_direction():
    ball = Ball(0, 0, 8, max_speed=8)
    ball.dx, ball.dy = 30, 40
    ball.update()
    assert ball.speed == pytest.approx(8)
    assert ball.dx == pytest.approx(4.8)
    assert ball.dy == pytest.approx(6.4)
    # Position moves by the velocity before the clamp
    assert (ball.x, ball.y) == (30, 40)


def test_slow_ball_is_untouched():
    ball = Ball(10, 10, 8)
    ball.update()
    assert (ball.x, ball.y, ball.dx, ball.dy) == (14, 6, 4, -4)


def test_ball_reset_restores_serve_velocity():
    ball = Ball(10, 10, 8)
    ball.dx, ball.dy = -3, 7
    ball.reset(400, 550)
    assert (ball.x, ball.y, ball.dx, ball.dy) == (400, 550, 4, -4)


@pytest.mark.parametrize("x", [-500, -1, 0, 340, 680, 681, 5000])
def test_constrain_to_canvas(x):
    paddle = Paddle(x, 570, 120, 15)
    paddle.constrain_to_canvas(800)
    assert 0 <= paddle.x <= 800 - 120


def test_move_left_stops_at_wall():
    paddle = Paddle(3, 570, 120, 15, speed=8)
    paddle.move_left(800)
    assert paddle.x == 0


def test_move_right_stops_at_wall():
    paddle = Paddle(676, 570, 120, 15, speed=8)
    paddle.move_right(800)
    assert paddle.x == 680


def test_move_to_centers_on_pointer():
    paddle = Paddle(0, 570, 120, 15)
    paddle.move_to(400, 800)
    assert paddle.center_x == 400
    paddle.move_to(10, 800)
    assert paddle.x == 0


def test_paddle_reset_keeps_size_and_speed():
    paddle = Paddle(10, 20, 120, 15, speed=8)
    paddle.reset(340, 570)
    assert (paddle.x, paddle.y, paddle.width, paddle.height, paddle.speed) == (340, 570, 120, 15, 8)


def test_invalid_sizes_are_rejected():
    with pytest.raises(ValueError):
        Paddle(0, 0, 0, 15)
    with pytest.raises(ValueError):
        Ball(0, 0, -1)
    with pytest.raises(ValueError):
        Ball(0, 0, 8, max_speed=0)


def test_block_is_immutable():
    block = Block(0, 0, 70, 25, "#FF6B6B", 60)
    with pytest.raises(AttributeError):
        block.points = 1


def test_darken_color():
    # 2.55 * 20 rounds to 51
    assert darken_color("#FF6B6B", 20) == "#cc3838"
    assert darken_color("#000000", 20) == "#000000"
    assert darken_color("#FFFFFF", -100) == "#ffffff"


def test_darken_color_rounds_halves_up():
    # 2.55 * 30 is 76.5, which rounds up to 77
    assert darken_color("#FFFFFF", 30) == "#b2b2b2"


def test_hex_to_rgb_rejects_garbage():
    assert hex_to_rgb("#4ECDC4") == (78, 205, 196)
    with pytest.raises(ValueError):
        hex_to_rgb("#12")
    with pytest.raises(ValueError):
        hex_to_rgb("#GGGGGG")
