def policy(env):
    # Strategy: keep the paddle center under the ball. While the ball is falling,
    # aim slightly past it toward the side with more blocks left, so the paddle
    # bounce (which steers by hit offset) sends the ball back into the grid.
    # A dead zone of half the paddle speed stops the paddle from jittering.
    game = env.game
    ball, paddle = game.ball, game.paddle

    target = ball.x
    if ball.dy > 0 and game.blocks:
        blocks_center = sum(b.x + b.width / 2 for b in game.blocks) / len(game.blocks)
        lean = paddle.width / 4
        target += -lean if blocks_center > ball.x else lean

    dx = target - paddle.center_x
    dead_zone = paddle.speed / 2

    if dx > dead_zone:
        return [4, 0, 0]  # Move right
    elif dx < -dead_zone:
        return [3, 0, 0]  # Move left
    else:
        return [0, 0, 0]  # Hold
