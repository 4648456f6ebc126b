def policy(env):
    # Strategy: keep the paddle centre under the ball's next x position.
    # Only the horizontal error matters since the paddle is pinned to the
    # bottom; a dead zone of one paddle step stops it from jittering.
    ball_paddle = env.machine.state.ball_paddle
    cfg = env.config

    target_x = ball_paddle.x + ball_paddle.dx
    paddle_center = ball_paddle.paddle_x + cfg.paddle_width / 2
    error = target_x - paddle_center

    if env.machine.phase.terminal:
        return [0, 1, 0]  # Start a new game
    if error > cfg.paddle_step:
        return [4, 0, 0]  # Move right
    if error < -cfg.paddle_step:
        return [3, 0, 0]  # Move left
    return [0, 0, 0]  # Already under the ball
