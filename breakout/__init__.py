from breakout.collision import ball_hits, circle_rect_collision
from breakout.entities import Ball, Block, Paddle, darken_color
from breakout.game import Game, GameResult, GameState
from breakout.scheduler import FrameScheduler

__version__ = "0.1.0"
