import logging
from collections import namedtuple
from enum import Enum

import numpy as np
import pygame
import pygame.gfxdraw

from breakout.collision import ball_hits
from breakout.entities import Ball, Block, Paddle, darken_color, hex_to_rgb
from breakout.scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"


GameResult = namedtuple("GameResult", ["won", "title", "message", "score"])


class Game:
    """
    Classic Breakout on a 2D canvas.

    The game owns a paddle, a ball and a grid of scorable blocks. It runs a
    small state machine (menu, playing, paused, game over, won) and a
    self-rescheduling frame loop: while playing, every frame advances the
    ball, resolves wall, floor, paddle and block collisions, and redraws the
    canvas onto an off-screen ``pygame.Surface``. The frame loop is driven by
    a ``FrameScheduler`` that the owner ticks, so the same game runs behind a
    pygame window or inside a Gymnasium environment.
    """

    def __init__(self, width=800, height=600, scheduler=None, on_hud=None, on_finish=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")

        # --- Game Constants ---
        self.WIDTH, self.HEIGHT = width, height
        self.INITIAL_LIVES = 3

        # Paddle
        self.PADDLE_WIDTH, self.PADDLE_HEIGHT = 120, 15
        self.PADDLE_SPEED = 8
        self.PADDLE_STEER = 5  # dx at the very edge of the paddle

        # Ball
        self.BALL_RADIUS = 8
        self.BALL_MAX_SPEED = 8

        # Blocks
        self.BLOCK_ROWS, self.BLOCK_COLS = 6, 10
        self.BLOCK_WIDTH, self.BLOCK_HEIGHT = 70, 25
        self.BLOCK_PADDING = 5
        self.BLOCK_OFFSET_TOP = 60

        # Colors
        self.COLOR_BG = (0, 0, 0)
        self.COLOR_TEXT = (255, 255, 255)
        self.COLOR_PADDLE = (78, 205, 196)
        self.COLOR_PADDLE_SHADE = (68, 160, 141)
        self.COLOR_BALL = (255, 107, 107)
        self.COLOR_BALL_CORE = (255, 255, 255)
        self.BLOCK_COLORS = ["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FECA57", "#FF9FF3"]

        # --- Pygame Setup ---
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.WIDTH, self.HEIGHT))
        self.font_prompt = pygame.font.Font(None, 32)
        self.font_overlay = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 28)

        # --- Frame scheduling and listeners ---
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()
        self.frame_id = None
        self.on_hud = on_hud
        self.on_finish = on_finish

        # --- State Variables ---
        self.state = GameState.MENU
        self.score = 0
        self.lives = self.INITIAL_LIVES
        self.result = None
        self.paddle = Paddle(*self._paddle_start(), self.PADDLE_WIDTH, self.PADDLE_HEIGHT, self.PADDLE_SPEED)
        self.ball = Ball(*self._serve_position(), self.BALL_RADIUS, self.BALL_MAX_SPEED)
        self.blocks = []

        self.init_blocks()

    def _paddle_start(self):
        return self.WIDTH / 2 - self.PADDLE_WIDTH / 2, self.HEIGHT - 30

    def _serve_position(self):
        return self.WIDTH / 2, self.HEIGHT - 50

    def init_blocks(self):
        self.blocks = []
        rows, cols = self.BLOCK_ROWS, self.BLOCK_COLS
        pitch_x = self.BLOCK_WIDTH + self.BLOCK_PADDING
        pitch_y = self.BLOCK_HEIGHT + self.BLOCK_PADDING
        offset_left = (self.WIDTH - (cols * pitch_x - self.BLOCK_PADDING)) / 2

        for row in range(rows):
            for col in range(cols):
                # Higher rows are worth more
                self.blocks.append(Block(
                    x=offset_left + col * pitch_x,
                    y=self.BLOCK_OFFSET_TOP + row * pitch_y,
                    width=self.BLOCK_WIDTH,
                    height=self.BLOCK_HEIGHT,
                    color=self.BLOCK_COLORS[row % len(self.BLOCK_COLORS)],
                    points=(rows - row) * 10,
                ))

    # --- Commands ---

    def start_game(self):
        if self.state != GameState.MENU:
            logger.debug("Ignoring start while %s", self.state.value)
            return
        self._set_state(GameState.PLAYING)
        self.ball.reset(*self._serve_position())
        self.game_loop()

    def toggle_pause(self):
        if self.state == GameState.PLAYING:
            self.pause_game()
        elif self.state == GameState.PAUSED:
            self.resume_game()
        else:
            logger.debug("Ignoring pause toggle while %s", self.state.value)

    def pause_game(self):
        if self.state != GameState.PLAYING:
            return
        self._set_state(GameState.PAUSED)
        self._cancel_frame()

    def resume_game(self):
        if self.state != GameState.PAUSED:
            return
        self._set_state(GameState.PLAYING)
        self.game_loop()

    def reset_game(self):
        self._cancel_frame()
        self._set_state(GameState.MENU)
        self.score = 0
        self.lives = self.INITIAL_LIVES
        self.result = None
        self.paddle.reset(*self._paddle_start())
        self.ball.reset(*self._serve_position())
        self.init_blocks()
        self._publish_hud()

    def move_paddle_left(self):
        self.paddle.move_left(self.WIDTH)

    def move_paddle_right(self):
        self.paddle.move_right(self.WIDTH)

    def pointer_move(self, x):
        if self.state == GameState.PLAYING:
            self.paddle.move_to(x, self.WIDTH)

    # --- Frame loop ---

    def game_loop(self):
        self.frame_id = None
        if self.state != GameState.PLAYING:
            return

        self.update()
        self.render()

        if self.state == GameState.PLAYING:
            self.frame_id = self.scheduler.request(self.game_loop)

    def _cancel_frame(self):
        self.scheduler.cancel(self.frame_id)
        self.frame_id = None

    def update(self):
        ball = self.ball
        ball.update()

        # Walls
        if ball.x <= ball.radius or ball.x >= self.WIDTH - ball.radius:
            ball.dx *= -1
        if ball.y <= ball.radius:
            ball.dy *= -1

        # Floor
        if ball.y >= self.HEIGHT - ball.radius:
            self.lives -= 1
            logger.info("Ball lost, %d lives left", self.lives)
            if self.lives <= 0:
                self.lives = 0
                self._finish(won=False)
                self._publish_hud()
                return
            ball.reset(*self._serve_position())

        # Paddle: steer by where the ball hit, relative to the paddle center
        if ball_hits(ball, self.paddle):
            hit_pos = (ball.x - self.paddle.center_x) / (self.paddle.width / 2)
            ball.dy = -abs(ball.dy)
            ball.dx = hit_pos * self.PADDLE_STEER

        # Blocks: at most one per frame
        for i in range(len(self.blocks) - 1, -1, -1):
            block = self.blocks[i]
            if ball_hits(ball, block):
                self.score += block.points
                del self.blocks[i]
                ball.dy *= -1
                logger.debug("Block hit for %d points, %d left", block.points, len(self.blocks))
                if not self.blocks:
                    self._finish(won=True)
                break

        self._publish_hud()

    def _set_state(self, state):
        if state != self.state:
            logger.info("State %s -> %s", self.state.value, state.value)
        self.state = state

    def _finish(self, won):
        self._set_state(GameState.WON if won else GameState.GAME_OVER)
        self._cancel_frame()
        if won:
            self.result = GameResult(True, "Congratulations!", f"You broke every block! Final score: {self.score}", self.score)
        else:
            self.result = GameResult(False, "Game Over!", f"Final score: {self.score}", self.score)
        if self.on_finish is not None:
            self.on_finish(self.result)

    def hud(self):
        return {"score": self.score, "lives": self.lives}

    def _publish_hud(self):
        if self.on_hud is not None:
            self.on_hud(self.score, self.lives)

    # --- Rendering ---

    def render(self):
        self.screen.fill(self.COLOR_BG)
        self._render_paddle()
        self._render_ball()
        for block in self.blocks:
            self._render_block(block)
        self._render_overlay()

    def _render_paddle(self):
        p = self.paddle
        rect = pygame.Rect(int(p.x), int(p.y), int(p.width), int(p.height))
        pygame.draw.rect(self.screen, self.COLOR_PADDLE, rect)
        shade = rect.copy()
        shade.height = rect.height // 2
        shade.bottom = rect.bottom
        pygame.draw.rect(self.screen, self.COLOR_PADDLE_SHADE, shade)
        # Highlight
        pygame.draw.rect(self.screen, self.COLOR_TEXT, (rect.x, rect.y, rect.width, 2))

    def _render_ball(self):
        x, y, r = int(self.ball.x), int(self.ball.y), int(self.ball.radius)
        pygame.gfxdraw.aacircle(self.screen, x, y, r, self.COLOR_BALL)
        pygame.gfxdraw.filled_circle(self.screen, x, y, r, self.COLOR_BALL)
        pygame.gfxdraw.filled_circle(self.screen, x - 2, y - 2, max(1, r // 3), self.COLOR_BALL_CORE)

    def _render_block(self, block):
        rect = pygame.Rect(int(block.x), int(block.y), int(block.width), int(block.height))
        pygame.draw.rect(self.screen, hex_to_rgb(block.color), rect)
        lower = rect.copy()
        lower.height = rect.height // 2
        lower.bottom = rect.bottom
        pygame.draw.rect(self.screen, hex_to_rgb(darken_color(block.color, 20)), lower)
        pygame.draw.rect(self.screen, self.COLOR_TEXT, rect, 1)

        highlight = pygame.Surface((rect.width, 3), pygame.SRCALPHA)
        highlight.fill((255, 255, 255, 77))
        self.screen.blit(highlight, rect.topleft)

    def _render_overlay(self):
        center = (self.WIDTH / 2, self.HEIGHT / 2)
        if self.state == GameState.MENU:
            text = self.font_prompt.render("Click Start to play!", True, self.COLOR_TEXT)
            self.screen.blit(text, text.get_rect(center=center))
        elif self.state == GameState.PAUSED:
            veil = pygame.Surface((self.WIDTH, self.HEIGHT), pygame.SRCALPHA)
            veil.fill((0, 0, 0, 178))
            self.screen.blit(veil, (0, 0))
            text = self.font_overlay.render("PAUSED", True, self.COLOR_TEXT)
            self.screen.blit(text, text.get_rect(center=center))
        elif self.result is not None:
            color = (100, 255, 100) if self.result.won else (255, 100, 100)
            title = self.font_overlay.render(self.result.title, True, color)
            self.screen.blit(title, title.get_rect(center=(center[0], center[1] - 20)))
            message = self.font_small.render(self.result.message, True, self.COLOR_TEXT)
            self.screen.blit(message, message.get_rect(center=(center[0], center[1] + 20)))

    def get_observation(self):
        self.render()
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)
