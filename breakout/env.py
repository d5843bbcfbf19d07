import logging
import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

# Set Pygame to run in a headless mode
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from breakout.game import Game, GameState
from breakout.scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class GameEnv(gym.Env):
    """
    Breakout as a Gymnasium environment.

    Each step applies the paddle action and then runs exactly one frame of
    the game's frame loop. The episode starts already in play; it ends when
    every block is destroyed (win) or the last life is lost (loss).
    """
    metadata = {"render_modes": ["rgb_array"]}

    # User-facing control and game descriptions
    user_guide = (
        "Controls: ← to move the paddle left, → to move right. Press Space to pause or resume."
    )
    game_description = (
        "Bounce the ball off your paddle to break every block before you run out of lives."
    )

    # Frame advance setting
    auto_advance = True

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        self.MAX_STEPS = 10000
        self.REWARD_LIFE_LOST = -1.0
        self.REWARD_WIN = 100.0
        self.REWARD_LOSS = -100.0

        self.scheduler = FrameScheduler()
        self.game = Game(scheduler=self.scheduler)

        # Gymnasium spaces
        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.game.HEIGHT, self.game.WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        self.steps = 0
        self.prev_space_held = False

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.game.reset_game()
        self.game.start_game()

        self.steps = 0
        self.prev_space_held = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        reward = 0.0
        game = self.game

        if game.state in (GameState.PLAYING, GameState.PAUSED):
            movement, space_held = action[0], action[1] == 1
            score_before, lives_before = game.score, game.lives

            if movement == 3:  # Left
                game.move_paddle_left()
            elif movement == 4:  # Right
                game.move_paddle_right()

            # Resuming runs a frame immediately; that is this step's frame
            resumed = False
            if space_held and not self.prev_space_held:
                was_paused = game.state == GameState.PAUSED
                game.toggle_pause()
                resumed = was_paused and game.state == GameState.PLAYING
            self.prev_space_held = space_held

            if not resumed:
                self.scheduler.run_frame()

            reward += game.score - score_before
            reward += (lives_before - game.lives) * self.REWARD_LIFE_LOST
            if game.state == GameState.WON:
                reward += self.REWARD_WIN
            elif game.state == GameState.GAME_OVER:
                reward += self.REWARD_LOSS

        self.steps += 1
        terminated = game.state in (GameState.GAME_OVER, GameState.WON)
        truncated = not terminated and self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            float(reward),
            terminated,
            truncated,
            self._get_info()
        )

    def _get_observation(self):
        return self.game.get_observation()

    def _get_info(self):
        return {
            "score": self.game.score,
            "lives": self.game.lives,
            "steps": self.steps,
            "blocks_left": len(self.game.blocks),
            "state": self.game.state.value,
        }

    def render(self):
        if self.render_mode == "rgb_array":
            return self._get_observation()

    def close(self):
        self.game.reset_game()
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.game.HEIGHT, self.game.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.game.HEIGHT, self.game.WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.game.HEIGHT, self.game.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert not trunc
        assert isinstance(info, dict)

        logger.info("Implementation validated successfully")
