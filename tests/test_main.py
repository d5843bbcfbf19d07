import os
import subprocess
import sys

import pygame

from breakout.__main__ import handle_event, make_buttons
from breakout.game import GameState

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_window_entry_point_keeps_the_real_video_driver():
    env = dict(os.environ)
    env.pop("SDL_VIDEODRIVER", None)
    env["PYTHONPATH"] = ROOT + os.pathsep + env.get("PYTHONPATH", "")
    code = (
        "import os, sys\n"
        "import breakout.__main__\n"
        "assert 'SDL_VIDEODRIVER' not in os.environ, os.environ['SDL_VIDEODRIVER']\n"
        "assert 'breakout.env' not in sys.modules\n"
    )
    completed = subprocess.run([sys.executable, "-c", code], env=env, capture_output=True, text=True)
    assert completed.returncode == 0, completed.stderr


def test_keys_drive_the_game(game):
    buttons = make_buttons(game.WIDTH, game.HEIGHT)
    assert handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN), game, buttons)
    assert game.state == GameState.PLAYING
    handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), game, buttons)
    assert game.state == GameState.PAUSED
    handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r), game, buttons)
    assert game.state == GameState.MENU
    assert not handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), game, buttons)


def test_start_button_click(game):
    buttons = make_buttons(game.WIDTH, game.HEIGHT)
    rect, _ = buttons["start"]
    handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=rect.center, button=1), game, buttons)
    assert game.state == GameState.PLAYING
